# -*- coding: utf-8 -*-
"""
User profile repository.
"""

from typing import Optional

from models.user import User
from .database import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for user profiles."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, user: User) -> User:
        """Create a new user profile."""
        query = """
            INSERT INTO users (
                id, email, full_name, avatar_url, language, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            user.user_id, user.email, user.full_name, user.avatar_url, user.language,
            user.created_at.isoformat() if user.created_at else None,
            user.updated_at.isoformat() if user.updated_at else None,
        )
        self.db.execute(query, params)
        logger.debug(f"Created user: {user.email}")
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        row = self.db.fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        if row:
            return self._row_to_user(row)
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        row = self.db.fetch_one(
            "SELECT * FROM users WHERE lower(email) = lower(?)", (email.strip(),)
        )
        if row:
            return self._row_to_user(row)
        return None

    def _row_to_user(self, row) -> User:
        """Convert database row to User object."""
        data = row.to_dict()
        data["user_id"] = data.pop("id")
        return User.from_dict(data)
