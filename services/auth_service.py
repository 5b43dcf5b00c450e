# -*- coding: utf-8 -*-
"""
Authentication service.

Holds the signed-in principal for the running application. Credential
checks happen upstream; this service only tracks who is signed in and
resolves profiles from the user repository.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.user import User
from repositories.database import Database
from repositories.user_repository import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthService(QObject):
    """
    Identity/session provider.

    Signals:
        session_changed(object): Emitted with the new User, or None on sign-out
    """

    session_changed = pyqtSignal(object)

    def __init__(self, db: Optional[Database] = None, parent=None):
        super().__init__(parent)
        self.db = db
        self.user_repo = UserRepository(db) if db is not None else None
        self._current_user: Optional[User] = None

    def current_user(self) -> Optional[User]:
        """The signed-in user, or None."""
        return self._current_user

    def sign_in(self, user: User) -> User:
        """Make the given user the current principal."""
        self._current_user = user
        logger.info(f"User signed in: {user.email}")
        self.session_changed.emit(user)
        return user

    def sign_in_with_email(self, email: str) -> Optional[User]:
        """
        Sign in an existing profile by email.

        Returns:
            The signed-in User, or None if no profile matches
        """
        if self.user_repo is None or not email:
            return None
        user = self.user_repo.get_by_email(email)
        if not user:
            logger.warning(f"Sign-in attempt with unknown email: {email}")
            return None
        return self.sign_in(user)

    def register(self, email: str, full_name: str = None) -> User:
        """Create a profile and sign it in."""
        user = User(email=email.strip(), full_name=full_name)
        if self.user_repo is not None:
            self.user_repo.create(user)
        return self.sign_in(user)

    def sign_out(self):
        """Clear the current principal."""
        if self._current_user is None:
            return
        logger.info(f"User signed out: {self._current_user.email}")
        self._current_user = None
        self.session_changed.emit(None)
