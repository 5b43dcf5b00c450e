# -*- coding: utf-8 -*-
"""
User entity model (the authenticated principal).
"""

from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime
import uuid


@dataclass
class User:
    """
    Authenticated principal as seen by the document core.

    The id becomes `created_by` on stored documents.
    """

    user_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    email: str = ""
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    language: str = "en"  # "en" or "ar"

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def display_name(self) -> str:
        """Full name, falling back to the email address."""
        return self.full_name or self.email

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "full_name": self.full_name,
            "avatar_url": self.avatar_url,
            "language": self.language,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create User from dictionary."""
        data = dict(data)
        for field_name in ["created_at", "updated_at"]:
            if isinstance(data.get(field_name), str):
                data[field_name] = datetime.fromisoformat(data[field_name])

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
