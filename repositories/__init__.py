# -*- coding: utf-8 -*-
"""
DocFlow Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "Database",
    "DocumentRepository",
    "UserRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "Database":
        from .database import Database
        return Database
    elif name == "DocumentRepository":
        from .document_repository import DocumentRepository
        return DocumentRepository
    elif name == "UserRepository":
        from .user_repository import UserRepository
        return UserRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
