# -*- coding: utf-8 -*-
"""
DocFlow Data Models
"""

from .document import (
    DocumentKind,
    DocumentStatus,
    DocumentRecord,
    DocumentSummary,
    LineItem,
)
from .user import User

__all__ = [
    "DocumentKind",
    "DocumentStatus",
    "DocumentRecord",
    "DocumentSummary",
    "LineItem",
    "User",
]
