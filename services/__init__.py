# -*- coding: utf-8 -*-
"""
DocFlow Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "AuthService",
    "DocumentWorkflowService",
    "ValidationFactory",
    "calculate_grand_total",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "AuthService":
        from .auth_service import AuthService
        return AuthService
    elif name == "DocumentWorkflowService":
        from .workflow_service import DocumentWorkflowService
        return DocumentWorkflowService
    elif name == "ValidationFactory":
        from .validation import ValidationFactory
        return ValidationFactory
    elif name == "calculate_grand_total":
        from .document_totals import calculate_grand_total
        return calculate_grand_total
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
