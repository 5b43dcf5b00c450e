# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""

from typing import Dict, List


class FieldValidationError(Exception):
    """Exception raised when one or more fields of a wizard section are invalid."""

    def __init__(self, message: str, field_errors: Dict[str, List[str]] = None,
                 section: str = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}
        self.section = section
        self.context = context

    @property
    def fields(self) -> List[str]:
        """Names (paths) of the failing fields."""
        return list(self.field_errors.keys())


class PersistenceError(Exception):
    """Exception raised when a finished document could not be stored."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context

    def __str__(self):
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class IllegalTransitionError(Exception):
    """Exception raised for a state transition the current state does not allow."""

    def __init__(self, message: str, state: str = None, operation: str = None):
        super().__init__(message)
        self.message = message
        self.state = state
        self.operation = operation
