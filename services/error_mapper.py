# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import FieldValidationError, IllegalTransitionError, PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


def map_persistence_error(error: PersistenceError) -> str:
    """Map persistence exception to user-friendly translated message.

    Technical details are logged only - never shown to the user.
    """
    if error.original_error:
        logger.error(f"Persistence error: {error} (cause: {error.original_error!r})")
    else:
        logger.error(f"Persistence error: {error}")

    if error.context == "not_signed_in":
        return tr("error.persistence.not_signed_in")
    return tr("error.persistence.failed")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, PersistenceError):
        if not error.context and context:
            error.context = context
        return map_persistence_error(error)

    if isinstance(error, FieldValidationError):
        if error.field_errors:
            logger.warning(f"Validation error in {error.section}: {error.field_errors}")
        return tr("validation.check_data")

    if isinstance(error, IllegalTransitionError):
        logger.warning(f"Illegal transition '{error.operation}' in state {error.state}")
        return tr("error.transition.invalid")

    # Log unexpected errors
    logger.warning(f"Unexpected error{f' ({context})' if context else ''}: {error}")
    return tr("error.unexpected")

