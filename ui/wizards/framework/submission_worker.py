# -*- coding: utf-8 -*-
"""
Background worker for wizard submission.
"""

from typing import Any, Callable

from PyQt5.QtCore import QThread, pyqtSignal

from services.exceptions import PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionWorker(QThread):
    """
    Runs the persistence call off the UI thread.

    Only the call itself runs here; the wizard updates its state when the
    result signals arrive on its own thread.
    """

    succeeded = pyqtSignal(object)  # value returned by the submit function
    failed = pyqtSignal(object)  # PersistenceError

    def __init__(self, submit: Callable[[Any], Any], payload: Any, parent=None):
        super().__init__(parent)
        self._submit = submit
        self._payload = payload

    def run(self):
        """Run submission in background."""
        try:
            result = self._submit(self._payload)
        except PersistenceError as e:
            self.failed.emit(e)
        except Exception as e:
            logger.exception("Unexpected error during submission")
            self.failed.emit(PersistenceError(str(e), original_error=e, context="submit"))
        else:
            self.succeeded.emit(result)
