# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Owns one wizard session and drives it:
- Section navigation through the StepNavigator
- Submission, inline or on a SubmissionWorker thread
- Failure handling and retry
- Cancellation
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot

from app.config import Config
from services.error_mapper import map_exception
from services.exceptions import IllegalTransitionError, PersistenceError
from services.validation import SectionValidationResult
from .section import SectionDefinition
from .step_navigator import StepNavigator
from .submission_worker import SubmissionWorker
from .wizard_context import SubmissionState, WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QObject, metaclass=ABCQObjectMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context(): Create and return wizard context
    - create_sections(): Create and return the ordered sections
    - build_submission(): Assemble the payload from the context
    - submit_payload(): Hand the payload to the persistence collaborator
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with the submitted data
    wizard_cancelled = pyqtSignal()
    submission_failed = pyqtSignal(str)  # user-facing reason
    submitting_changed = pyqtSignal(bool)
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(object)  # SectionValidationResult

    def __init__(
        self,
        on_complete: Optional[Callable[[Any], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        background_submission: Optional[bool] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the wizard.

        Args:
            on_complete: Called with the submitted payload after success
            on_cancel: Called after the session is cancelled
            background_submission: Run the persistence call on a worker
                thread (defaults to Config.WIZARD_BACKGROUND_SUBMIT)
        """
        super().__init__(parent)
        self._on_complete = on_complete
        self._on_cancel = on_cancel
        self.background_submission = (
            Config.WIZARD_BACKGROUND_SUBMIT if background_submission is None else background_submission
        )
        self._worker: Optional[SubmissionWorker] = None
        self._pending_payload: Any = None

        # Initialize context and sections
        self.context = self.create_context()
        self.sections = self.create_sections()

        # Create navigator
        self.navigator = StepNavigator(self.context, self.sections, parent=self)

        # Connect navigator signals
        self.navigator.step_changed.connect(self.step_changed)
        self.navigator.validation_failed.connect(self.validation_failed)
        self.navigator.submission_requested.connect(self._start_submission)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        """Create and return wizard context."""
        pass

    @abstractmethod
    def create_sections(self) -> List[SectionDefinition]:
        """Create and return the ordered list of sections."""
        pass

    @abstractmethod
    def build_submission(self) -> Any:
        """
        Assemble the submission payload from the confirmed sections.

        Runs on the wizard's thread.

        Raises:
            PersistenceError: If the payload cannot be assembled
        """
        pass

    @abstractmethod
    def submit_payload(self, payload: Any) -> Any:
        """
        Hand the payload to the persistence collaborator.

        May run on a worker thread; must not touch the context.

        Raises:
            PersistenceError: If the payload could not be stored
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def on_submission_succeeded(self, payload: Any, result: Any) -> Any:
        """Combine the payload with the persistence result. Override to customize."""
        return payload

    def completion_data(self, payload: Any) -> Dict[str, Any]:
        """Data emitted with wizard_completed. Override to customize."""
        return self.context.to_dict()

    # =========================================================================
    # Session state
    # =========================================================================

    @property
    def current_section(self) -> SectionDefinition:
        return self.navigator.get_current_section()

    @property
    def submission_state(self) -> SubmissionState:
        return self.context.submission_state

    @property
    def is_submitting(self) -> bool:
        """True while the persistence call is in flight."""
        return self.context.submission_state == SubmissionState.SUBMITTING

    @property
    def accumulated(self) -> Dict[str, Dict[str, Any]]:
        return self.context.accumulated

    def get_section_values(self, name: str) -> Dict[str, Any]:
        """Confirmed values of a section, or its defaults if not yet confirmed."""
        stored = self.context.get_section(name)
        if stored is not None:
            return dict(stored)
        section = self.navigator.get_section(name)
        return section.default_values() if section else {}

    def values_for_display(self) -> Dict[str, Any]:
        """Values to prefill the current section's inputs with."""
        return self.get_section_values(self.current_section.name)

    # =========================================================================
    # Transitions
    # =========================================================================

    def _require_not_terminal(self, operation: str):
        state = self.context.submission_state
        if self.context.is_terminal:
            raise IllegalTransitionError(
                f"Cannot {operation}: wizard is {state.value}",
                state=state.value,
                operation=operation,
            )

    def validate_current_section(self, raw_input: Mapping[str, Any]) -> SectionValidationResult:
        """Validate input for the current section without changing state."""
        return self.navigator.validate_current_section(raw_input)

    def advance(self, raw_input: Mapping[str, Any]) -> SectionValidationResult:
        """
        Validate and confirm the current section.

        Raises:
            IllegalTransitionError: If the session is not EDITING
        """
        self._require_not_terminal("advance")
        return self.navigator.advance(raw_input)

    def retreat(self):
        """
        Go back one section.

        Raises:
            IllegalTransitionError: At the first section or when not EDITING
        """
        self._require_not_terminal("retreat")
        self.navigator.retreat()

    def cancel(self):
        """
        Discard the session and leave the wizard. Nothing is persisted.

        Raises:
            IllegalTransitionError: While submitting or after completion/cancellation
        """
        self._require_not_terminal("cancel")
        if self.is_submitting:
            raise IllegalTransitionError(
                "Cannot cancel while submitting",
                state=SubmissionState.SUBMITTING.value,
                operation="cancel",
            )

        self.context.discard()
        logger.info(f"Wizard {self.context.wizard_id} cancelled")

        if self._on_cancel:
            self._on_cancel()
        self.wizard_cancelled.emit()

    def retry_submission(self):
        """
        Re-run submission after a failure, without re-entering any section.

        Raises:
            IllegalTransitionError: If the session is not FAILED
        """
        state = self.context.submission_state
        if state != SubmissionState.FAILED:
            raise IllegalTransitionError(
                f"Cannot retry submission while {state.value}",
                state=state.value,
                operation="retry_submission",
            )
        logger.info(f"Retrying submission of wizard {self.context.wizard_id}")
        self.context.submission_state = SubmissionState.SUBMITTING
        self._start_submission()

    # =========================================================================
    # Submission
    # =========================================================================

    def _set_submitting(self, submitting: bool):
        self.submitting_changed.emit(submitting)

    @pyqtSlot()
    def _start_submission(self):
        """Assemble the payload and hand it to the persistence collaborator."""
        self.context.failure_reason = None
        try:
            payload = self.build_submission()
        except PersistenceError as e:
            self._on_submission_failed(e)
            return

        self._pending_payload = payload
        self._set_submitting(True)

        if self.background_submission:
            self._worker = SubmissionWorker(self.submit_payload, payload)
            self._worker.succeeded.connect(self._on_submission_succeeded)
            self._worker.failed.connect(self._on_submission_failed)
            self._worker.finished.connect(self._on_worker_finished)
            self._worker.start()
            return

        try:
            result = self.submit_payload(payload)
        except PersistenceError as e:
            self._on_submission_failed(e)
        except Exception as e:
            logger.exception("Unexpected error during submission")
            self._on_submission_failed(PersistenceError(str(e), original_error=e, context="submit"))
        else:
            self._on_submission_succeeded(result)

    @pyqtSlot(object)
    def _on_submission_succeeded(self, result: Any):
        payload = self.on_submission_succeeded(self._pending_payload, result)
        self._pending_payload = None
        self.context.submission_state = SubmissionState.COMPLETED
        logger.info(f"Wizard {self.context.wizard_id} completed")
        self._set_submitting(False)

        if self._on_complete:
            self._on_complete(payload)
        self.wizard_completed.emit(self.completion_data(payload))

    @pyqtSlot(object)
    def _on_submission_failed(self, error: Exception):
        self._pending_payload = None
        self.context.submission_state = SubmissionState.FAILED
        self.context.failure_reason = map_exception(error, context="submit")
        self._set_submitting(False)
        self.submission_failed.emit(self.context.failure_reason)

    @pyqtSlot()
    def _on_worker_finished(self):
        if self._worker is not None:
            self._worker.deleteLater()
            self._worker = None

    def wait_for_submission(self, timeout_ms: int = 5000) -> bool:
        """Block until a background submission thread has finished."""
        if self._worker is None:
            return True
        return self._worker.wait(timeout_ms)
