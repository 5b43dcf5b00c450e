# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard sections.

Handles:
- Section validation before moving forward
- Storing validated section data in the context
- Moving back without losing data
- Handing over to submission after the last section
"""

from typing import Any, List, Mapping, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from services.exceptions import IllegalTransitionError
from services.validation import SectionValidationResult
from .section import SectionDefinition
from .wizard_context import SubmissionState, WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    State machine over the ordered sections of a wizard.

    Signals:
        step_changed(int, int): old_index, new_index
        can_go_previous_changed(bool)
        validation_failed(object): SectionValidationResult of a rejected advance
        submission_requested(): the last section was confirmed
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(object)
    submission_requested = pyqtSignal()

    def __init__(self, context: WizardContext, sections: List[SectionDefinition], parent=None):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            sections: Ordered wizard sections
        """
        super().__init__(parent)
        if not sections:
            raise ValueError("A wizard needs at least one section")
        self.context = context
        self.sections = sections

    @property
    def current_index(self) -> int:
        return self.context.current_step_index

    def get_current_section(self) -> SectionDefinition:
        """Get the current section."""
        return self.sections[self.current_index]

    def get_section(self, name: str) -> Optional[SectionDefinition]:
        """Get a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def get_step_count(self) -> int:
        """Get total number of sections."""
        return len(self.sections)

    def is_last_section(self) -> bool:
        return self.current_index == len(self.sections) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous section."""
        return self.context.submission_state == SubmissionState.EDITING and self.current_index > 0

    def _require_editing(self, operation: str):
        state = self.context.submission_state
        if state != SubmissionState.EDITING:
            raise IllegalTransitionError(
                f"Cannot {operation} while {state.value}",
                state=state.value,
                operation=operation,
            )

    def validate_current_section(self, raw_input: Mapping[str, Any]) -> SectionValidationResult:
        """Validate raw input against the current section without changing state."""
        return self.get_current_section().validate(raw_input)

    def advance(self, raw_input: Mapping[str, Any]) -> SectionValidationResult:
        """
        Confirm the current section and move on.

        On invalid input nothing changes and validation_failed is emitted.
        On valid input the values are stored under the section name; the
        index moves forward, or after the last section the state becomes
        SUBMITTING and submission_requested is emitted.

        Raises:
            IllegalTransitionError: If the session is not EDITING
        """
        self._require_editing("advance")
        section = self.get_current_section()

        result = section.validate(raw_input)
        if not result.is_valid:
            logger.warning(f"Section '{section.name}' validation failed: {result.field_errors}")
            self.validation_failed.emit(result)
            return result

        self.context.store_section(section.name, result.values)
        logger.debug(f"Section '{section.name}' confirmed")

        if self.is_last_section():
            self.context.submission_state = SubmissionState.SUBMITTING
            self.can_go_previous_changed.emit(False)
            logger.info("All sections confirmed, submitting")
            self.submission_requested.emit()
        else:
            self._navigate_to(self.current_index + 1)
        return result

    def retreat(self):
        """
        Go back one section, keeping every confirmed section.

        Raises:
            IllegalTransitionError: At the first section or when not EDITING
        """
        self._require_editing("retreat")
        if self.current_index == 0:
            raise IllegalTransitionError(
                "Cannot retreat from the first section",
                state=self.context.submission_state.value,
                operation="retreat",
            )
        self._navigate_to(self.current_index - 1)

    def _navigate_to(self, new_index: int):
        old_index = self.current_index
        self.context.current_step_index = new_index

        self.step_changed.emit(old_index, new_index)
        self.can_go_previous_changed.emit(self.can_go_previous())
        logger.info(f"Navigation: section {old_index} -> {new_index} ({self.sections[new_index].name})")

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.sections) <= 1:
            return 100.0
        return (self.current_index / (len(self.sections) - 1)) * 100.0
