# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for managing wizard state and data.

Provides unified interface for:
- Accumulated section data (ordered by confirmation)
- Submission state tracking
- Serialization/deserialization
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
import copy
import uuid


class SubmissionState(Enum):
    """Where a wizard session is in its lifecycle."""

    EDITING = "editing"
    SUBMITTING = "submitting"
    FAILED = "failed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


TERMINAL_STATES = (SubmissionState.COMPLETED, SubmissionState.CANCELLED)


class WizardContext(ABC):
    """
    Base class for wizard context.

    Holds the state of one wizard session. `accumulated` maps a section name
    to its validated values and only ever contains confirmed sections.

    All wizard contexts should inherit from this class and implement:
    - from_dict(): Restore context from dictionary
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.submission_state: SubmissionState = SubmissionState.EDITING
        self.failure_reason: Optional[str] = None

        # section name -> validated values, in confirmation order
        self.accumulated: Dict[str, Dict[str, Any]] = {}

    @property
    def is_terminal(self) -> bool:
        return self.submission_state in TERMINAL_STATES

    def store_section(self, section: str, values: Dict[str, Any]):
        """Store validated values for a section, replacing any earlier entry."""
        self.accumulated[section] = copy.deepcopy(values)
        self.updated_at = datetime.now()

    def get_section(self, section: str, default: Any = None) -> Any:
        """Get the confirmed values of a section."""
        return self.accumulated.get(section, default)

    def discard(self):
        """Drop all collected data and mark the session cancelled."""
        self.accumulated.clear()
        self.failure_reason = None
        self.submission_state = SubmissionState.CANCELLED
        self.updated_at = datetime.now()

    def _serialize_section(self, section: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Hook: convert a section's values to JSON-friendly types."""
        return dict(values)

    def _deserialize_section(self, section: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Hook: inverse of _serialize_section."""
        return dict(values)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "submission_state": self.submission_state.value,
            "failure_reason": self.failure_reason,
            "accumulated": {
                name: self._serialize_section(name, values)
                for name, values in self.accumulated.items()
            },
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """
        Restore context from dictionary.

        Subclasses must implement this method.
        """
        pass

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Dict[str, Any]):
        """Helper method to restore base fields from dictionary."""
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.current_step_index = data.get("current_step_index", 0)
        context.submission_state = SubmissionState(data.get("submission_state", "editing"))
        context.failure_reason = data.get("failure_reason")
        context.accumulated = {
            name: context._deserialize_section(name, values)
            for name, values in data.get("accumulated", {}).items()
        }

        # Parse datetime strings
        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
