# -*- coding: utf-8 -*-
"""
Workflow service for document approval.
"""

from typing import List, Tuple

from models.document import DocumentStatus, DocumentSummary
from repositories.document_repository import DocumentRepository
from services.exceptions import IllegalTransitionError
from utils.logger import get_logger

logger = get_logger(__name__)


class DocumentWorkflowService:
    """Service for managing document approval status transitions."""

    # Format: current_status -> [(next_status, action_key), ...]
    TRANSITIONS = {
        DocumentStatus.DRAFT: [
            (DocumentStatus.PENDING, "workflow.submit_for_approval"),
        ],
        DocumentStatus.PENDING: [
            (DocumentStatus.APPROVED, "workflow.approve"),
            (DocumentStatus.REJECTED, "workflow.reject"),
            (DocumentStatus.DRAFT, "workflow.return_to_draft"),
        ],
        DocumentStatus.APPROVED: [],  # Terminal state
        DocumentStatus.REJECTED: [
            (DocumentStatus.DRAFT, "workflow.reopen"),
        ],
    }

    def __init__(self, repository: DocumentRepository):
        self.repository = repository

    def get_available_transitions(self, current_status: DocumentStatus) -> List[Tuple[DocumentStatus, str]]:
        """
        Get available status transitions for a given status.

        Returns:
            List of (next_status, action translation key) tuples
        """
        return self.TRANSITIONS.get(current_status, [])

    def can_transition(self, current_status: DocumentStatus, next_status: DocumentStatus) -> bool:
        """Check if a transition is valid."""
        return any(ns == next_status for ns, _ in self.get_available_transitions(current_status))

    def transition(self, summary: DocumentSummary, next_status: DocumentStatus) -> DocumentSummary:
        """
        Move a stored document to a new status.

        Raises:
            IllegalTransitionError: If the move is not allowed
            PersistenceError: If the update could not be stored
        """
        if not self.can_transition(summary.status, next_status):
            raise IllegalTransitionError(
                f"Invalid transition from '{summary.status.value}' to '{next_status.value}'",
                state=summary.status.value,
                operation=next_status.value,
            )

        old_status = summary.status
        self.repository.update_status(summary.document_kind, summary.document_id, next_status)
        summary.status = next_status
        logger.info(
            f"{summary.document_kind.value} {summary.reference}: "
            f"{old_status.value} -> {next_status.value}"
        )
        return summary
