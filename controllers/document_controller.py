# -*- coding: utf-8 -*-
"""
Document Controller
===================
Controller for the document dashboard.

Handles:
- Document listing with search, kind filter and sort order
- Pending approvals
- Approval workflow transitions
- Status counts
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.document import DocumentKind, DocumentStatus, DocumentSummary
from repositories.document_repository import DocumentRepository
from services.error_mapper import map_exception
from services.exceptions import IllegalTransitionError, PersistenceError
from services.workflow_service import DocumentWorkflowService
from utils.logger import get_logger

logger = get_logger(__name__)

SORT_ORDERS = ("newest", "oldest", "amount_high", "amount_low")


@dataclass
class DocumentFilter:
    """Filter criteria for the document grid."""
    search_text: Optional[str] = None
    document_kind: Optional[str] = None  # None or "all" for every kind
    status: Optional[DocumentStatus] = None
    sort_order: str = "newest"


class DocumentController(BaseController):
    """
    Controller for the document dashboard.

    Provides a clean interface between the dashboard and the document store.
    """

    # Signals
    documents_loaded = pyqtSignal(list)  # list of DocumentSummary
    status_changed = pyqtSignal(str, str, str)  # document_id, old_status, new_status

    def __init__(self, repository: DocumentRepository, parent=None):
        super().__init__(parent)
        self.repository = repository
        self.workflow_service = DocumentWorkflowService(repository)

        self._documents_cache: List[DocumentSummary] = []
        self._current_filter = DocumentFilter()

    # ==================== Properties ====================

    @property
    def documents(self) -> List[DocumentSummary]:
        """Documents from the last load."""
        return self._documents_cache

    @property
    def current_filter(self) -> DocumentFilter:
        return self._current_filter

    # ==================== Queries ====================

    def load_documents(self, filter_: Optional[DocumentFilter] = None) -> OperationResult[List[DocumentSummary]]:
        """
        Load documents with optional filter.

        Args:
            filter_: Optional filter criteria (the last filter is reused when omitted)

        Returns:
            OperationResult with list of DocumentSummary
        """
        filter_ = filter_ or self._current_filter
        try:
            self._emit_started("load_documents")
            documents = self._query_documents(filter_)

            self._documents_cache = documents
            self._current_filter = filter_

            self._emit_completed("load_documents", True)
            self.documents_loaded.emit(documents)
            return OperationResult.ok(data=documents)

        except (PersistenceError, ValueError) as e:
            error_msg = map_exception(e, context="load_documents")
            self._emit_error("load_documents", error_msg)
            return OperationResult.fail(message=error_msg, errors=[str(e)])

    def search_documents(self, search_text: str) -> OperationResult[List[DocumentSummary]]:
        """Reload with a new search text, keeping the other criteria."""
        filter_ = DocumentFilter(
            search_text=search_text,
            document_kind=self._current_filter.document_kind,
            status=self._current_filter.status,
            sort_order=self._current_filter.sort_order,
        )
        return self.load_documents(filter_)

    def pending_approvals(self) -> OperationResult[List[DocumentSummary]]:
        """Documents waiting for approval, oldest first."""
        return self.execute_with_error_handling(
            "pending_approvals",
            self._query_documents,
            DocumentFilter(status=DocumentStatus.PENDING, sort_order="oldest"),
        )

    def status_counts(self) -> OperationResult[Dict[str, int]]:
        """Number of documents per status (every status present, zero included)."""
        def count():
            counts = {status.value: 0 for status in DocumentStatus}
            for summary in self.repository.list_summaries():
                counts[summary.status.value] += 1
            return counts

        return self.execute_with_error_handling("status_counts", count)

    def _query_documents(self, filter_: DocumentFilter) -> List[DocumentSummary]:
        kind = None
        if filter_.document_kind and filter_.document_kind != "all":
            kind = DocumentKind.parse(filter_.document_kind)

        if filter_.sort_order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {filter_.sort_order}")

        documents = self.repository.list_summaries(kind)

        if filter_.status is not None:
            documents = [d for d in documents if d.status == filter_.status]

        if filter_.search_text:
            needle = filter_.search_text.strip().lower()
            documents = [
                d for d in documents
                if needle in d.title.lower() or needle in d.reference.lower()
            ]

        if filter_.sort_order in ("newest", "oldest"):
            documents.sort(
                key=lambda d: d.created_at or datetime.min,
                reverse=filter_.sort_order == "newest",
            )
        else:
            documents.sort(key=lambda d: d.amount, reverse=filter_.sort_order == "amount_high")

        return documents

    # ==================== Workflow ====================

    def submit_for_approval(self, summary: DocumentSummary) -> OperationResult[DocumentSummary]:
        """Move a draft to pending."""
        return self._change_status(summary, DocumentStatus.PENDING)

    def approve(self, summary: DocumentSummary) -> OperationResult[DocumentSummary]:
        """Approve a pending document."""
        return self._change_status(summary, DocumentStatus.APPROVED)

    def reject(self, summary: DocumentSummary) -> OperationResult[DocumentSummary]:
        """Reject a pending document."""
        return self._change_status(summary, DocumentStatus.REJECTED)

    def return_to_draft(self, summary: DocumentSummary) -> OperationResult[DocumentSummary]:
        """Send a pending or rejected document back to draft."""
        return self._change_status(summary, DocumentStatus.DRAFT)

    def _change_status(self, summary: DocumentSummary,
                       new_status: DocumentStatus) -> OperationResult[DocumentSummary]:
        """Change document status with validation."""
        self._log_operation("change_status", document_id=summary.document_id, status=new_status.value)
        old_status = summary.status
        try:
            self._emit_started("change_status")
            self.workflow_service.transition(summary, new_status)
        except (IllegalTransitionError, PersistenceError) as e:
            error_msg = map_exception(e, context="change_status")
            self._emit_error("change_status", error_msg)
            return OperationResult.fail(message=error_msg, errors=[str(e)])

        self._emit_completed("change_status", True)
        self.status_changed.emit(summary.document_id, old_status.value, new_status.value)
        return OperationResult.ok(data=summary)
