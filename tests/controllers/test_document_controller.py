# -*- coding: utf-8 -*-
"""
Tests for the document dashboard controller and approval workflow.

Tests cover:
- Search, kind filter and sort orders
- Approval transitions
- Illegal transitions reported as failed results
- Status counts
"""

from decimal import Decimal

import pytest

from controllers.document_controller import DocumentController, DocumentFilter
from models.document import DocumentKind, DocumentRecord, DocumentStatus, LineItem
from repositories.document_repository import DocumentRepository
from services.workflow_service import DocumentWorkflowService


def store(repository, kind, title, amount, reference):
    record = DocumentRecord(
        document_kind=kind,
        title=title,
        reference=reference,
        date="2026-03-01",
        client_name="Acme Corp",
        client_email="orders@acme.example",
        payment_terms="Net 30",
        template="standard",
        items=[LineItem(name="Item", quantity=1, unit_price=Decimal(amount))],
        grand_total=Decimal(amount),
        created_by="user-1",
    )
    return repository.submit(kind, record)


@pytest.fixture
def repository(test_db):
    repository = DocumentRepository(test_db)
    store(repository, DocumentKind.PURCHASE_ORDER, "Office Supplies", "120.00", "PURCHASE-ORDER-1")
    store(repository, DocumentKind.QUOTATION, "Website Redesign", "4500.00", "QUOTATION-2")
    store(repository, DocumentKind.SALES_AGREEMENT, "Annual Maintenance", "980.00", "SALES-AGREEMENT-3")
    return repository


@pytest.fixture
def controller(qapp, repository):
    return DocumentController(repository)


class TestLoadDocuments:
    """Test document listing."""

    def test_load_all(self, controller):
        result = controller.load_documents()

        assert result.success
        assert len(result.data) == 3

    def test_search_matches_title_and_reference(self, controller):
        assert [d.title for d in controller.search_documents("website").data] == ["Website Redesign"]
        assert [d.reference for d in controller.search_documents("agreement-3").data] == ["SALES-AGREEMENT-3"]

    def test_filter_by_kind(self, controller):
        result = controller.load_documents(DocumentFilter(document_kind="po"))
        assert [d.document_kind for d in result.data] == [DocumentKind.PURCHASE_ORDER]

    def test_all_kinds(self, controller):
        assert len(controller.load_documents(DocumentFilter(document_kind="all")).data) == 3

    def test_sort_by_amount(self, controller):
        high = controller.load_documents(DocumentFilter(sort_order="amount_high")).data
        low = controller.load_documents(DocumentFilter(sort_order="amount_low")).data

        assert [d.amount for d in high] == [Decimal("4500.00"), Decimal("980.00"), Decimal("120.00")]
        assert low == list(reversed(high))

    def test_unknown_sort_order(self, controller):
        result = controller.load_documents(DocumentFilter(sort_order="alphabetical"))
        assert not result.success

    def test_documents_loaded_signal(self, controller, qtbot):
        with qtbot.waitSignal(controller.documents_loaded, timeout=1000) as blocker:
            controller.load_documents()
        assert len(blocker.args[0]) == 3


class TestApproval:
    """Test approval workflow through the controller."""

    def _first(self, controller, kind):
        return controller.load_documents(DocumentFilter(document_kind=kind)).data[0]

    def test_submit_then_approve(self, controller):
        summary = self._first(controller, "po")

        assert controller.submit_for_approval(summary).success
        assert [d.document_id for d in controller.pending_approvals().data] == [summary.document_id]
        assert controller.approve(summary).success
        assert summary.status == DocumentStatus.APPROVED

    def test_cannot_approve_draft(self, controller):
        summary = self._first(controller, "quotation")

        result = controller.approve(summary)

        assert not result.success
        assert result.message == "This action is not available right now."
        assert summary.status == DocumentStatus.DRAFT

    def test_rejected_can_reopen(self, controller):
        summary = self._first(controller, "agreement")
        controller.submit_for_approval(summary)
        controller.reject(summary)

        assert controller.return_to_draft(summary).success
        assert summary.status == DocumentStatus.DRAFT

    def test_status_changed_signal(self, controller, qtbot):
        summary = self._first(controller, "po")
        with qtbot.waitSignal(controller.status_changed, timeout=1000) as blocker:
            controller.submit_for_approval(summary)
        assert blocker.args == [summary.document_id, "draft", "pending"]

    def test_status_counts(self, controller):
        controller.submit_for_approval(self._first(controller, "po"))

        counts = controller.status_counts().data

        assert counts == {"draft": 2, "pending": 1, "approved": 0, "rejected": 0}


class TestWorkflowService:
    """Test the transition table."""

    def test_approved_is_terminal(self):
        assert DocumentWorkflowService.TRANSITIONS[DocumentStatus.APPROVED] == []

    def test_pending_transitions(self, repository):
        service = DocumentWorkflowService(repository)
        targets = [status for status, _ in service.get_available_transitions(DocumentStatus.PENDING)]
        assert targets == [DocumentStatus.APPROVED, DocumentStatus.REJECTED, DocumentStatus.DRAFT]
