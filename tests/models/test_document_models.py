# -*- coding: utf-8 -*-
"""
Tests for document models.

Tests cover:
- Document kind aliases and derived names
- Line totals
- Record serialization
"""

from decimal import Decimal

import pytest

from models.document import DocumentKind, DocumentRecord, DocumentStatus, LineItem, to_decimal
from models.user import User


class TestDocumentKind:
    """Test document kind parsing."""

    @pytest.mark.parametrize("alias,expected", [
        ("po", DocumentKind.PURCHASE_ORDER),
        ("purchase-order", DocumentKind.PURCHASE_ORDER),
        ("purchase_order", DocumentKind.PURCHASE_ORDER),
        ("Quotation", DocumentKind.QUOTATION),
        ("agreement", DocumentKind.SALES_AGREEMENT),
        ("sales-agreement", DocumentKind.SALES_AGREEMENT),
        (DocumentKind.QUOTATION, DocumentKind.QUOTATION),
    ])
    def test_aliases(self, alias, expected):
        """Test every accepted spelling resolves to its kind."""
        assert DocumentKind.parse(alias) is expected

    def test_unknown_kind(self):
        """Test unknown kinds are rejected."""
        with pytest.raises(ValueError):
            DocumentKind.parse("invoice")

    def test_table_names(self):
        """Test header and item tables follow the kind value."""
        assert DocumentKind.SALES_AGREEMENT.table_name == "sales_agreements"
        assert DocumentKind.SALES_AGREEMENT.items_table_name == "sales_agreement_items"

    def test_reference_prefix(self):
        assert DocumentKind.PURCHASE_ORDER.reference_prefix == "PURCHASE-ORDER"
        assert DocumentKind.QUOTATION.reference_prefix == "QUOTATION"


class TestLineItem:
    """Test line item arithmetic."""

    def test_line_total_is_exact(self):
        item = LineItem(name="Widget", quantity=3, unit_price=Decimal("0.10"))
        assert item.line_total == Decimal("0.30")

    def test_from_dict_converts_price(self):
        item = LineItem.from_dict({"name": "Widget", "quantity": "2", "unit_price": 10.5})
        assert item.quantity == 2
        assert item.unit_price == Decimal("10.5")

    def test_to_decimal_keeps_decimal(self):
        value = Decimal("1.25")
        assert to_decimal(value) is value


class TestDocumentRecord:
    """Test record serialization."""

    def test_to_dict(self):
        record = DocumentRecord(
            document_kind=DocumentKind.QUOTATION,
            title="Website redesign",
            reference="QUOTATION-42",
            date="2026-01-15",
            client_name="Globex",
            client_email="buyer@globex.example",
            payment_terms="Net 15",
            template="minimal",
            items=[LineItem(name="Design", quantity=1, unit_price=Decimal("1500.00"))],
            grand_total=Decimal("1500.00"),
            valid_until="2026-02-15",
            created_by="user-1",
        )

        data = record.to_dict()

        assert data["document_kind"] == "quotation"
        assert data["grand_total"] == "1500.00"
        assert data["items"][0]["unit_price"] == "1500.00"
        assert data["status"] == DocumentStatus.DRAFT.value
        assert data["valid_until"] == "2026-02-15"


class TestUser:
    """Test user model."""

    def test_display_name_falls_back_to_email(self):
        assert User(email="a@b.example").display_name == "a@b.example"

    def test_round_trip(self):
        user = User(email="a@b.example", full_name="A B", language="ar")
        restored = User.from_dict(user.to_dict())
        assert restored.user_id == user.user_id
        assert restored.language == "ar"
