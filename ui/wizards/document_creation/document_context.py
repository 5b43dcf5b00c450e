# -*- coding: utf-8 -*-
"""
Document Context - State of one document creation session.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from models.document import DocumentKind, DocumentRecord, LineItem, to_decimal
from services.document_totals import calculate_grand_total
from services.validation import BASIC_INFO, LINE_ITEMS, TEMPLATE_CHOICE, TERMS
from ui.wizards.framework import WizardContext
from .sections import SECTION_ORDER


class DocumentWizardContext(WizardContext):
    """Context for the document creation wizard."""

    def __init__(self, document_kind, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        """Initialize document context."""
        super().__init__()
        self._document_kind = DocumentKind.parse(document_kind)
        self.defaults: Dict[str, Dict[str, Any]] = defaults or {}

    @property
    def document_kind(self) -> DocumentKind:
        """Fixed for the lifetime of the session."""
        return self._document_kind

    def build_record(self, created_by: str, created_at: Optional[datetime] = None) -> DocumentRecord:
        """
        Assemble the finished document from the confirmed sections.

        Raises:
            ValueError: If a section has not been confirmed yet
        """
        missing = [name for name in SECTION_ORDER if name not in self.accumulated]
        if missing:
            raise ValueError(f"Sections not confirmed: {', '.join(missing)}")

        basic = self.accumulated[BASIC_INFO]
        terms = self.accumulated[TERMS]
        items = [LineItem.from_dict(item) for item in self.accumulated[LINE_ITEMS]["items"]]

        return DocumentRecord(
            document_kind=self.document_kind,
            title=basic["title"],
            reference=basic["reference"],
            date=basic["date"],
            client_name=basic["client_name"],
            client_email=basic["client_email"],
            client_phone=basic.get("client_phone"),
            payment_terms=terms["payment_terms"],
            delivery_terms=terms.get("delivery_terms"),
            additional_notes=terms.get("additional_notes"),
            valid_until=terms.get("valid_until"),
            start_date=terms.get("start_date"),
            end_date=terms.get("end_date"),
            template=self.accumulated[TEMPLATE_CHOICE]["template"],
            items=items,
            grand_total=calculate_grand_total(items),
            created_at=created_at or datetime.now(),
            created_by=created_by,
        )

    def _serialize_section(self, section, values):
        if section != LINE_ITEMS:
            return dict(values)
        return {
            "items": [
                {**item, "unit_price": str(item["unit_price"])}
                for item in values.get("items", [])
            ]
        }

    def _deserialize_section(self, section, values):
        if section != LINE_ITEMS:
            return dict(values)
        return {
            "items": [
                {**item, "unit_price": to_decimal(item.get("unit_price", Decimal("0")))}
                for item in values.get("items", [])
            ]
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        data = super().to_dict()
        data["document_kind"] = self.document_kind.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DocumentWizardContext':
        """Restore context from dictionary."""
        context = cls(data["document_kind"])
        cls._restore_base_fields(context, data)
        return context
