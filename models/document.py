# -*- coding: utf-8 -*-
"""
Business document models: purchase orders, quotations and sales agreements.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional


class DocumentKind(Enum):
    """Kind of business document created through the wizard."""

    PURCHASE_ORDER = "purchase_order"
    QUOTATION = "quotation"
    SALES_AGREEMENT = "sales_agreement"

    @classmethod
    def parse(cls, value: Any) -> "DocumentKind":
        """
        Normalize the spellings used across the application.

        Accepts the enum itself, its value, hyphenated slugs
        ("purchase-order", "sales-agreement") and the short
        forms "po" and "agreement".

        Raises:
            ValueError: If the value names no known kind
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower().replace("-", "_")
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            raise ValueError(f"Unknown document kind: {value!r}")
        return kind

    @property
    def reference_prefix(self) -> str:
        """Prefix of generated reference numbers."""
        return _REFERENCE_PREFIXES[self]

    @property
    def table_name(self) -> str:
        """Header table of this kind."""
        return f"{self.value}s"

    @property
    def items_table_name(self) -> str:
        """Line item table of this kind."""
        return f"{self.value}_items"

    @property
    def label_key(self) -> str:
        """Translation key of the display label."""
        return f"document.kind.{self.value}"


_KIND_ALIASES = {
    "po": DocumentKind.PURCHASE_ORDER,
    "purchase_order": DocumentKind.PURCHASE_ORDER,
    "quotation": DocumentKind.QUOTATION,
    "agreement": DocumentKind.SALES_AGREEMENT,
    "sales_agreement": DocumentKind.SALES_AGREEMENT,
}

_REFERENCE_PREFIXES = {
    DocumentKind.PURCHASE_ORDER: "PURCHASE-ORDER",
    DocumentKind.QUOTATION: "QUOTATION",
    DocumentKind.SALES_AGREEMENT: "SALES-AGREEMENT",
}


class DocumentStatus(Enum):
    """Approval status of a stored document."""

    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def to_decimal(value: Any) -> Decimal:
    """Convert a price-like value to Decimal without going through binary floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass
class LineItem:
    """A purchasable unit within a document."""

    name: str = ""
    description: Optional[str] = None
    quantity: int = 1
    unit_price: Decimal = Decimal("0")

    @property
    def line_total(self) -> Decimal:
        """quantity x unit_price."""
        return self.quantity * to_decimal(self.unit_price)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (prices as strings)."""
        return {
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        """Create LineItem from dictionary."""
        return cls(
            name=data.get("name", ""),
            description=data.get("description") or None,
            quantity=int(data.get("quantity", 1)),
            unit_price=to_decimal(data.get("unit_price", "0")),
        )


@dataclass
class DocumentRecord:
    """
    Finished document assembled from every confirmed wizard section.

    Only instantiated once all sections are confirmed; handed to the
    persistence collaborator as a whole.
    """

    document_kind: DocumentKind
    title: str
    reference: str
    date: str
    client_name: str
    client_email: str
    payment_terms: str
    template: str
    items: List[LineItem] = field(default_factory=list)
    grand_total: Decimal = Decimal("0")
    client_phone: Optional[str] = None
    delivery_terms: Optional[str] = None
    additional_notes: Optional[str] = None

    # Kind-specific terms
    valid_until: Optional[str] = None  # quotations
    start_date: Optional[str] = None  # sales agreements
    end_date: Optional[str] = None  # sales agreements

    # Metadata
    status: DocumentStatus = DocumentStatus.DRAFT
    created_at: datetime = field(default_factory=datetime.now)
    created_by: Optional[str] = None
    document_id: Optional[str] = None  # set after a successful hand-off

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "document_id": self.document_id,
            "document_kind": self.document_kind.value,
            "title": self.title,
            "reference": self.reference,
            "date": self.date,
            "client_name": self.client_name,
            "client_email": self.client_email,
            "client_phone": self.client_phone,
            "payment_terms": self.payment_terms,
            "delivery_terms": self.delivery_terms,
            "additional_notes": self.additional_notes,
            "valid_until": self.valid_until,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "template": self.template,
            "items": [item.to_dict() for item in self.items],
            "grand_total": str(self.grand_total),
            "status": self.status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "created_by": self.created_by,
        }


@dataclass
class DocumentSummary:
    """Row shown on the dashboard document grid."""

    document_id: str
    document_kind: DocumentKind
    title: str
    reference: str
    date: str
    status: DocumentStatus
    amount: Decimal
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
