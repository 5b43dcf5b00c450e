# -*- coding: utf-8 -*-
"""
Document preview shown on the last wizard section.

Built only from confirmed sections; anything not confirmed yet is shown
as a translated placeholder.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from app.config import Config
from models.document import DocumentKind, to_decimal
from services.document_totals import calculate_grand_total, line_total
from services.translation_manager import tr
from services.validation import BASIC_INFO, LINE_ITEMS, TEMPLATE_CHOICE, TERMS
from utils.helpers import format_money


@dataclass
class PreviewLine:
    name: str
    description: Optional[str]
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass
class DocumentPreview:
    """Read-only rendering data for a document under construction."""

    document_kind: DocumentKind
    title: str
    reference: str
    date: str
    client_name: str
    client_email: str
    client_phone: Optional[str]
    payment_terms: str
    delivery_terms: Optional[str]
    additional_notes: Optional[str]
    template: str
    lines: List[PreviewLine] = field(default_factory=list)
    grand_total: Decimal = Decimal("0")
    extra_terms: Dict[str, Any] = field(default_factory=dict)

    @property
    def heading(self) -> str:
        return tr(self.document_kind.label_key)

    @property
    def formatted_total(self) -> str:
        return format_money(self.grand_total, Config.CURRENCY_SYMBOL, Config.CURRENCY_DECIMALS)

    @classmethod
    def from_context(cls, context, template: Optional[str] = None) -> "DocumentPreview":
        """
        Build a preview from the confirmed sections of a wizard context.

        Args:
            context: DocumentWizardContext
            template: Template being chosen on the last section, if any
        """
        basic = context.get_section(BASIC_INFO, {})
        terms = context.get_section(TERMS, {})
        items = context.get_section(LINE_ITEMS, {}).get("items", [])
        chosen = template or context.get_section(TEMPLATE_CHOICE, {}).get("template") or Config.DEFAULT_TEMPLATE

        lines = [
            PreviewLine(
                name=item.get("name") or tr("preview.item_placeholder"),
                description=item.get("description"),
                quantity=item.get("quantity", 0),
                unit_price=to_decimal(item.get("unit_price", 0)),
                line_total=line_total(item),
            )
            for item in items
        ]

        not_specified = tr("preview.not_specified")
        return cls(
            document_kind=context.document_kind,
            title=basic.get("title") or tr("preview.title_placeholder"),
            reference=basic.get("reference") or tr("preview.reference_placeholder"),
            date=basic.get("date") or tr("preview.date_placeholder"),
            client_name=basic.get("client_name") or tr("preview.client_placeholder"),
            client_email=basic.get("client_email") or tr("preview.email_placeholder"),
            client_phone=basic.get("client_phone"),
            payment_terms=terms.get("payment_terms") or not_specified,
            delivery_terms=terms.get("delivery_terms"),
            additional_notes=terms.get("additional_notes"),
            template=chosen,
            lines=lines,
            grand_total=calculate_grand_total(items),
            extra_terms={
                key: terms[key] for key in ("valid_until", "start_date", "end_date")
                if terms.get(key)
            },
        )
