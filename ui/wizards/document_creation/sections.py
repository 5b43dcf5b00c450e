# -*- coding: utf-8 -*-
"""
Sections of the document creation wizard and their defaults.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional
import random

from app.config import Config
from models.document import DocumentKind
from services.validation import (
    BASIC_INFO,
    LINE_ITEMS,
    TEMPLATE_CHOICE,
    TERMS,
    ValidationFactory,
)
from ui.wizards.framework import SectionDefinition

SECTION_ORDER = (BASIC_INFO, LINE_ITEMS, TERMS, TEMPLATE_CHOICE)

# Terms fields that only exist for some kinds
KIND_TERMS_FIELDS = {
    DocumentKind.PURCHASE_ORDER: (),
    DocumentKind.QUOTATION: ("valid_until",),
    DocumentKind.SALES_AGREEMENT: ("start_date", "end_date"),
}


def generate_reference(document_kind: DocumentKind, rng: Optional[random.Random] = None) -> str:
    """
    Default reference number, e.g. "PURCHASE-ORDER-4821".

    The suffix is random in [0, Config.REFERENCE_SUFFIX_MAX) and is not
    checked against stored documents.
    """
    rng = rng or random
    return f"{document_kind.reference_prefix}-{rng.randrange(Config.REFERENCE_SUFFIX_MAX)}"


def blank_line_item() -> Dict[str, Any]:
    return {"name": "", "description": "", "quantity": 1, "unit_price": Decimal("0")}


def build_default_values(
    document_kind,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Initial values of every section, keyed by section name.

    Args:
        document_kind: DocumentKind or an accepted alias
        today: Date to prefill (defaults to the current date)
        rng: Random source for the reference suffix
    """
    kind = DocumentKind.parse(document_kind)
    today = today or date.today()

    terms = {
        "payment_terms": Config.DEFAULT_PAYMENT_TERMS,
        "delivery_terms": "",
        "additional_notes": "",
    }
    for field_name in KIND_TERMS_FIELDS[kind]:
        terms[field_name] = ""

    return {
        BASIC_INFO: {
            "title": "",
            "reference": generate_reference(kind, rng),
            "date": today.isoformat(),
            "client_name": "",
            "client_email": "",
            "client_phone": "",
        },
        LINE_ITEMS: {"items": [blank_line_item()]},
        TERMS: terms,
        TEMPLATE_CHOICE: {"template": Config.DEFAULT_TEMPLATE},
    }


def build_sections(document_kind, defaults: Optional[Dict[str, Dict[str, Any]]] = None) -> List[SectionDefinition]:
    """The four wizard sections for a document kind, in order."""
    kind = DocumentKind.parse(document_kind)
    factory = ValidationFactory(kind)
    defaults = defaults or build_default_values(kind)
    return [
        SectionDefinition(
            name=name,
            title_key=f"wizard.section.{name}",
            validator=factory.get_validator(name),
            defaults=defaults.get(name, {}),
        )
        for name in SECTION_ORDER
    ]
