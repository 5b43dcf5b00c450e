# -*- coding: utf-8 -*-
"""
Validation Factory - Registry of section validators for the document wizard.

Validators are looked up by section name ("basic_info", "line_items",
"terms", "template_choice"); the terms schema depends on the document kind.
"""

from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from app.config import Config
from models.document import DocumentKind
from utils.helpers import parse_iso_date
from .validation_strategy import (
    ChoiceRule,
    DateRule,
    DecimalRule,
    EmailRule,
    IntegerRule,
    LineItemsSchema,
    SectionSchema,
    SectionValidationResult,
    TextRule,
    ValidationStrategy,
)

BASIC_INFO = "basic_info"
LINE_ITEMS = "line_items"
TERMS = "terms"
TEMPLATE_CHOICE = "template_choice"


def _end_not_before_start(values: Dict[str, Any]):
    start = parse_iso_date(values.get("start_date"))
    end = parse_iso_date(values.get("end_date"))
    if start and end and end < start:
        return "end_date", "validation.end_before_start"
    return None


def build_basic_info_schema() -> SectionSchema:
    return SectionSchema(BASIC_INFO, [
        ("title", TextRule("validation.title_min", min_length=3)),
        ("reference", TextRule("validation.reference_required", min_length=2)),
        ("date", DateRule("validation.date_invalid")),
        ("client_name", TextRule("validation.client_name_required", min_length=2)),
        ("client_email", EmailRule("validation.email_invalid")),
        ("client_phone", TextRule("validation.field_required", required=False)),
    ])


def build_line_item_schema() -> SectionSchema:
    return SectionSchema("line_item", [
        ("name", TextRule("validation.item_name_required", min_length=2)),
        ("description", TextRule("validation.field_required", required=False)),
        ("quantity", IntegerRule(
            "validation.quantity_min", minimum=1,
            type_message_key="validation.quantity_integer",
            maximum=Config.MAX_QUANTITY, max_message_key="validation.quantity_max",
        )),
        ("unit_price", DecimalRule(
            "validation.price_negative", minimum=Decimal("0"),
            invalid_message_key="validation.price_invalid",
            maximum=Config.MAX_UNIT_PRICE, max_message_key="validation.price_max",
        )),
    ])


def build_line_items_schema() -> LineItemsSchema:
    return LineItemsSchema(LINE_ITEMS, build_line_item_schema())


def build_terms_schema(document_kind: DocumentKind) -> SectionSchema:
    fields = [
        ("payment_terms", TextRule("validation.payment_terms_required", min_length=3)),
        ("delivery_terms", TextRule("validation.field_required", required=False)),
        ("additional_notes", TextRule("validation.field_required", required=False)),
    ]
    checks = []
    if document_kind == DocumentKind.QUOTATION:
        fields.append(("valid_until", DateRule("validation.date_invalid", required=False)))
    elif document_kind == DocumentKind.SALES_AGREEMENT:
        fields.append(("start_date", DateRule("validation.date_invalid", required=False)))
        fields.append(("end_date", DateRule("validation.date_invalid", required=False)))
        checks.append(_end_not_before_start)
    return SectionSchema(TERMS, fields, checks)


def build_template_schema(templates=None) -> SectionSchema:
    return SectionSchema(TEMPLATE_CHOICE, [
        ("template", ChoiceRule("validation.template_unknown", templates or Config.DOCUMENT_TEMPLATES)),
    ])


class ValidationFactory:
    """
    Registry of validation strategies keyed by section name.

    One factory is built per document kind, since the terms section
    differs between kinds.
    """

    def __init__(self, document_kind: DocumentKind = DocumentKind.PURCHASE_ORDER):
        self.document_kind = DocumentKind.parse(document_kind)
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register the four document wizard sections."""
        self.register_validator(BASIC_INFO, build_basic_info_schema())
        self.register_validator(LINE_ITEMS, build_line_items_schema())
        self.register_validator(TERMS, build_terms_schema(self.document_kind))
        self.register_validator(TEMPLATE_CHOICE, build_template_schema())

    def register_validator(self, section: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a section.

        Args:
            section: Section name (e.g. 'basic_info')
            validator: ValidationStrategy instance
        """
        self._validators[section.lower()] = validator

    def get_validator(self, section: str) -> Optional[ValidationStrategy]:
        """Get a registered validator by section name, or None."""
        return self._validators.get(section.lower())

    def check(self, section: str, record: Mapping[str, Any]) -> SectionValidationResult:
        """
        Validate raw input for a section.

        Raises:
            KeyError: If no validator is registered for the section
        """
        validator = self.get_validator(section)
        if validator is None:
            raise KeyError(f"No validator registered for section: {section}")
        return validator.check(record)

    def validate(self, record: Mapping[str, Any], section: str) -> List[str]:
        """
        Validate a record using the section's validator.

        Returns:
            List of error messages (empty if valid)
        """
        validator = self.get_validator(section)
        if not validator:
            return [f"No validator registered for section: {section}"]
        return validator.validate(record)

    def is_valid(self, record: Mapping[str, Any], section: str) -> bool:
        """Check if a record is valid for a section."""
        return len(self.validate(record, section)) == 0

    def get_registered_sections(self) -> List[str]:
        """Section names in registration order."""
        return list(self._validators.keys())
