# -*- coding: utf-8 -*-
"""
Tests for wizard section validation.

Tests cover:
- Basic info rules (title, reference, date, email)
- Line item rules (at least one item, quantity, price)
- Kind-specific terms
- Template choice
- Input is never modified
"""

import copy
from decimal import Decimal

import pytest

from models.document import DocumentKind
from services.exceptions import FieldValidationError
from services.validation import (
    BASIC_INFO,
    LINE_ITEMS,
    TEMPLATE_CHOICE,
    TERMS,
    IntegerRule,
    ValidationFactory,
)


@pytest.fixture
def factory():
    """Create validation factory for purchase orders."""
    return ValidationFactory(DocumentKind.PURCHASE_ORDER)


class TestFactory:
    """Test the section registry."""

    def test_sections_registered_in_order(self, factory):
        assert factory.get_registered_sections() == [BASIC_INFO, LINE_ITEMS, TERMS, TEMPLATE_CHOICE]

    def test_unknown_section(self, factory):
        assert factory.validate({}, "shipping") == ["No validator registered for section: shipping"]
        with pytest.raises(KeyError):
            factory.check("shipping", {})


class TestBasicInfo:
    """Test basic info validation."""

    def test_valid_input(self, factory, basic_info_input):
        result = factory.check(BASIC_INFO, basic_info_input)

        assert result.is_valid
        assert result.values["title"] == "Office Supplies"
        assert result.values["client_phone"] is None

    def test_values_are_trimmed(self, factory, basic_info_input):
        basic_info_input["client_name"] = "  Acme Corp  "
        result = factory.check(BASIC_INFO, basic_info_input)
        assert result.values["client_name"] == "Acme Corp"

    def test_short_title(self, factory, basic_info_input):
        basic_info_input["title"] = "PO"
        result = factory.check(BASIC_INFO, basic_info_input)

        assert not result.is_valid
        assert result.field_errors["title"] == ["Title must be at least 3 characters"]
        assert result.values == {}

    def test_invalid_email(self, factory, basic_info_input):
        basic_info_input["client_email"] = "not-an-email"
        result = factory.check(BASIC_INFO, basic_info_input)
        assert "client_email" in result.field_errors

    def test_invalid_date(self, factory, basic_info_input):
        basic_info_input["date"] = "2026-02-30"
        result = factory.check(BASIC_INFO, basic_info_input)
        assert "date" in result.field_errors

    def test_missing_fields_reported_together(self, factory):
        result = factory.check(BASIC_INFO, {})
        assert set(result.field_errors) == {"title", "reference", "date", "client_name", "client_email"}

    def test_input_not_modified(self, factory, basic_info_input):
        original = copy.deepcopy(basic_info_input)
        factory.check(BASIC_INFO, basic_info_input)
        assert basic_info_input == original

    def test_raise_for_errors(self, factory):
        result = factory.check(BASIC_INFO, {"title": "x"})
        with pytest.raises(FieldValidationError) as exc_info:
            result.raise_for_errors()
        assert "title" in exc_info.value.fields
        assert exc_info.value.section == BASIC_INFO


class TestLineItems:
    """Test line item validation."""

    def test_zero_items_fail(self, factory):
        result = factory.check(LINE_ITEMS, {"items": []})

        assert not result.is_valid
        assert result.field_errors["items"] == ["At least one item is required"]

    def test_free_item_passes(self, factory):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Widget", "quantity": 1, "unit_price": 0}]})

        assert result.is_valid
        assert result.values["items"][0]["unit_price"] == Decimal("0")

    def test_negative_price_fails(self, factory):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Widget", "quantity": 1, "unit_price": "-1"}]})

        assert not result.is_valid
        assert result.field_errors["items.0.unit_price"] == ["Price cannot be negative"]

    def test_errors_keyed_by_item_path(self, factory):
        items = [
            {"name": "Widget", "quantity": 1, "unit_price": "5"},
            {"name": "X", "quantity": 0, "unit_price": "abc"},
        ]
        result = factory.check(LINE_ITEMS, {"items": items})

        assert set(result.field_errors) == {"items.1.name", "items.1.quantity", "items.1.unit_price"}

    def test_quantity_must_be_whole(self, factory):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Widget", "quantity": "1.5", "unit_price": "1"}]})
        assert result.field_errors["items.0.quantity"] == ["Quantity must be a whole number"]

    def test_price_from_float_is_exact(self, factory):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Widget", "quantity": 1, "unit_price": 10.1}]})
        assert result.values["items"][0]["unit_price"] == Decimal("10.1")

    def test_items_not_a_list(self, factory):
        result = factory.check(LINE_ITEMS, {"items": "Widget"})
        assert "items" in result.field_errors


class TestIntegerRule:
    """Test whole-number parsing."""

    @pytest.mark.parametrize("value,expected", [(3, 3), ("4", 4), (Decimal("2.0"), 2)])
    def test_accepted(self, value, expected):
        rule = IntegerRule("validation.quantity_min", minimum=1, type_message_key="validation.quantity_integer")
        assert rule.clean(value) == (expected, None)

    def test_bool_rejected(self):
        rule = IntegerRule("validation.quantity_min", minimum=1, type_message_key="validation.quantity_integer")
        _, message = rule.clean(True)
        assert message == "Quantity must be a whole number"

    def test_exponent_form_within_bounds(self):
        rule = IntegerRule(
            "validation.quantity_min", minimum=1, type_message_key="validation.quantity_integer",
            maximum=1000, max_message_key="validation.quantity_max",
        )
        assert rule.clean("1e2") == (100, None)


class TestLineItemLimits:
    """Test upper bounds on quantity and price."""

    @pytest.mark.parametrize("quantity", ["1e20000000", "1e200000", str(2 ** 64)])
    def test_oversized_quantity_rejected(self, factory, quantity):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Paper", "quantity": quantity, "unit_price": "1"}]})

        assert not result.is_valid
        assert result.field_errors["items.0.quantity"] == ["Quantity is too large"]
        assert result.values == {}

    def test_quantity_at_limit(self, factory):
        from app.config import Config

        result = factory.check(
            LINE_ITEMS, {"items": [{"name": "Paper", "quantity": Config.MAX_QUANTITY, "unit_price": "1"}]}
        )
        assert result.is_valid
        assert result.values["items"][0]["quantity"] == Config.MAX_QUANTITY

    def test_tiny_exponent_quantity_not_whole(self, factory):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Paper", "quantity": "1e-20000000", "unit_price": "1"}]})
        assert result.field_errors["items.0.quantity"] == ["Quantity must be a whole number"]

    @pytest.mark.parametrize("price", ["1e20000000", "1e13"])
    def test_oversized_price_rejected(self, factory, price):
        result = factory.check(LINE_ITEMS, {"items": [{"name": "Paper", "quantity": 1, "unit_price": price}]})
        assert result.field_errors["items.0.unit_price"] == ["Price is too large"]


class TestTerms:
    """Test kind-specific terms."""

    def test_payment_terms_required(self, factory):
        result = factory.check(TERMS, {"payment_terms": ""})
        assert "payment_terms" in result.field_errors

    def test_quotation_valid_until(self):
        factory = ValidationFactory("quotation")
        result = factory.check(TERMS, {"payment_terms": "Net 30", "valid_until": "2026-05-01"})

        assert result.is_valid
        assert result.values["valid_until"] == "2026-05-01"

    def test_purchase_order_ignores_agreement_dates(self, factory):
        result = factory.check(TERMS, {"payment_terms": "Net 30", "start_date": "bad"})
        assert result.is_valid
        assert "start_date" not in result.values

    def test_agreement_end_before_start(self):
        factory = ValidationFactory(DocumentKind.SALES_AGREEMENT)
        result = factory.check(TERMS, {
            "payment_terms": "Monthly",
            "start_date": "2026-06-01",
            "end_date": "2026-05-01",
        })
        assert result.field_errors["end_date"] == ["End date cannot be before the start date"]

    def test_agreement_open_ended(self):
        factory = ValidationFactory(DocumentKind.SALES_AGREEMENT)
        result = factory.check(TERMS, {"payment_terms": "Monthly", "start_date": "2026-06-01"})
        assert result.is_valid
        assert result.values["end_date"] is None


class TestTemplateChoice:
    """Test template selection."""

    @pytest.mark.parametrize("template", ["standard", "professional", "minimal", "detailed"])
    def test_known_templates(self, factory, template):
        assert factory.is_valid({"template": template}, TEMPLATE_CHOICE)

    def test_unknown_template(self, factory):
        assert factory.validate({"template": "fancy"}, TEMPLATE_CHOICE) == ["Please select a template"]
