# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Field rules and section schemas.

A wizard section is validated by a strategy composed of per-field rules.
Validation is synchronous, performs no I/O and never mutates its input.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from services.exceptions import FieldValidationError
from services.translation_manager import tr
from utils.helpers import parse_iso_date

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class SectionValidationResult:
    """Outcome of validating one wizard section."""

    section: str
    values: Dict[str, Any] = field(default_factory=dict)
    field_errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.field_errors

    @property
    def errors(self) -> List[str]:
        """All error messages, flattened in field order."""
        return [message for messages in self.field_errors.values() for message in messages]

    def add_error(self, field_path: str, message: str):
        """Add an error message for a field path (e.g. "items.0.name")."""
        self.field_errors.setdefault(field_path, []).append(message)

    def merge(self, other: "SectionValidationResult", prefix: str = ""):
        """Copy another result's errors under a path prefix."""
        for path, messages in other.field_errors.items():
            for message in messages:
                self.add_error(f"{prefix}{path}", message)

    def raise_for_errors(self):
        """Raise FieldValidationError if any field failed."""
        if not self.is_valid:
            raise FieldValidationError(
                tr("validation.check_data"),
                field_errors=self.field_errors,
                section=self.section,
            )


# =========================================================================
# Field rules
# =========================================================================

class FieldRule(ABC):
    """
    A single field's rule.

    clean() returns (cleaned_value, error_message); error_message is None
    when the value passes.
    """

    def __init__(self, message_key: str, required: bool = True):
        self.message_key = message_key
        self.required = required

    @staticmethod
    def is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    def error(self, key: Optional[str] = None) -> str:
        return tr(key or self.message_key)

    def clean(self, value: Any) -> Tuple[Any, Optional[str]]:
        if self.is_blank(value):
            if self.required:
                return None, self.error()
            return None, None
        return self.clean_value(value)

    @abstractmethod
    def clean_value(self, value: Any) -> Tuple[Any, Optional[str]]:
        """Clean a non-blank value."""
        pass


class TextRule(FieldRule):
    """Text, trimmed, with a minimum length."""

    def __init__(self, message_key: str, min_length: int = 1, required: bool = True):
        super().__init__(message_key, required)
        self.min_length = min_length

    def clean_value(self, value):
        text = str(value).strip()
        if len(text) < self.min_length:
            return text, self.error()
        return text, None


class EmailRule(FieldRule):
    """Email address shape (local@domain.tld)."""

    def clean_value(self, value):
        text = str(value).strip()
        if not EMAIL_PATTERN.match(text):
            return text, self.error()
        return text, None


class DateRule(FieldRule):
    """ISO date (YYYY-MM-DD); the cleaned value stays an ISO string."""

    def clean_value(self, value):
        parsed = parse_iso_date(value)
        if parsed is None:
            return value, self.error()
        return parsed.isoformat(), None


class IntegerRule(FieldRule):
    """Whole number between a lower and an optional upper bound."""

    def __init__(self, message_key: str, minimum: int, type_message_key: str,
                 required: bool = True, maximum: Optional[int] = None,
                 max_message_key: Optional[str] = None):
        super().__init__(message_key, required)
        self.minimum = minimum
        self.type_message_key = type_message_key
        self.maximum = maximum
        self.max_message_key = max_message_key

    def clean_value(self, value):
        if isinstance(value, bool):
            return value, self.error(self.type_message_key)
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return value, self.error(self.type_message_key)
        if not number.is_finite() or number != number.to_integral_value():
            return value, self.error(self.type_message_key)
        # Bounds checked on the Decimal, before int()
        if number < self.minimum:
            return value, self.error()
        if self.maximum is not None and number > self.maximum:
            return value, self.error(self.max_message_key)
        return int(number), None


class DecimalRule(FieldRule):
    """Exact decimal amount between a lower and an optional upper bound."""

    def __init__(self, message_key: str, minimum: Decimal, invalid_message_key: str,
                 required: bool = True, maximum: Optional[Decimal] = None,
                 max_message_key: Optional[str] = None):
        super().__init__(message_key, required)
        self.minimum = Decimal(minimum)
        self.invalid_message_key = invalid_message_key
        self.maximum = Decimal(maximum) if maximum is not None else None
        self.max_message_key = max_message_key

    def clean_value(self, value):
        if isinstance(value, bool):
            return value, self.error(self.invalid_message_key)
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation:
            return value, self.error(self.invalid_message_key)
        if not amount.is_finite():
            return value, self.error(self.invalid_message_key)
        if amount < self.minimum:
            return amount, self.error()
        if self.maximum is not None and amount > self.maximum:
            return value, self.error(self.max_message_key)
        return amount, None


class ChoiceRule(FieldRule):
    """One of a fixed set of values."""

    def __init__(self, message_key: str, choices: Sequence[str], required: bool = True):
        super().__init__(message_key, required)
        self.choices = tuple(choices)

    def clean_value(self, value):
        text = str(value).strip()
        if text not in self.choices:
            return text, self.error()
        return text, None


# =========================================================================
# Strategies
# =========================================================================

class ValidationStrategy(ABC):
    """
    Abstract base class for section validation strategies.
    """

    def __init__(self, section: str):
        self.section = section

    @abstractmethod
    def check(self, record: Mapping[str, Any]) -> SectionValidationResult:
        """
        Validate raw input.

        Args:
            record: Raw field values as entered by the user

        Returns:
            SectionValidationResult with cleaned values or field errors
        """
        pass

    def validate(self, record: Mapping[str, Any]) -> List[str]:
        """
        Validate a record and return list of error messages.

        Returns:
            List of error messages (empty list if valid)
        """
        return self.check(record).errors

    def is_valid(self, record: Mapping[str, Any]) -> bool:
        """Check if record passes all validations."""
        return len(self.validate(record)) == 0


CrossFieldCheck = Callable[[Dict[str, Any]], Optional[Tuple[str, str]]]


class SectionSchema(ValidationStrategy):
    """
    Ordered list of (field name, rule) pairs plus optional cross-field checks.

    Cross-field checks run only once every field is individually valid and
    return (field name, message key) on failure.
    """

    def __init__(self, section: str, fields: Sequence[Tuple[str, FieldRule]],
                 checks: Sequence[CrossFieldCheck] = ()):
        super().__init__(section)
        self.fields = list(fields)
        self.checks = list(checks)

    def check(self, record):
        record = record or {}
        result = SectionValidationResult(section=self.section)
        for name, rule in self.fields:
            value, message = rule.clean(record.get(name))
            if message:
                result.add_error(name, message)
            else:
                result.values[name] = value

        if result.is_valid:
            for cross_check in self.checks:
                failure = cross_check(result.values)
                if failure:
                    field_name, message_key = failure
                    result.add_error(field_name, tr(message_key))

        if not result.is_valid:
            result.values = {}
        return result


class LineItemsSchema(ValidationStrategy):
    """
    A list field whose entries are validated by an item schema.

    Item errors are reported as "<list field>.<index>.<item field>".
    """

    def __init__(self, section: str, item_schema: SectionSchema, list_field: str = "items",
                 min_items: int = 1, min_items_message_key: str = "validation.items_required"):
        super().__init__(section)
        self.item_schema = item_schema
        self.list_field = list_field
        self.min_items = min_items
        self.min_items_message_key = min_items_message_key

    def check(self, record):
        record = record or {}
        result = SectionValidationResult(section=self.section)
        items = record.get(self.list_field) or []

        if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
            result.add_error(self.list_field, tr(self.min_items_message_key))
            return result

        if len(items) < self.min_items:
            result.add_error(self.list_field, tr(self.min_items_message_key))
            return result

        cleaned = []
        for index, item in enumerate(items):
            item_result = self.item_schema.check(item if isinstance(item, Mapping) else {})
            if item_result.is_valid:
                cleaned.append(item_result.values)
            else:
                result.merge(item_result, prefix=f"{self.list_field}.{index}.")

        if result.is_valid:
            result.values = {self.list_field: cleaned}
        return result
