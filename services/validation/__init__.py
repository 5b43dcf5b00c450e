# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ChoiceRule,
    DateRule,
    DecimalRule,
    EmailRule,
    FieldRule,
    IntegerRule,
    LineItemsSchema,
    SectionSchema,
    SectionValidationResult,
    TextRule,
    ValidationStrategy,
)
from .validation_factory import (
    BASIC_INFO,
    LINE_ITEMS,
    TEMPLATE_CHOICE,
    TERMS,
    ValidationFactory,
)

__all__ = [
    'ValidationStrategy', 'SectionSchema', 'LineItemsSchema', 'SectionValidationResult',
    'FieldRule', 'TextRule', 'EmailRule', 'DateRule', 'IntegerRule', 'DecimalRule', 'ChoiceRule',
    'ValidationFactory', 'BASIC_INFO', 'LINE_ITEMS', 'TERMS', 'TEMPLATE_CHOICE',
]
