# -*- coding: utf-8 -*-
"""
Section definition for wizard steps.

A section is data, not a widget: a name, a title key, the validator for
its raw input and the defaults used to prefill it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping
import copy

from services.validation import SectionValidationResult, ValidationStrategy


@dataclass
class SectionDefinition:
    """One step of a wizard."""

    name: str
    title_key: str
    validator: ValidationStrategy
    defaults: Dict[str, Any] = field(default_factory=dict)

    def validate(self, raw_input: Mapping[str, Any]) -> SectionValidationResult:
        """Validate raw input; never modifies it."""
        return self.validator.check(raw_input)

    def default_values(self) -> Dict[str, Any]:
        """A fresh copy of the defaults."""
        return copy.deepcopy(self.defaults)
