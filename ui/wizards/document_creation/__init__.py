# -*- coding: utf-8 -*-
"""
Document Creation Wizard.

Creates purchase orders, quotations and sales agreements in four sections.
"""

from .document_context import DocumentWizardContext
from .document_wizard import DocumentCreationWizard
from .preview import DocumentPreview, PreviewLine
from .sections import SECTION_ORDER, build_default_values, build_sections, generate_reference

__all__ = [
    'DocumentCreationWizard',
    'DocumentWizardContext',
    'DocumentPreview',
    'PreviewLine',
    'SECTION_ORDER',
    'build_default_values',
    'build_sections',
    'generate_reference',
]
