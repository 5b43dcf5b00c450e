# -*- coding: utf-8 -*-
"""
Wizard Framework - Multi-section wizard state machine.

Provides base classes for wizards that validate each section
independently, accumulate the confirmed data and submit it once at the end.
"""

from .base_wizard import BaseWizard
from .section import SectionDefinition
from .step_navigator import StepNavigator
from .submission_worker import SubmissionWorker
from .wizard_context import SubmissionState, WizardContext

__all__ = [
    'BaseWizard',
    'SectionDefinition',
    'StepNavigator',
    'SubmissionState',
    'SubmissionWorker',
    'WizardContext',
]
