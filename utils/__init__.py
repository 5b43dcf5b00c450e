# -*- coding: utf-8 -*-
"""
DocFlow Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_money, parse_iso_date

__all__ = [
    "get_logger",
    "setup_logger",
    "format_money",
    "parse_iso_date",
]
