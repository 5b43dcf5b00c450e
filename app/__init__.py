# -*- coding: utf-8 -*-
"""
DocFlow Application Core Module
"""

from .config import Config

__all__ = ["Config"]
