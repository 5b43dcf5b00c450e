# -*- coding: utf-8 -*-
"""
Application configuration.

Values are read from the environment (or a local .env file) once at import
time and exposed as class-level constants on Config.
"""

from pathlib import Path
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_DATA_DIR = os.getenv("DOCFLOW_DATA_DIR")
_LOGS_DIR = os.getenv("DOCFLOW_LOGS_DIR")
_DEFAULT_LANGUAGE = os.getenv("DOCFLOW_LANGUAGE", "en")
_WIZARD_BACKGROUND_SUBMIT = os.getenv("DOCFLOW_BACKGROUND_SUBMIT", "true").lower() in ("true", "1", "yes")
_DEFAULT_PAYMENT_TERMS = os.getenv(
    "DOCFLOW_DEFAULT_PAYMENT_TERMS", "Payment due within 30 days of invoice"
)
_DOCUMENT_TEMPLATES = ("standard", "professional", "minimal", "detailed")


def resolve_template(name: Optional[str], fallback: str = "standard") -> str:
    """Return name if it is one of the document templates, else the fallback."""
    name = (name or "").strip()
    return name if name in _DOCUMENT_TEMPLATES else fallback


_DEFAULT_TEMPLATE = resolve_template(os.getenv("DOCFLOW_DEFAULT_TEMPLATE"))
_REFERENCE_SUFFIX_MAX = int(os.getenv("DOCFLOW_REFERENCE_SUFFIX_MAX", "10000"))
_MAX_QUANTITY = int(os.getenv("DOCFLOW_MAX_QUANTITY", "1000000000"))
_MAX_UNIT_PRICE = os.getenv("DOCFLOW_MAX_UNIT_PRICE", "1000000000000")
_LOG_LEVEL = os.getenv("DOCFLOW_LOG_LEVEL", "DEBUG").upper()
_CONSOLE_LOG_LEVEL = os.getenv("DOCFLOW_CONSOLE_LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "DocFlow"
    APP_TITLE: str = "Document Management"
    APP_TITLE_AR: str = "إدارة المستندات"
    VERSION: str = "1.0.0"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(_DATA_DIR) if _DATA_DIR else PROJECT_ROOT / "data"
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Database Configuration (SQLite)
    DB_NAME: str = "docflow.db"
    DB_PATH: Path = DATA_DIR / DB_NAME

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOGGER_NAME: str = "docflow"
    LOG_LEVEL: str = _LOG_LEVEL
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    # Language ("en" or "ar")
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Document Creation Wizard
    # When True the persistence call runs on a QThread worker
    WIZARD_BACKGROUND_SUBMIT: bool = _WIZARD_BACKGROUND_SUBMIT
    DEFAULT_PAYMENT_TERMS: str = _DEFAULT_PAYMENT_TERMS
    DEFAULT_TEMPLATE: str = _DEFAULT_TEMPLATE
    DOCUMENT_TEMPLATES: Tuple[str, ...] = _DOCUMENT_TEMPLATES
    REFERENCE_SUFFIX_MAX: int = _REFERENCE_SUFFIX_MAX  # exclusive upper bound

    # Line item limits (quantity is stored as a SQLite INTEGER)
    MAX_QUANTITY: int = _MAX_QUANTITY
    MAX_UNIT_PRICE: Decimal = Decimal(_MAX_UNIT_PRICE)

    # Money display
    CURRENCY_SYMBOL: str = "$"
    CURRENCY_DECIMALS: int = 2
