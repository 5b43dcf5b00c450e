# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
import pytest


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.config import Config
        from controllers import DocumentController, DocumentFilter, OperationResult
        from models import DocumentKind, DocumentRecord, LineItem, User
        from repositories.database import Database
        from repositories.document_repository import DocumentRepository
        from services.auth_service import AuthService
        from services.validation import ValidationFactory
        from ui.wizards.document_creation import DocumentCreationWizard
        assert Config.APP_NAME == "DocFlow"
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_lazy_package_exports():
    """Test the lazy package attributes resolve."""
    import repositories
    import services

    assert repositories.DocumentRepository.__name__ == "DocumentRepository"
    assert services.DocumentWorkflowService.__name__ == "DocumentWorkflowService"
    with pytest.raises(AttributeError):
        services.NoSuchService


def test_database_initialization(test_db):
    """Test that the schema is created."""
    tables = {row["name"] for row in test_db.fetch_all("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {
        "users",
        "purchase_orders", "purchase_order_items",
        "quotations", "quotation_items",
        "sales_agreements", "sales_agreement_items",
    } <= tables


def test_initialize_is_idempotent(test_db):
    test_db.initialize()


def test_config_defaults():
    """Test wizard configuration values."""
    from app.config import Config

    assert Config.DEFAULT_TEMPLATE in Config.DOCUMENT_TEMPLATES
    assert Config.REFERENCE_SUFFIX_MAX == 10000


@pytest.mark.parametrize("configured,expected", [
    ("detailed", "detailed"),
    (" minimal ", "minimal"),
    ("fancy", "standard"),
    ("", "standard"),
    (None, "standard"),
])
def test_default_template_falls_back(configured, expected):
    """Test an unknown configured template falls back to the standard one."""
    from app.config import resolve_template

    assert resolve_template(configured) == expected


def test_line_item_limits():
    from app.config import Config

    assert Config.MAX_QUANTITY < 2 ** 63
    assert Config.MAX_UNIT_PRICE > 0


def test_logger_uses_configured_name_and_levels():
    """Test module loggers hang off the configured application logger."""
    import logging

    from app.config import Config
    from utils.logger import get_logger, setup_logger

    app_logger = setup_logger()
    module_logger = get_logger("services.auth_service")

    assert app_logger.name == Config.LOGGER_NAME
    assert module_logger.name == f"{Config.LOGGER_NAME}.services.auth_service"
    assert get_logger(f"{Config.LOGGER_NAME}.models").name == f"{Config.LOGGER_NAME}.models"
    assert len(app_logger.handlers) == 2

    setup_logger()
    assert len(app_logger.handlers) == 2
    levels = {type(handler): handler.level for handler in app_logger.handlers}
    assert levels[logging.StreamHandler] == logging.getLevelName(Config.CONSOLE_LOG_LEVEL)
