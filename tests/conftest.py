# -*- coding: utf-8 -*-
"""
Shared test fixtures.

Data and log directories point at a temporary folder before any
application module reads its configuration.
"""

import os
import tempfile

_TEST_ROOT = tempfile.mkdtemp(prefix="docflow-tests-")
os.environ.setdefault("DOCFLOW_DATA_DIR", os.path.join(_TEST_ROOT, "data"))
os.environ.setdefault("DOCFLOW_LOGS_DIR", os.path.join(_TEST_ROOT, "logs"))
os.environ.setdefault("DOCFLOW_LANGUAGE", "en")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from models.user import User
from repositories.database import Database
from services.auth_service import AuthService
from services.exceptions import PersistenceError
from services.translation_manager import set_language


class FakePersistence:
    """Persistence collaborator recording every submitted record."""

    def __init__(self, failures: int = 0):
        self.failures = failures
        self.calls = []
        self.states_seen = []
        self.wizard = None

    def submit(self, document_kind, record):
        self.calls.append((document_kind, record))
        if self.wizard is not None:
            self.states_seen.append(self.wizard.submission_state)
        if self.failures > 0:
            self.failures -= 1
            raise PersistenceError("database unavailable", context="submit")
        return f"doc-{len(self.calls)}"


@pytest.fixture(autouse=True)
def english():
    """Run every test with English messages."""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def test_db(tmp_path):
    """Create an initialized test database."""
    db = Database(db_path=tmp_path / "test_docflow.db")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def user():
    return User(user_id="user-1", email="ada@example.com", full_name="Ada Lovelace")


@pytest.fixture
def auth_service(user):
    """Auth service with a signed-in user."""
    service = AuthService()
    service.sign_in(user)
    return service


@pytest.fixture
def fake_persistence():
    return FakePersistence()


@pytest.fixture
def failing_persistence():
    """Fails the first submission, succeeds afterwards."""
    return FakePersistence(failures=1)


@pytest.fixture
def basic_info_input():
    return {
        "title": "Office Supplies",
        "reference": "PURCHASE-ORDER-1234",
        "date": "2026-03-01",
        "client_name": "Acme Corp",
        "client_email": "orders@acme.example",
        "client_phone": "",
    }


@pytest.fixture
def line_items_input():
    return {
        "items": [
            {"name": "Widget", "description": "Blue", "quantity": 2, "unit_price": "10.00"},
            {"name": "Gadget", "description": "", "quantity": 1, "unit_price": "10.00"},
        ]
    }


@pytest.fixture
def terms_input():
    return {
        "payment_terms": "Net 30",
        "delivery_terms": "",
        "additional_notes": "",
    }


@pytest.fixture
def template_input():
    return {"template": "standard"}


@pytest.fixture
def valid_inputs(basic_info_input, line_items_input, terms_input, template_input):
    """Valid raw input for the four sections, in order."""
    return [basic_info_input, line_items_input, terms_input, template_input]
