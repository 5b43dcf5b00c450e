# -*- coding: utf-8 -*-
"""
Document Creation Wizard - purchase orders, quotations and sales agreements.

Four sections (basic info, line items, terms, template) are validated one
at a time; after the last one the finished DocumentRecord is handed to the
persistence collaborator.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Protocol

from PyQt5.QtCore import QObject

from models.document import DocumentKind, DocumentRecord
from services.exceptions import PersistenceError
from services.translation_manager import tr
from ui.wizards.framework import BaseWizard, SectionDefinition
from .document_context import DocumentWizardContext
from .preview import DocumentPreview
from .sections import build_default_values, build_sections
from utils.logger import get_logger

logger = get_logger(__name__)


class DocumentPersistence(Protocol):
    """Anything that can store a finished document."""

    def submit(self, document_kind: DocumentKind, record: DocumentRecord) -> str:
        ...


class DocumentCreationWizard(BaseWizard):
    """
    Wizard for creating one business document.

    Args:
        document_kind: DocumentKind or an accepted alias ("po", "quotation", ...)
        persistence: Collaborator with submit(kind, record) -> stored id
        auth_service: Identity provider; its current user becomes created_by
        defaults: Per-section initial values overriding the built-in ones
        on_complete: Called with the stored DocumentRecord
        on_cancel: Called after cancellation
        background_submission: Run the persistence call on a worker thread
    """

    def __init__(
        self,
        document_kind,
        persistence: DocumentPersistence,
        auth_service,
        defaults: Optional[Dict[str, Dict[str, Any]]] = None,
        on_complete: Optional[Callable[[DocumentRecord], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        background_submission: Optional[bool] = None,
        parent: Optional[QObject] = None,
    ):
        self.document_kind = DocumentKind.parse(document_kind)
        self.persistence = persistence
        self.auth_service = auth_service

        self.defaults = build_default_values(self.document_kind)
        for section, values in (defaults or {}).items():
            self.defaults.setdefault(section, {}).update(values)

        super().__init__(
            on_complete=on_complete,
            on_cancel=on_cancel,
            background_submission=background_submission,
            parent=parent,
        )
        logger.info(f"Document wizard opened: {self.document_kind.value}")

    # =========================================================================
    # BaseWizard implementation
    # =========================================================================

    def create_context(self) -> DocumentWizardContext:
        return DocumentWizardContext(self.document_kind, defaults=self.defaults)

    def create_sections(self) -> List[SectionDefinition]:
        return build_sections(self.document_kind, self.defaults)

    def build_submission(self) -> DocumentRecord:
        """Assemble the record; created_at is the time of this attempt."""
        user = self.auth_service.current_user() if self.auth_service else None
        if user is None:
            raise PersistenceError("No signed-in user", context="not_signed_in")
        return self.context.build_record(created_by=user.user_id, created_at=datetime.now())

    def submit_payload(self, record: DocumentRecord) -> str:
        return self.persistence.submit(self.document_kind, record)

    def on_submission_succeeded(self, record: DocumentRecord, stored_id: Any) -> DocumentRecord:
        record.document_id = stored_id
        logger.info(
            f"{self.document_kind.value} {record.reference} stored as {stored_id} "
            f"(total {record.grand_total})"
        )
        return record

    def completion_data(self, record: DocumentRecord) -> Dict[str, Any]:
        return record.to_dict()

    # =========================================================================
    # Presentation helpers
    # =========================================================================

    def get_wizard_title(self) -> str:
        return tr("wizard.title", kind=tr(self.document_kind.label_key))

    def get_step_progress(self) -> str:
        return tr(
            "wizard.step_progress",
            current=self.navigator.current_index + 1,
            total=self.navigator.get_step_count(),
        )

    def preview(self, template: Optional[str] = None) -> DocumentPreview:
        """Preview of the confirmed sections."""
        return DocumentPreview.from_context(self.context, template=template)
