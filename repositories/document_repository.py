# -*- coding: utf-8 -*-
"""
Document repository for database operations.

Stores purchase orders, quotations and sales agreements: one header row per
document and one row per line item, written together in one transaction.
"""

import sqlite3
import uuid
from datetime import datetime
from typing import List, Optional

from models.document import (
    DocumentKind,
    DocumentRecord,
    DocumentStatus,
    DocumentSummary,
    LineItem,
    to_decimal,
)
from services.exceptions import PersistenceError
from .database import Database, RowProxy
from utils.logger import get_logger

logger = get_logger(__name__)

# Kind-specific header columns
_EXTRA_COLUMNS = {
    DocumentKind.PURCHASE_ORDER: (),
    DocumentKind.QUOTATION: ("valid_until",),
    DocumentKind.SALES_AGREEMENT: ("start_date", "end_date"),
}


class DocumentRepository:
    """
    Repository for business documents.

    Implements the persistence collaborator of the document wizard:
    submit(kind, record) returns the stored id or raises PersistenceError.
    """

    def __init__(self, db: Database):
        self.db = db

    @staticmethod
    def _parent_column(kind: DocumentKind) -> str:
        return f"{kind.value}_id"

    def submit(self, document_kind, record: DocumentRecord) -> str:
        """
        Store a finished document with its line items.

        Returns:
            The new document id

        Raises:
            PersistenceError: If the write fails (nothing is stored)
        """
        kind = DocumentKind.parse(document_kind)
        if record.document_kind != kind:
            raise PersistenceError(
                f"Record kind {record.document_kind.value} does not match {kind.value}",
                context="submit",
            )
        if not record.created_by:
            raise PersistenceError("Document has no creator", context="not_signed_in")

        document_id = str(uuid.uuid4())
        now = datetime.now().isoformat()
        created_at = record.created_at.isoformat() if record.created_at else now

        columns = [
            "id", "title", "reference", "date",
            "client_name", "client_email", "client_phone",
            "payment_terms", "delivery_terms", "additional_notes",
            "template", "status", "total_amount",
            "created_by", "created_at", "updated_at",
        ]
        params = [
            document_id, record.title, record.reference, record.date,
            record.client_name, record.client_email, record.client_phone,
            record.payment_terms, record.delivery_terms, record.additional_notes,
            record.template, record.status.value, str(record.grand_total),
            record.created_by, created_at, now,
        ]
        for column in _EXTRA_COLUMNS[kind]:
            columns.append(column)
            params.append(getattr(record, column))

        header_query = (
            f"INSERT INTO {kind.table_name} ({', '.join(columns)}) "
            f"VALUES ({', '.join('?' for _ in columns)})"
        )
        item_query = f"""
            INSERT INTO {kind.items_table_name} (
                id, {self._parent_column(kind)}, position,
                name, description, quantity, unit_price,
                created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """

        try:
            with self.db.transaction() as cursor:
                cursor.execute(header_query, tuple(params))
                for position, item in enumerate(record.items):
                    cursor.execute(item_query, (
                        str(uuid.uuid4()), document_id, position,
                        item.name, item.description, item.quantity, str(item.unit_price),
                        now, now,
                    ))
        except sqlite3.Error as e:
            raise PersistenceError(
                f"Could not store {kind.value}", original_error=e, context="submit"
            ) from e

        logger.info(f"Stored {kind.value} {document_id} ({len(record.items)} items)")
        return document_id

    def get(self, document_kind, document_id: str) -> Optional[DocumentRecord]:
        """Get a full document with its items, or None."""
        kind = DocumentKind.parse(document_kind)
        row = self.db.fetch_one(f"SELECT * FROM {kind.table_name} WHERE id = ?", (document_id,))
        if not row:
            return None
        item_rows = self.db.fetch_all(
            f"SELECT * FROM {kind.items_table_name} "
            f"WHERE {self._parent_column(kind)} = ? ORDER BY position",
            (document_id,),
        )
        return self._row_to_record(kind, row, item_rows)

    def list_summaries(self, document_kind=None) -> List[DocumentSummary]:
        """
        List dashboard rows, newest first.

        Args:
            document_kind: Restrict to one kind; None lists every kind
        """
        kinds = [DocumentKind.parse(document_kind)] if document_kind else list(DocumentKind)
        summaries = []
        for kind in kinds:
            rows = self.db.fetch_all(
                f"SELECT id, title, reference, date, status, total_amount, created_at, created_by "
                f"FROM {kind.table_name}"
            )
            summaries.extend(self._row_to_summary(kind, row) for row in rows)

        summaries.sort(key=lambda s: s.created_at or datetime.min, reverse=True)
        return summaries

    def update_status(self, document_kind, document_id: str, status: DocumentStatus) -> bool:
        """
        Set a document's approval status.

        Returns:
            True if a row was updated
        """
        kind = DocumentKind.parse(document_kind)
        try:
            with self.db.transaction() as cursor:
                cursor.execute(
                    f"UPDATE {kind.table_name} SET status = ?, updated_at = ? WHERE id = ?",
                    (status.value, datetime.now().isoformat(), document_id),
                )
                updated = cursor.rowcount > 0
        except sqlite3.Error as e:
            raise PersistenceError(
                f"Could not update status of {document_id}", original_error=e, context="update_status"
            ) from e

        if updated:
            logger.info(f"{kind.value} {document_id} -> {status.value}")
        return updated

    def count(self, document_kind=None) -> int:
        """Number of stored documents."""
        kinds = [DocumentKind.parse(document_kind)] if document_kind else list(DocumentKind)
        total = 0
        for kind in kinds:
            row = self.db.fetch_one(f"SELECT COUNT(*) AS count FROM {kind.table_name}")
            total += row["count"] if row else 0
        return total

    def _row_to_summary(self, kind: DocumentKind, row: RowProxy) -> DocumentSummary:
        return DocumentSummary(
            document_id=row["id"],
            document_kind=kind,
            title=row["title"],
            reference=row["reference"],
            date=row["date"],
            status=DocumentStatus(row["status"]),
            amount=to_decimal(row["total_amount"]),
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            created_by=row["created_by"],
        )

    def _row_to_record(self, kind: DocumentKind, row: RowProxy,
                       item_rows: List[RowProxy]) -> DocumentRecord:
        extra = {column: row[column] for column in _EXTRA_COLUMNS[kind]}
        return DocumentRecord(
            document_kind=kind,
            title=row["title"],
            reference=row["reference"],
            date=row["date"],
            client_name=row["client_name"],
            client_email=row["client_email"],
            client_phone=row["client_phone"],
            payment_terms=row["payment_terms"],
            delivery_terms=row["delivery_terms"],
            additional_notes=row["additional_notes"],
            template=row["template"],
            items=[
                LineItem(
                    name=item["name"],
                    description=item["description"],
                    quantity=item["quantity"],
                    unit_price=to_decimal(item["unit_price"]),
                )
                for item in item_rows
            ],
            grand_total=to_decimal(row["total_amount"]),
            status=DocumentStatus(row["status"]),
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            created_by=row["created_by"],
            document_id=row["id"],
            **extra,
        )
