# -*- coding: utf-8 -*-
"""
DocFlow Controllers
===================
Controller layer between the presentation layer and the document store.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates

Usage:
    from controllers import DocumentController, DocumentFilter

    controller = DocumentController(DocumentRepository(db))
    result = controller.load_documents(DocumentFilter(sort_order="amount_high"))
    if result.success:
        print(f"Loaded {len(result.data)} documents")
    else:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.document_controller import (
    DocumentController,
    DocumentFilter,
)

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Documents
    "DocumentController",
    "DocumentFilter",
]
