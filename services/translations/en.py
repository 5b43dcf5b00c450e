# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.cancel": "Cancel",
    "button.back": "Back",
    "button.next": "Next",
    "button.create": "Create Document",
    "button.retry": "Retry",

    # Document kinds
    "document.kind.purchase_order": "Purchase Order",
    "document.kind.quotation": "Quotation",
    "document.kind.sales_agreement": "Sales Agreement",
    "document.kind.all": "All Documents",

    # Document statuses
    "document.status.draft": "Draft",
    "document.status.pending": "Pending",
    "document.status.approved": "Approved",
    "document.status.rejected": "Rejected",

    # Approval workflow
    "workflow.submit_for_approval": "Submit for Approval",
    "workflow.approve": "Approve",
    "workflow.reject": "Reject",
    "workflow.return_to_draft": "Return to Draft",
    "workflow.reopen": "Reopen as Draft",

    # Dashboard
    "dashboard.search_placeholder": "Search documents...",
    "dashboard.sort.newest": "Newest first",
    "dashboard.sort.oldest": "Oldest first",
    "dashboard.sort.amount_high": "Amount: High to Low",
    "dashboard.sort.amount_low": "Amount: Low to High",
    "dashboard.no_documents": "No documents found",
    "dashboard.language_toggle": "العربية",

    # Wizard
    "wizard.title": "Create {kind}",
    "wizard.subtitle": "Complete the form below to create a new {kind}",
    "wizard.step_progress": "Step {current} of {total}",
    "wizard.section.basic_info": "Basic Information",
    "wizard.section.line_items": "Items",
    "wizard.section.terms": "Terms & Conditions",
    "wizard.section.template_choice": "Template & Preview",
    "wizard.submitting": "Creating...",
    "wizard.success": "{kind} {reference} was created successfully.",

    # Templates
    "template.standard": "Standard Template",
    "template.professional": "Professional Template",
    "template.minimal": "Minimal Template",
    "template.detailed": "Detailed Template",

    # Preview placeholders
    "preview.title_placeholder": "Document Title",
    "preview.reference_placeholder": "REF-0000",
    "preview.date_placeholder": "YYYY-MM-DD",
    "preview.client_placeholder": "Client Name",
    "preview.email_placeholder": "client@example.com",
    "preview.item_placeholder": "Item name",
    "preview.not_specified": "Not specified",
    "preview.total": "Total",

    # Validation
    "validation.title_min": "Title must be at least 3 characters",
    "validation.reference_required": "Reference number is required",
    "validation.date_invalid": "Please enter a valid date (YYYY-MM-DD)",
    "validation.client_name_required": "Client name is required",
    "validation.email_invalid": "Please enter a valid email",
    "validation.items_required": "At least one item is required",
    "validation.item_name_required": "Item name is required",
    "validation.quantity_min": "Quantity must be at least 1",
    "validation.quantity_integer": "Quantity must be a whole number",
    "validation.quantity_max": "Quantity is too large",
    "validation.price_negative": "Price cannot be negative",
    "validation.price_invalid": "Please enter a valid price",
    "validation.price_max": "Price is too large",
    "validation.payment_terms_required": "Payment terms are required",
    "validation.end_before_start": "End date cannot be before the start date",
    "validation.template_unknown": "Please select a template",
    "validation.field_required": "Field '{field}' is required",
    "validation.check_data": "Please check the entered data",

    # Errors
    "error.persistence.failed": "The document could not be saved. Please try again.",
    "error.persistence.not_signed_in": "You must be signed in to create documents.",
    "error.transition.invalid": "This action is not available right now.",
    "error.unexpected": "An unexpected error occurred.",
}
