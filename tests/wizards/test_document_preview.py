# -*- coding: utf-8 -*-
"""
Tests for the document preview.
"""

from decimal import Decimal

import pytest

from ui.wizards.document_creation import DocumentCreationWizard


@pytest.fixture
def wizard(qapp, auth_service, fake_persistence):
    return DocumentCreationWizard("po", fake_persistence, auth_service, background_submission=False)


class TestPreview:
    """Test preview contents."""

    def test_placeholders_before_confirmation(self, wizard):
        preview = wizard.preview()

        assert preview.title == "Document Title"
        assert preview.client_name == "Client Name"
        assert preview.lines == []
        assert preview.grand_total == Decimal("0")
        assert preview.template == "standard"

    def test_reads_confirmed_sections(self, wizard, basic_info_input, line_items_input):
        wizard.advance(basic_info_input)
        wizard.advance(line_items_input)

        preview = wizard.preview()

        assert preview.title == "Office Supplies"
        assert [line.line_total for line in preview.lines] == [Decimal("20.00"), Decimal("10.00")]
        assert preview.grand_total == Decimal("30.00")
        assert preview.formatted_total == "$30.00"
        assert preview.payment_terms == "Not specified"

    def test_template_being_chosen(self, wizard):
        assert wizard.preview(template="detailed").template == "detailed"

    def test_heading_follows_language(self, wizard):
        from services.translation_manager import toggle_language

        assert wizard.preview().heading == "Purchase Order"
        toggle_language()
        assert wizard.preview().heading != "Purchase Order"

    def test_preview_does_not_change_session(self, wizard, basic_info_input):
        wizard.advance(basic_info_input)
        before = dict(wizard.accumulated)

        wizard.preview()

        assert wizard.accumulated == before
