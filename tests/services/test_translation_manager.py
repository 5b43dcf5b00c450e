# -*- coding: utf-8 -*-
"""
Tests for the English/Arabic language toggle.
"""

from PyQt5.QtCore import Qt

from services.translation_manager import (
    TranslationManager,
    get_language,
    get_layout_direction,
    is_rtl,
    set_language,
    toggle_language,
    tr,
)
from services.translations.ar import AR_TRANSLATIONS
from services.translations.en import EN_TRANSLATIONS


class TestLanguageToggle:
    """Test switching languages."""

    def test_toggle_switches_back_and_forth(self):
        assert get_language() == "en"
        assert toggle_language() == "ar"
        assert is_rtl()
        assert get_layout_direction() == Qt.RightToLeft
        assert toggle_language() == "en"
        assert get_layout_direction() == Qt.LeftToRight

    def test_unknown_language_falls_back_to_english(self):
        set_language("fr")
        assert get_language() == "en"

    def test_listeners_notified(self):
        seen = []
        manager = TranslationManager()
        manager.on_language_changed(seen.append)
        try:
            toggle_language()
        finally:
            manager.remove_listener(seen.append)
        assert seen == ["ar"]


class TestTranslate:
    """Test message lookup."""

    def test_formatting(self):
        assert tr("wizard.step_progress", current=2, total=4) == "Step 2 of 4"

    def test_missing_key_returns_key(self):
        assert tr("no.such.key") == "no.such.key"

    def test_arabic_message(self):
        set_language("ar")
        assert tr("validation.items_required") == AR_TRANSLATIONS["validation.items_required"]

    def test_tables_have_same_keys(self):
        assert set(EN_TRANSLATIONS) == set(AR_TRANSLATIONS)
