#!/usr/bin/env python3
"""
Tests for TranslatorForm - validates rendering of form state and user signals.
"""

from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from quick_translate.core import FieldError, FormField, FormState, RawInput
from quick_translate.ui import TranslatorForm


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_language_selectors_list_catalog_in_order():
    """Both selectors offer every catalog language with codes as item data."""
    ensure_qt_app()

    form = TranslatorForm()

    assert form.source_combo.count() == 15
    assert form.target_combo.count() == 15
    assert form.source_combo.itemText(0) == "English"
    assert form.source_combo.itemData(1) == "es"


def test_render_state_populates_widgets():
    """render_state should mirror every FormState field."""
    ensure_qt_app()

    form = TranslatorForm()
    form.render_state(FormState(input_text="Hello", source_language_code="fr",
                                target_language_code="de", output_text="Hallo"))

    assert form.input_edit.toPlainText() == "Hello"
    assert form.output_edit.toPlainText() == "Hallo"
    assert form.source_combo.currentData() == "fr"
    assert form.target_combo.currentData() == "de"
    assert not form.copy_button.isHidden()
    assert form.char_count_label.text() == "5 / 2000"


def test_render_state_while_submitting_disables_translate():
    ensure_qt_app()

    form = TranslatorForm()
    form.render_state(FormState(input_text="Hello", is_submitting=True))

    assert not form.translate_button.isEnabled()
    assert form.translate_button.text() == "Translating..."
    assert form.copy_button.isHidden()

    form.render_state(FormState(input_text="Hello", output_text="Hola"))
    assert form.translate_button.isEnabled()
    assert form.translate_button.text() == "Translate"


def test_render_state_does_not_echo_field_signals():
    """Programmatic updates should not be reported back as user edits."""
    ensure_qt_app()

    form = TranslatorForm()
    text_spy = MagicMock()
    source_spy = MagicMock()
    form.input_text_changed.connect(text_spy)
    form.source_language_changed.connect(source_spy)

    form.render_state(FormState(input_text="Hello", source_language_code="ja"))

    text_spy.assert_not_called()
    source_spy.assert_not_called()


def test_capture_input_reads_current_fields():
    ensure_qt_app()

    form = TranslatorForm()
    form.input_edit.setPlainText("Bonjour")
    form.source_combo.setCurrentIndex(form.source_combo.findData("fr"))
    form.target_combo.setCurrentIndex(form.target_combo.findData("en"))

    assert form.capture_input() == RawInput("Bonjour", "fr", "en")


def test_user_edits_emit_field_signals():
    ensure_qt_app()

    form = TranslatorForm()
    text_spy = MagicMock()
    target_spy = MagicMock()
    form.input_text_changed.connect(text_spy)
    form.target_language_changed.connect(target_spy)

    form.input_edit.setPlainText("Hi")
    form.target_combo.setCurrentIndex(form.target_combo.findData("ko"))

    text_spy.assert_called_with("Hi")
    target_spy.assert_called_once_with("ko")


def test_buttons_emit_action_signals():
    ensure_qt_app()

    form = TranslatorForm()
    submit_spy = MagicMock()
    swap_spy = MagicMock()
    copy_spy = MagicMock()
    form.submit_clicked.connect(submit_spy)
    form.swap_clicked.connect(swap_spy)
    form.copy_clicked.connect(copy_spy)

    form.translate_button.click()
    form.swap_button.click()
    form.copy_button.click()

    submit_spy.assert_called_once()
    swap_spy.assert_called_once()
    copy_spy.assert_called_once()


def test_show_field_errors_targets_labels():
    """Errors appear next to their own field only."""
    ensure_qt_app()

    form = TranslatorForm()
    form.show_field_errors([
        FieldError(FormField.TARGET_LANGUAGE, "Source and target languages must be different."),
    ])

    assert not form.target_error.isHidden()
    assert form.target_error.text() == "Source and target languages must be different."
    assert form.source_error.isHidden()
    assert form.input_error.isHidden()

    form.show_field_errors([])
    assert form.target_error.isHidden()
