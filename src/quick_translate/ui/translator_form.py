"""Translator Form - Language selectors, input/output text areas and actions."""

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quick_translate.core import (
    FieldError,
    FormField,
    FormState,
    RawInput,
    list_languages,
)
from quick_translate.core.form_state import MAX_INPUT_LENGTH, utf16_length


class TranslatorForm(QWidget):
    """Form widget; renders FormState snapshots and reports user actions."""

    submit_clicked = Signal()
    swap_clicked = Signal()
    copy_clicked = Signal()
    input_text_changed = Signal(str)
    source_language_changed = Signal(str)
    target_language_changed = Signal(str)

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(8)

        title = QLabel("Translate Text")
        title.setStyleSheet("font-weight: bold; font-size: 18px;")
        main_layout.addWidget(title)

        subtitle = QLabel("Select your languages and enter text to translate.")
        subtitle.setStyleSheet("color: gray;")
        main_layout.addWidget(subtitle)

        languages_layout = QHBoxLayout()

        source_form = QFormLayout()
        self.source_combo = self._create_language_combo()
        self.source_error = self._create_error_label()
        source_form.addRow("From", self.source_combo)
        source_form.addRow(self.source_error)
        languages_layout.addLayout(source_form, 1)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.setAccessibleName("Swap languages")
        self.swap_button.setFixedWidth(40)
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        languages_layout.addWidget(self.swap_button)

        target_form = QFormLayout()
        self.target_combo = self._create_language_combo()
        self.target_error = self._create_error_label()
        target_form.addRow("To", self.target_combo)
        target_form.addRow(self.target_error)
        languages_layout.addLayout(target_form, 1)

        main_layout.addLayout(languages_layout)

        main_layout.addWidget(QLabel("Enter text to translate"))
        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText("Type or paste your text here...")
        self.input_edit.setMinimumHeight(120)
        main_layout.addWidget(self.input_edit, 1)

        input_footer = QHBoxLayout()
        self.input_error = self._create_error_label()
        input_footer.addWidget(self.input_error, 1)
        self.char_count_label = QLabel(f"0 / {MAX_INPUT_LENGTH}")
        self.char_count_label.setStyleSheet("color: gray;")
        input_footer.addWidget(self.char_count_label)
        main_layout.addLayout(input_footer)

        main_layout.addWidget(QLabel("Translated text"))
        self.output_edit = QPlainTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText("Translation will appear here...")
        self.output_edit.setMinimumHeight(120)
        main_layout.addWidget(self.output_edit, 1)

        actions_layout = QHBoxLayout()
        self.translate_button = QPushButton("Translate")
        self.translate_button.clicked.connect(self.submit_clicked.emit)
        actions_layout.addWidget(self.translate_button)
        actions_layout.addStretch()
        self.copy_button = QPushButton("Copy Translation")
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        self.copy_button.hide()
        actions_layout.addWidget(self.copy_button)
        main_layout.addLayout(actions_layout)

        submit_shortcut = QShortcut(QKeySequence("Ctrl+Return"), self)
        submit_shortcut.activated.connect(self._on_submit_shortcut)

        self.input_edit.textChanged.connect(self._on_input_changed)
        self.source_combo.currentIndexChanged.connect(
            lambda _: self.source_language_changed.emit(self.source_combo.currentData() or "")
        )
        self.target_combo.currentIndexChanged.connect(
            lambda _: self.target_language_changed.emit(self.target_combo.currentData() or "")
        )

    @staticmethod
    def _create_language_combo() -> QComboBox:
        combo = QComboBox()
        for language in list_languages():
            combo.addItem(language.name, language.code)
        return combo

    @staticmethod
    def _create_error_label() -> QLabel:
        label = QLabel("")
        label.setStyleSheet("color: red;")
        label.setWordWrap(True)
        label.hide()
        return label

    def capture_input(self) -> RawInput:
        """Read the current field values."""
        return RawInput(
            input_text=self.input_edit.toPlainText(),
            source_language_code=self.source_combo.currentData() or "",
            target_language_code=self.target_combo.currentData() or "",
        )

    def render_state(self, state: FormState) -> None:
        """Bring every widget in line with a FormState snapshot."""
        if self.input_edit.toPlainText() != state.input_text:
            self.input_edit.blockSignals(True)
            self.input_edit.setPlainText(state.input_text)
            self.input_edit.blockSignals(False)
        self._update_char_count(state.input_text)

        self._select_language(self.source_combo, state.source_language_code)
        self._select_language(self.target_combo, state.target_language_code)

        if self.output_edit.toPlainText() != state.output_text:
            self.output_edit.setPlainText(state.output_text)

        self.translate_button.setEnabled(not state.is_submitting)
        self.translate_button.setText("Translating..." if state.is_submitting else "Translate")
        self.copy_button.setVisible(bool(state.output_text))

    def show_field_errors(self, errors: List[FieldError]) -> None:
        """Show each error next to its field and hide the rest."""
        labels = {
            FormField.INPUT_TEXT: self.input_error,
            FormField.SOURCE_LANGUAGE: self.source_error,
            FormField.TARGET_LANGUAGE: self.target_error,
        }
        messages = {error.field: error.message for error in errors}
        for field, label in labels.items():
            message = messages.get(field)
            label.setText(message or "")
            label.setVisible(message is not None)

    @staticmethod
    def _select_language(combo: QComboBox, code: str) -> None:
        index = combo.findData(code)
        if index != combo.currentIndex():
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)

    def _update_char_count(self, text: str) -> None:
        count = utf16_length(text)
        self.char_count_label.setText(f"{count} / {MAX_INPUT_LENGTH}")
        self.char_count_label.setStyleSheet(
            "color: red;" if count > MAX_INPUT_LENGTH else "color: gray;"
        )

    def _on_input_changed(self) -> None:
        text = self.input_edit.toPlainText()
        self._update_char_count(text)
        self.input_text_changed.emit(text)

    def _on_submit_shortcut(self) -> None:
        if self.translate_button.isEnabled():
            self.submit_clicked.emit()
