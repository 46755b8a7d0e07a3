"""Translator Form Coordinator - Manages the translate/swap/copy workflow and form state."""

import dataclasses
import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from quick_translate.core import (
    FieldError,
    FormState,
    RawInput,
    TranslationRequest,
    code_to_name,
    validate,
)
from quick_translate.services import (
    ClipboardError,
    ClipboardService,
    Notification,
    NotificationSink,
    NotificationVariant,
    TranslationService,
    TranslationWorker,
    WorkerSignals,
)

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class TranslatorFormCoordinator(QObject):
    """
    Orchestrates the translator form.

    Responsibilities:
    - Own the FormState and publish a snapshot after every change.
    - Validate submissions and report field errors inline.
    - Dispatch one translation per submission and reconcile the outcome.
    - Swap languages (and texts) and copy the output to the clipboard.
    """

    state_changed = Signal(object)  # FormState snapshot
    field_errors_changed = Signal(object)  # List[FieldError]

    def __init__(
        self,
        translation_service: TranslationService,
        clipboard_service: ClipboardService,
        notification_sink: NotificationSink,
        start_worker: Optional[Callable[[QRunnable], None]] = None,
    ):
        """
        Args:
            translation_service: External translation capability.
            clipboard_service: Used by copy_output.
            notification_sink: Receives translation and clipboard outcomes.
            start_worker: Launches a TranslationWorker. Defaults to the global
                QThreadPool; tests pass a callable that runs the worker inline.
        """
        super().__init__()

        self.translation_service = translation_service
        self.clipboard_service = clipboard_service
        self.notification_sink = notification_sink

        if start_worker is None:
            start_worker = QThreadPool.globalInstance().start
        self._start_worker = start_worker

        self._state = FormState()
        self._field_errors: List[FieldError] = []
        # Set by the first submit; field edits are re-validated from then on
        self._submit_attempted = False

        # Keep the in-flight worker signals alive until finished is delivered
        self._active_signals: Optional[WorkerSignals] = None

    @property
    def state(self) -> FormState:
        """Snapshot of the current form state."""
        return dataclasses.replace(self._state)

    @property
    def field_errors(self) -> List[FieldError]:
        return list(self._field_errors)

    # Field edits

    def set_input_text(self, text: str) -> None:
        if text != self._state.input_text:
            self._state.input_text = text
            self._revalidate()
            self._publish_state()

    def set_source_language(self, code: str) -> None:
        if code != self._state.source_language_code:
            self._state.source_language_code = code
            self._revalidate()
            self._publish_state()

    def set_target_language(self, code: str) -> None:
        if code != self._state.target_language_code:
            self._state.target_language_code = code
            self._revalidate()
            self._publish_state()

    # Workflow

    def submit(self, raw: RawInput) -> bool:
        """
        Validate the captured form values and dispatch a translation.

        Args:
            raw: Current values of the text and both language fields.

        Returns:
            True if a translation was dispatched.
        """
        if self._state.is_submitting:
            logger.warning("Ignoring submit while a translation is in flight")
            return False

        self._state.input_text = raw.input_text
        self._state.source_language_code = raw.source_language_code
        self._state.target_language_code = raw.target_language_code

        self._submit_attempted = True
        errors = validate(raw)
        self._set_field_errors(errors)
        if errors:
            self._publish_state()
            return False

        self._state.is_submitting = True
        self._state.output_text = ""
        self._publish_state()

        request = TranslationRequest(
            text=raw.input_text,
            source_language_name=code_to_name(raw.source_language_code),
            target_language_name=code_to_name(raw.target_language_code),
        )

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )
        worker.signals.translation_result.connect(self._handle_translation_result)
        worker.signals.error.connect(self._handle_translation_error)
        worker.signals.finished.connect(self._handle_translation_finished)
        self._active_signals = worker.signals

        try:
            self._start_worker(worker)
        except Exception as e:
            logger.exception("Could not start translation worker")
            self._handle_translation_error(str(e))
            self._handle_translation_finished()

        return True

    @Slot(object)
    def _handle_translation_result(self, result) -> None:
        if result.is_error:
            self._handle_translation_error(result.error or "")
            return

        self._state.output_text = result.translated_text
        self._publish_state()

    @Slot(str)
    def _handle_translation_error(self, error: str) -> None:
        logger.error("Translation error: %s", error or UNKNOWN_ERROR_MESSAGE)
        self._state.output_text = ""
        self._publish_state()
        self.notification_sink.notify(
            Notification(
                variant=NotificationVariant.ERROR,
                title="Translation Failed",
                description=error or UNKNOWN_ERROR_MESSAGE,
            )
        )

    @Slot()
    def _handle_translation_finished(self) -> None:
        if not self._state.is_submitting:
            return
        self._active_signals = None
        self._state.is_submitting = False
        self._publish_state()

    def swap_languages(self) -> None:
        """
        Exchange source and target languages.

        When there is output, the texts move too: output becomes input and,
        if there was input, input becomes output. Without output only the
        languages change.
        """
        state = self._state
        state.source_language_code, state.target_language_code = (
            state.target_language_code,
            state.source_language_code,
        )

        if state.output_text and state.input_text:
            state.input_text, state.output_text = state.output_text, state.input_text
        elif state.output_text:
            state.input_text = state.output_text
            state.output_text = ""

        self._revalidate()
        self._publish_state()

    def copy_output(self) -> None:
        """Copy the translated text to the clipboard, if there is any."""
        text = self._state.output_text
        if not text:
            return

        try:
            self.clipboard_service.write_text(text)
        except ClipboardError as e:
            logger.error("Failed to copy text: %s", e)
            self.notification_sink.notify(
                Notification(
                    variant=NotificationVariant.ERROR,
                    title="Copy Failed",
                    description="Could not copy text to clipboard.",
                )
            )
            return

        self.notification_sink.notify(
            Notification(
                variant=NotificationVariant.SUCCESS,
                title="Copied!",
                description="Translated text copied to clipboard.",
            )
        )

    def _revalidate(self) -> None:
        if not self._submit_attempted:
            return
        state = self._state
        self._set_field_errors(
            validate(
                RawInput(
                    input_text=state.input_text,
                    source_language_code=state.source_language_code,
                    target_language_code=state.target_language_code,
                )
            )
        )

    def _set_field_errors(self, errors: List[FieldError]) -> None:
        if errors != self._field_errors:
            self._field_errors = list(errors)
            self.field_errors_changed.emit(list(errors))

    def _publish_state(self) -> None:
        self.state_changed.emit(self.state)
