"""Main entry point for the Quick Translate application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from quick_translate.coordinators import TranslatorFormCoordinator
from quick_translate.services import GeminiTranslationService, QtClipboardService, SettingsManager
from quick_translate.ui import MainWindow, TranslatorForm


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Quick Translate")
    app.setOrganizationName("QuickTranslate")

    # 3. Construct UI
    form = TranslatorForm()
    main_window = MainWindow()
    main_window.set_form(form)

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslatorFormCoordinator(
        translation_service=GeminiTranslationService(settings_manager),
        clipboard_service=QtClipboardService(),
        notification_sink=main_window,
    )

    # 5. Signal Wiring
    form.submit_clicked.connect(lambda: coordinator.submit(form.capture_input()))
    form.swap_clicked.connect(coordinator.swap_languages)
    form.copy_clicked.connect(coordinator.copy_output)
    form.input_text_changed.connect(coordinator.set_input_text)
    form.source_language_changed.connect(coordinator.set_source_language)
    form.target_language_changed.connect(coordinator.set_target_language)
    coordinator.state_changed.connect(form.render_state)
    coordinator.field_errors_changed.connect(form.show_field_errors)

    form.render_state(coordinator.state)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
