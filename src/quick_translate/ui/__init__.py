"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .translator_form import TranslatorForm

__all__ = ["MainWindow", "TranslatorForm"]
