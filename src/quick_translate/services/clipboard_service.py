"""Clipboard Service - Writes translated text to the system clipboard."""

from abc import ABC, abstractmethod
from typing import Optional

from PySide6.QtGui import QClipboard, QGuiApplication


class ClipboardError(Exception):
    """Raised when text could not be placed on the clipboard."""


class ClipboardService(ABC):
    """Abstract clipboard writer."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """
        Place text on the clipboard.

        Raises:
            ClipboardError: If the clipboard is unavailable or rejects the write.
        """
        pass


class QtClipboardService(ClipboardService):
    """Clipboard writer backed by the running Qt application."""

    def __init__(self, clipboard: Optional[QClipboard] = None):
        self._clipboard = clipboard

    def write_text(self, text: str) -> None:
        clipboard = self._clipboard
        if clipboard is None:
            if QGuiApplication.instance() is None:
                raise ClipboardError("No Qt application is running")
            clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("System clipboard is unavailable")

        try:
            clipboard.setText(text)
        except RuntimeError as e:
            raise ClipboardError(str(e)) from e
