"""Main Window - Application shell hosting the translator form and notifications."""

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from quick_translate.services import Notification, NotificationSink


class MainWindow(QMainWindow):
    """Provides the application shell and shows notifications in the status bar."""

    NOTIFICATION_TIMEOUT_MS = 5000

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Quick Translate")
        self.setGeometry(100, 100, 720, 640)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(12, 12, 12, 12)

        self.notification_label = QLabel("")
        self.notification_label.setWordWrap(True)
        self.statusBar().addWidget(self.notification_label, 1)

        self._notification_timer = QTimer(self)
        self._notification_timer.setSingleShot(True)
        self._notification_timer.timeout.connect(self.clear_notification)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        file_menu = self.menuBar().addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_form(self, form):
        """Set the translator form widget in the main layout."""
        self.main_layout.addWidget(form)

    def notify(self, notification: Notification) -> None:
        """Show a notification in the status bar for a few seconds."""
        color = "red" if notification.is_destructive else "green"
        self.notification_label.setStyleSheet(f"color: {color};")
        self.notification_label.setText(f"{notification.title} {notification.description}")
        self._notification_timer.start(self.NOTIFICATION_TIMEOUT_MS)

    def clear_notification(self) -> None:
        self.notification_label.clear()


# QMainWindow's metaclass cannot be combined with ABCMeta
NotificationSink.register(MainWindow)
