"""Services layer - external collaborators and background workers."""

from quick_translate.services.settings_manager import SettingsManager
from quick_translate.services.notifications import Notification, NotificationSink, NotificationVariant
from quick_translate.services.clipboard_service import ClipboardError, ClipboardService, QtClipboardService

# Translation services
from quick_translate.services.translation import TranslationService, TranslationResult, GeminiTranslationService
from quick_translate.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"Notification",
	"NotificationSink",
	"NotificationVariant",
	"ClipboardError",
	"ClipboardService",
	"QtClipboardService",
	"TranslationService",
	"TranslationResult",
	"GeminiTranslationService",
	"TranslationWorker",
	"WorkerSignals",
]
