"""Notifications - Toast-style messages surfaced to the user."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class NotificationVariant(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A short message with a title, shown outside of the form fields."""

    variant: NotificationVariant
    title: str
    description: str

    @property
    def is_destructive(self) -> bool:
        return self.variant is NotificationVariant.ERROR


class NotificationSink(ABC):
    """Anything able to display a Notification."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass
