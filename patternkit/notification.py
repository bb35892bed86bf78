"""Notifications created by name through a registry of constructors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence


class UnsupportedNotificationError(LookupError):
    """Raised when no creator is registered for a notification type."""


class Notification(ABC):
    """Something that can be sent."""

    @abstractmethod
    def send(self) -> str:
        """Send the notification and describe what was done."""


class SMS(Notification):
    def send(self) -> str:
        return "Sending SMS Notification"


class Email(Notification):
    def send(self) -> str:
        return "Sending Email Notification"


class Push(Notification):
    def send(self) -> str:
        return "Sending Push Notification"


class NotificationFactory:
    """Builds notifications from creators registered under a type name."""

    def __init__(self) -> None:
        self._creators: dict[str, Callable[[], Notification]] = {}

    def register(self, notification_type: str, creator: Callable[[], Notification]) -> None:
        """Register or replace the creator for a type."""
        self._creators[notification_type] = creator

    def create(self, notification_type: str) -> Notification:
        """Create a notification of the given type."""
        try:
            creator = self._creators[notification_type]
        except KeyError:
            raise UnsupportedNotificationError(
                f"notificatio {notification_type} don't support"
            ) from None
        return creator()


def main(argv: Sequence[str] | None = None) -> None:
    """Register the built-in notifications and send an SMS."""
    factory = NotificationFactory()
    factory.register("SMS", SMS)
    factory.register("Email", Email)
    factory.register("Push", Push)

    sms = factory.create("SMS")
    print(sms.send())


if __name__ == "__main__":
    main()