from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import structlog

from payments_service.application.ports import NotificationChannel, Notifier

if TYPE_CHECKING:
    from typing import TextIO

logger = structlog.get_logger(__name__)


class EmailNotifier(Notifier):
    """Email notifier that delivers to standard output.

    Delivery and the delivery log are separate side effects: the message
    is written to the stream, then a ``notification_logged`` event is
    emitted.
    """

    channel = NotificationChannel.EMAIL

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, message: str) -> None:
        print(f"Email: {message}", file=self._stream or sys.stdout)
        self._log_notification(message)

    def _log_notification(self, message: str) -> None:
        logger.info("notification_logged", channel=self.channel.value, message=message)


class SmsNotifier(Notifier):
    """SMS channel. Declared, not implemented."""

    channel = NotificationChannel.SMS

    def send(self, message: str) -> None:
        raise NotImplementedError("SMS notifications are not implemented")


class PushNotifier(Notifier):
    """Push channel. Declared, not implemented."""

    channel = NotificationChannel.PUSH

    def send(self, message: str) -> None:
        raise NotImplementedError("Push notifications are not implemented")


_NOTIFIERS: dict[NotificationChannel, type[Notifier]] = {
    NotificationChannel.EMAIL: EmailNotifier,
    NotificationChannel.SMS: SmsNotifier,
    NotificationChannel.PUSH: PushNotifier,
}


def build_notifier(channel: NotificationChannel | str) -> Notifier:
    """Return the notifier adapter for a channel.

    Raises:
        ValueError: If the channel name is unknown.
    """
    return _NOTIFIERS[NotificationChannel(channel)]()
