from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class NotificationChannel(Enum):
    """Delivery channels a Notifier can implement."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class Notifier(ABC):
    """Port for outbound notifications.

    Contract:
    - send() delivers the message over the adapter's channel
    - send() is fire-and-forget; delivery failures are not modeled
    """

    channel: NotificationChannel

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver a notification message."""
        ...
