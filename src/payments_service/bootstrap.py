"""Explicit construction of the payment pipeline.

No container: each collaborator is built here and passed to the service
through its constructor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payments_service.application.payment_service import PaymentService
from payments_service.application.validator import PaymentRequestValidator
from payments_service.infrastructure.notifiers import build_notifier
from payments_service.infrastructure.payment_repository import (
    InMemoryPaymentRepository,
    StubPaymentRepository,
)
from payments_service.infrastructure.time_provider import SystemTimeProvider
from payments_service.infrastructure.transaction_provider import LoggingTransactionProvider

if TYPE_CHECKING:
    from payments_service.application.ports import PaymentRepository, TimeProvider
    from payments_service.config import Settings


def build_repository(settings: Settings, time_provider: TimeProvider) -> PaymentRepository:
    if settings.repository_backend == "memory":
        return InMemoryPaymentRepository(time_provider)
    return StubPaymentRepository(time_provider)


def build_payment_service(
    settings: Settings,
    time_provider: TimeProvider | None = None,
) -> PaymentService:
    """Wire a PaymentService from settings.

    Args:
        settings: Application settings (backend, channel, amount).
        time_provider: Clock for id generation. Defaults to the system clock.
    """
    time_provider = time_provider or SystemTimeProvider()
    return PaymentService(
        repository=build_repository(settings, time_provider),
        notifier=build_notifier(settings.notification_channel),
        validator=PaymentRequestValidator(),
        transaction_provider=LoggingTransactionProvider(),
        amount=settings.payment_amount,
    )
