"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: Simulated and in-memory payment repositories
- Notifications: Email adapter plus declared SMS and Push channels
- Transactions: Scoped transaction providers
- Time Provider: Clock abstraction for testability
- Logging: structlog configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from payments_service.infrastructure.notifiers import (
    EmailNotifier,
    PushNotifier,
    SmsNotifier,
    build_notifier,
)
from payments_service.infrastructure.payment_repository import (
    InMemoryPaymentRepository,
    StubPaymentRepository,
)
from payments_service.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from payments_service.infrastructure.transaction_provider import LoggingTransactionProvider

__all__ = [
    "EmailNotifier",
    "FixedTimeProvider",
    "InMemoryPaymentRepository",
    "LoggingTransactionProvider",
    "PushNotifier",
    "SmsNotifier",
    "StubPaymentRepository",
    "SystemTimeProvider",
    "build_notifier",
]
