"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payments_service.application.ports.notifier import NotificationChannel, Notifier
from payments_service.application.ports.payment_repository import PaymentRepository
from payments_service.application.ports.time_provider import TimeProvider
from payments_service.application.ports.transaction_provider import TransactionProvider

__all__ = [
    "NotificationChannel",
    "Notifier",
    "PaymentRepository",
    "TimeProvider",
    "TransactionProvider",
]
