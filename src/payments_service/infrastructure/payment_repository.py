from __future__ import annotations

import copy
from datetime import UTC, datetime, timedelta
from threading import Lock
from typing import TYPE_CHECKING

import structlog

from payments_service.application.ports import PaymentRepository
from payments_service.domain.entities import Payment
from payments_service.domain.value_objects import PaymentId

if TYPE_CHECKING:
    from payments_service.application.ports import TimeProvider

logger = structlog.get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
STUB_AMOUNT = 100


class PaymentIdGenerator:
    """Generates time-based ``PAY-<epoch millis>`` identifiers.

    Ids are strictly increasing: a request landing on the same (or an
    earlier) millisecond as the previous one is bumped to last + 1.
    """

    def __init__(self, time_provider: TimeProvider) -> None:
        self._time_provider = time_provider
        self._last_millis = -1
        self._lock = Lock()

    def next_id(self) -> PaymentId:
        millis = (self._time_provider.now() - EPOCH) // timedelta(milliseconds=1)
        with self._lock:
            if millis <= self._last_millis:
                millis = self._last_millis + 1
            self._last_millis = millis
        return PaymentId.from_timestamp(millis)


class StubPaymentRepository(PaymentRepository):
    """Simulated payment storage.

    Implementation notes:
    - save() assigns an id and logs the write; nothing is stored
    - find_by_id() fabricates a payment with the requested id and a fixed
      amount, whether or not anything was ever saved under that id
    """

    def __init__(self, time_provider: TimeProvider) -> None:
        self._ids = PaymentIdGenerator(time_provider)

    def save(self, payment: Payment) -> None:
        payment.assign_id(self._ids.next_id())
        logger.info("payment_saved", payment_id=str(payment.id), backend="stub")

    def find_by_id(self, payment_id: str) -> Payment | None:
        return Payment(id=PaymentId.from_string(payment_id), amount=STUB_AMOUNT)


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository with real lookup semantics.

    Implementation notes:
    - Uses dict with the id string as key
    - Stores deep copies in save() and returns deep copies from
      find_by_id(), mimicking database detachment
    - Guards the dict with a lock; the hosting server may run requests
      on several threads
    - Unknown ids return None
    """

    def __init__(self, time_provider: TimeProvider) -> None:
        self._ids = PaymentIdGenerator(time_provider)
        self._payments: dict[str, Payment] = {}
        self._lock = Lock()

    def save(self, payment: Payment) -> None:
        payment.assign_id(self._ids.next_id())
        with self._lock:
            self._payments[str(payment.id)] = copy.deepcopy(payment)
        logger.info("payment_saved", payment_id=str(payment.id), backend="memory")

    def find_by_id(self, payment_id: str) -> Payment | None:
        with self._lock:
            payment = self._payments.get(payment_id)
        if payment is None:
            return None
        return copy.deepcopy(payment)

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)
