from __future__ import annotations

from contextlib import nullcontext
from typing import TYPE_CHECKING

import structlog

from payments_service.domain.entities import Payment

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from payments_service.application.ports import (
        Notifier,
        PaymentRepository,
        TransactionProvider,
    )
    from payments_service.application.validator import PaymentRequestValidator

logger = structlog.get_logger(__name__)

DEFAULT_AMOUNT = 100
OK = "OK"
NOT_FOUND = "Not found"


class PaymentService:
    """Orchestrates the payment request pipeline.

    process(): validate -> save -> notify
    find_by_id(): repository lookup -> formatted string

    Validation and save run inside one transaction scope. The notification
    is sent after the scope closes, so a notifier failure never undoes a
    save.
    """

    def __init__(
        self,
        repository: PaymentRepository,
        notifier: Notifier,
        validator: PaymentRequestValidator,
        transaction_provider: TransactionProvider | None = None,
        amount: int = DEFAULT_AMOUNT,
    ) -> None:
        self._repository = repository
        self._notifier = notifier
        self._validator = validator
        self._transactions = transaction_provider
        self._amount = amount

    def process(self, request: str | None) -> str:
        """Run the request pipeline for a new payment.

        Args:
            request: The raw request body.

        Returns:
            The literal string "OK".

        Raises:
            InvalidRequestError: Request is None or empty. Nothing is saved
                and no notification is sent.
        """
        with self._transaction():
            # Step 1: Validate (fail fast)
            self._validator.validate(request)

            # Step 2: Save; the repository assigns the id
            payment = Payment(amount=self._amount)
            self._repository.save(payment)

        # Step 3: Notify, outside the transaction
        self._notifier.send(f"Payment processed: {payment.id}")

        logger.info("payment_processed", payment_id=str(payment.id), amount=payment.amount)
        return OK

    def find_by_id(self, payment_id: str) -> str:
        """Look up a payment and format it for the caller.

        Returns:
            ``Payment{id='<id>', amount=<amount>}`` or "Not found".
        """
        payment = self._repository.find_by_id(payment_id)
        if payment is None:
            logger.info("payment_not_found", payment_id=payment_id)
            return NOT_FOUND
        return str(payment)

    def _transaction(self) -> AbstractContextManager[None]:
        if self._transactions is None:
            return nullcontext()
        return self._transactions.begin()
