from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payments_service.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for payment persistence.

    Contract:
    - save() assigns a new unique id to the given payment (mutating it)
    - find_by_id() returns None if the payment does not exist (no exception)
    - Callers must not assume persistence across calls; the default
      adapter is a stub with no real storage
    """

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Persist a new payment and assign its identifier.

        Args:
            payment: The payment entity to save. Its id must be unset;
                it is set in place by this call.
        """

    @abstractmethod
    def find_by_id(self, payment_id: str) -> Payment | None:
        """Retrieve a payment by ID.

        Args:
            payment_id: The payment identifier as received from the client.

        Returns:
            The Payment entity if found, None otherwise.
        """
