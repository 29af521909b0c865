"""Payment entity.

The only entity moved through the request pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_service.domain.exceptions import InvalidStateTransitionError

if TYPE_CHECKING:
    from payments_service.domain.value_objects.payment_id import PaymentId


@dataclass(slots=True)
class Payment:
    """Plain payment record.

    Lifecycle:
        - constructed by the service with an amount and no id
        - id assigned by the repository during save (assign_id)
        - unchanged afterwards

    Unlike value objects, Payment is mutable: the repository sets the id
    on the instance the caller passed in.
    """

    id: PaymentId | None = None
    amount: int = 0

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def assign_id(self, payment_id: PaymentId) -> None:
        """Set the identifier assigned by the repository.

        Raises:
            InvalidStateTransitionError: If the payment already has an id.
        """
        if self.id is not None:
            raise InvalidStateTransitionError(
                f"Payment already has id {self.id}; cannot reassign to {payment_id}"
            )
        self.id = payment_id

    def __str__(self) -> str:
        return f"Payment{{id='{self.id}', amount={self.amount}}}"
