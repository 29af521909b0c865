from __future__ import annotations

from dataclasses import dataclass

from payments_service.domain.exceptions import InvalidPaymentIdError

PREFIX = "PAY-"


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Value object for payment identifiers.

    Identifiers are opaque strings. Generated ones have the form
    ``PAY-<epoch millis>``; any string, including an empty or blank one,
    is accepted on lookup.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidPaymentIdError(
                f"Payment ID must be a string, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_timestamp(cls, epoch_millis: int) -> PaymentId:
        """Build a generated PaymentId from a millisecond timestamp."""
        return cls(value=f"{PREFIX}{epoch_millis}")

    @classmethod
    def from_string(cls, id_str: str) -> PaymentId:
        """Wrap a client-supplied identifier.

        Args:
            id_str: Any identifier, e.g. ``"PAY-123"``. Kept verbatim.

        Returns:
            A PaymentId instance.

        Raises:
            InvalidPaymentIdError: If the value is not a string.
        """
        return cls(value=id_str)
