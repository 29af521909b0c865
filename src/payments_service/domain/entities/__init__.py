"""Domain entities - Objects with identity and lifecycle."""

from payments_service.domain.entities.payment import Payment

__all__ = [
    "Payment",
]
