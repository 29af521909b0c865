"""Value objects - Immutable objects defined by their attributes."""

from payments_service.domain.value_objects.payment_id import PaymentId

__all__ = [
    "PaymentId",
]
