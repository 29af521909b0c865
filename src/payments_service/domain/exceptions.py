"""Domain exceptions for payments-service.

Exception hierarchy:
    DomainException (base)
    ├── State & Transition Errors
    │   └── InvalidStateTransitionError
    └── Validation Errors
        ├── InvalidRequestError (client error, HTTP 400)
        └── InvalidPaymentIdError

Exceptions propagate unchanged through the application layer; only the
HTTP entrypoint maps them to status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a payment is changed in a way its lifecycle forbids.

    A Payment receives its id exactly once, from the repository during
    save. Assigning a second id is an invalid transition.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidRequestError(DomainException):
    """Raised when a raw payment request fails validation.

    This is a CLIENT ERROR (HTTP 400). The request is null or empty;
    nothing is persisted and no notification is sent.
    """


class InvalidPaymentIdError(DomainException):
    """Raised when a payment ID fails validation.

    PaymentId wraps a string; any other type is rejected.
    """
