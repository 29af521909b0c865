from __future__ import annotations

from payments_service.domain.exceptions import InvalidRequestError


class PaymentRequestValidator:
    """Validates raw payment requests before anything is persisted.

    Only emptiness is enforced. Format and amount checks are extension
    points that currently accept every request.
    """

    def validate(self, request: str | None) -> None:
        """Validate a raw request string.

        Raises:
            InvalidRequestError: If the request is None or empty.
        """
        if request is None or request == "":
            raise InvalidRequestError("Request cannot be empty")

        self._validate_format(request)
        self._validate_amount(request)

    def _validate_format(self, request: str) -> None:
        """Extension point for request format rules. Accepts everything."""

    def _validate_amount(self, request: str) -> None:
        """Extension point for amount rules. Accepts everything."""
