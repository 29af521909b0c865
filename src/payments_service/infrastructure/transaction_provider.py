from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog

from payments_service.application.ports import TransactionProvider

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger(__name__)


class LoggingTransactionProvider(TransactionProvider):
    """Transaction provider that records boundaries in the log.

    Emits ``transaction_committed`` on normal exit and
    ``transaction_rolled_back`` when the body raises. The exception is
    always re-raised.
    """

    @contextmanager
    def begin(self) -> Iterator[None]:
        try:
            yield
        except BaseException as e:
            logger.warning("transaction_rolled_back", error_type=type(e).__name__)
            raise
        logger.debug("transaction_committed")
