from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class TransactionProvider(ABC):
    """Port for transaction boundaries around persistence work.

    Contract:
    - begin() MUST commit when the context exits normally
    - begin() MUST roll back when the context exits with an exception,
      and MUST re-raise that exception
    - Work done after the context exits is outside the transaction

    The context manager pattern guarantees commit or rollback on every
    exit path.
    """

    @abstractmethod
    @contextmanager
    def begin(self) -> Iterator[None]:
        """Open a transaction for the duration of the context.

        Usage:
            with transaction_provider.begin():
                repository.save(payment)
            # Committed here
        """
        ...
