from contextlib import contextmanager
from typing import Iterator

from docvault.models.errors import OperationInProgressError


class InFlightGuard:
    """
    Per-operation "in progress" flags.

    A second entry for an operation that is already running raises
    OperationInProgressError; the flag is released on every exit path.
    """

    def __init__(self) -> None:
        self._running: set[str] = set()

    def is_running(self, operation: str) -> bool:
        return operation in self._running

    @contextmanager
    def hold(self, operation: str) -> Iterator[None]:
        if operation in self._running:
            raise OperationInProgressError(operation)
        self._running.add(operation)
        try:
            yield
        finally:
            self._running.discard(operation)
