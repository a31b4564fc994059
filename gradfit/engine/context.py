# gradfit/engine/context.py
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from gradfit.utils.errors import ExecutionError
from gradfit.utils.logger import logs

# one accelerated run per process at a time
_DEVICE_LOCK = threading.Lock()


@dataclass
class ExecutionContext:
    """
    Where a machine runs.

    accelerated=True pins the whole solve loop to the calling thread and
    holds the device lock until the loop exits (success or failure).
    """

    accelerated: bool = False
    _owner: Optional[int] = field(default=None, init=False, repr=False)

    @property
    def bound(self) -> bool:
        return self._owner is not None

    @contextmanager
    def bind(self) -> Iterator["ExecutionContext"]:
        if not self.accelerated:
            yield self
            return

        if self._owner is not None:
            raise ExecutionError("execution context is already bound")

        _DEVICE_LOCK.acquire()
        self._owner = threading.get_ident()
        logs.debug(f"[ExecutionContext] bound to thread {self._owner}")
        try:
            yield self
        finally:
            logs.debug(f"[ExecutionContext] released thread {self._owner}")
            self._owner = None
            _DEVICE_LOCK.release()

    def check_thread(self) -> None:
        if self._owner is not None and self._owner != threading.get_ident():
            raise ExecutionError(
                f"machine bound to thread {self._owner} used from thread {threading.get_ident()}"
            )
