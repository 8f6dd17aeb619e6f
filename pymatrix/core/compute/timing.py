"""
Wall-clock timing for operation results.

GPU kernels return before the device has finished. A Timer given the
backend's synchronize callable waits for the device at every reading.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


def _no_sync() -> None:
    pass


class Timer:
    """
    Overall timer plus named sections that accumulate.

    Usage:
        timer = Timer(sync=backend.synchronize)
        timer.start()
        with timer.section('kronecker'):
            out = backend.kronecker(left, right)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.002, 'kronecker': 0.0019}
    """

    def __init__(self, sync: Callable[[], None] | None = None):
        self._sync = sync or _no_sync
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        self._sync()
        return time.perf_counter()

    def start(self) -> None:
        self._started = self._now()

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        began = self._now()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (self._now() - began)

    def result(self) -> dict[str, float]:
        """'total_seconds' plus one entry per section."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
