"""Pooled scratch buffers for decoded key material."""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from config_loader import CONFIG
from logger import get_logger


def zero(buffer: bytearray, length: int) -> None:
    """Overwrite the first ``length`` bytes of ``buffer`` with zeros in place."""
    buffer[:length] = bytes(length)


class ScratchBufferPool:
    """Thread-safe free lists of fixed-size bytearrays, zeroed before reuse."""

    def __init__(self, max_pooled: int = 16) -> None:
        if max_pooled < 0:
            raise ValueError("max_pooled must be >= 0")
        self.max_pooled = max_pooled
        self._free: Dict[int, List[bytearray]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def _acquire(self, size: int) -> bytearray:
        with self._lock:
            free = self._free.get(size)
            if free:
                return free.pop()
        return bytearray(size)

    def _release(self, buffer: bytearray, size: int) -> None:
        zero(buffer, size)
        with self._lock:
            free = self._free.setdefault(size, [])
            if len(free) < self.max_pooled:
                free.append(buffer)

    @contextmanager
    def rent(self, size: int) -> Iterator[bytearray]:
        """Yield a ``size``-byte buffer; it is zeroed and returned on every exit path."""
        if size <= 0:
            raise ValueError(f"Invalid scratch buffer size: {size}")
        buffer = self._acquire(size)
        try:
            yield buffer
        finally:
            self._release(buffer, size)

    def pooled_count(self, size: int) -> int:
        """Number of idle buffers of ``size`` bytes."""
        with self._lock:
            return len(self._free.get(size, ()))

    def clear(self) -> None:
        """Drop every idle buffer."""
        with self._lock:
            self._free.clear()


_pool: ScratchBufferPool | None = None
_pool_lock = threading.Lock()


def get_pool() -> ScratchBufferPool:
    """Return the process-wide pool built from CONFIG."""
    global _pool
    with _pool_lock:
        if _pool is None:
            max_pooled = CONFIG.pool_max_pooled if CONFIG.pool_enabled else 0
            _pool = ScratchBufferPool(max_pooled)
            _pool.logger.debug("Scratch pool ready (max_pooled=%d)", max_pooled)
        return _pool


def reset_pool() -> None:
    """Reset the process-wide pool (for tests)."""
    global _pool
    with _pool_lock:
        _pool = None
