"""
SharedPool: thread-safe wrapper around StaticPool.

One lock for the whole pool.  Every call forwards to the wrapped pool under
that lock; nothing here allocates slots or changes pool semantics, and the
same errors propagate unchanged.
"""

import threading
from typing import Generic, Optional, TypeVar

from static_pool.memory.handle import Handle
from static_pool.memory.pool import StaticPool

T = TypeVar("T")


class SharedPool(Generic[T]):
    """Thread-safe accessor for a StaticPool.

    Parameters
    ----------
    pool : StaticPool
        The pool to guard.  Callers must not touch it directly once it is
        wrapped, or the lock means nothing.
    """

    def __init__(self, pool: StaticPool[T]) -> None:
        self._pool = pool
        self._lock = threading.Lock()

    @classmethod
    def with_capacity(cls, capacity: int, reusable_warn_threshold: int = 0) -> "SharedPool[T]":
        """Create and wrap a new StaticPool."""
        return cls(StaticPool(capacity, reusable_warn_threshold))

    @property
    def capacity(self) -> int:
        return self._pool.capacity

    # ── allocation ───────────────────────────────────────────────────

    def insert(self, value: T) -> Handle:
        with self._lock:
            return self._pool.insert(value)

    def get(self, handle: Handle) -> T:
        """Return the stored value under lock.

        The value itself is shared, not copied; mutating it is the
        caller's business.
        """
        with self._lock:
            return self._pool.get(handle)

    def release(self, handle: Handle) -> None:
        with self._lock:
            self._pool.release(handle)

    def release_index(self, index: int) -> None:
        with self._lock:
            self._pool.release_index(index)

    # ── accounting ───────────────────────────────────────────────────

    def reusable_slot_count(self) -> int:
        with self._lock:
            return self._pool.reusable_slot_count()

    def occupied_count(self) -> int:
        with self._lock:
            return self._pool.occupied_count()

    def contains(self, handle: Handle) -> bool:
        with self._lock:
            return self._pool.contains(handle)

    def __contains__(self, handle: Handle) -> bool:
        return self.contains(handle)

    def reset(self, slot: Optional[int] = None) -> None:
        with self._lock:
            self._pool.reset(slot)
