"""
StaticPool: fixed-capacity slot table addressed through generation-checked
handles.

Every per-slot buffer is allocated once, in the constructor.  Insert, get
and release never grow or reorder anything; they only write into the
pre-allocated arrays.

Slot state machine::

    Empty(g) --insert--> Occupied(g) --release--> Empty(min(g + 1, 255))
    any      --reset-->  Empty(0)

A slot whose generation has saturated at 255 is skipped by insert until it
is reset.  Reset is deliberately unsafe: a handle issued at generation 0
before the reset validates again against the slot's next occupant.
"""

from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

import numpy as np

from static_pool.errors import AccessOutOfBounds, DanglingHandle, InvalidHandle, NoAvailableSlots
from static_pool.logger import get_logger
from static_pool.memory.handle import MAX_CAPACITY, MAX_GENERATION, Handle

if TYPE_CHECKING:
    from static_pool.config import PoolConfig

log = get_logger("pool")

T = TypeVar("T")


class StaticPool(Generic[T]):
    """Fixed number of slots, each holding at most one value.

    Parameters
    ----------
    capacity : int
        Number of slots, 1..MAX_CAPACITY.  Fixed for the pool's lifetime.
    reusable_warn_threshold : int
        Log a warning when a release saturates a slot and leaves this many
        reusable slots or fewer.

    Not thread-safe; wrap it in a ``SharedPool`` for concurrent callers.
    """

    def __init__(self, capacity: int, reusable_warn_threshold: int = 0) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        capacity = int(capacity)
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be in 1..{MAX_CAPACITY}, got {capacity}")

        self._capacity = capacity
        self._warn_threshold = max(0, int(reusable_warn_threshold))

        self._values: List[Optional[T]] = [None] * capacity
        # True where the slot holds no value (None is a storable value)
        self._free = np.ones(capacity, dtype=bool)
        self._generations = np.zeros(capacity, dtype=np.uint8)
        # Scratch mask reused by every scan
        self._scratch = np.zeros(capacity, dtype=bool)

    @classmethod
    def from_config(cls, config: "PoolConfig") -> "StaticPool[T]":
        """Build a pool from a ``PoolConfig``."""
        return cls(config.get_capacity(), config.get_reusable_warn_threshold())

    @property
    def capacity(self) -> int:
        return self._capacity

    # ── allocation ───────────────────────────────────────────────────

    def insert(self, value: T) -> Handle:
        """Store *value* in the first empty, non-exhausted slot.

        Raises NoAvailableSlots when every slot is occupied or every empty
        slot has saturated its generation counter.
        """
        eligible = self._scratch
        np.less(self._generations, MAX_GENERATION, out=eligible)
        np.logical_and(eligible, self._free, out=eligible)
        index = int(np.argmax(eligible))
        if not eligible[index]:
            log.debug("insert rejected: no available slots (capacity %d)", self._capacity)
            raise NoAvailableSlots(
                f"no empty slot below generation {MAX_GENERATION} "
                f"({self.occupied_count()}/{self._capacity} occupied)"
            )

        self._values[index] = value
        self._free[index] = False
        return Handle._encode(index, int(self._generations[index]))

    def get(self, handle: Handle) -> T:
        """Return the value *handle* refers to.  The handle stays valid."""
        index = self._check(handle)
        if self._free[index]:
            raise InvalidHandle(f"slot {index} is empty")
        return self._values[index]

    def release(self, handle: Handle) -> None:
        """Free the slot *handle* refers to and advance its generation.

        Out-of-bounds handles are ignored.  Raises DanglingHandle when the
        handle is stale, including a second release of the same handle.
        """
        index, _ = handle._decode()
        if not 0 <= index < self._capacity:
            log.debug("release ignored: index %d out of bounds", index)
            return
        self._check(handle)
        self._clear(index)

    def release_index(self, index: int) -> None:
        """Free slot *index* without any handle check.

        The caller is responsible for any live handle to that slot; it
        becomes dangling.  Out-of-range indices are ignored.
        """
        if not 0 <= index < self._capacity:
            return
        self._clear(index)

    # ── accounting ───────────────────────────────────────────────────

    def reusable_slot_count(self) -> int:
        """Number of slots that can still be allocated again in future.

        Counts occupied and empty slots alike; only generation saturation
        removes a slot.  Plan a ``reset`` before this reaches 0.
        """
        np.less(self._generations, MAX_GENERATION, out=self._scratch)
        return int(np.count_nonzero(self._scratch))

    def occupied_count(self) -> int:
        """Number of slots currently holding a value."""
        return self._capacity - int(np.count_nonzero(self._free))

    def contains(self, handle: Handle) -> bool:
        """True exactly when ``get(handle)`` would succeed."""
        index, generation = handle._decode()
        return (
            0 <= index < self._capacity
            and generation == int(self._generations[index])
            and not self._free[index]
        )

    def __contains__(self, handle: Handle) -> bool:
        return self.contains(handle)

    def reset(self, slot: Optional[int] = None) -> None:
        """Clear one slot (or all) and set its generation back to 0.

        Outstanding handles are not invalidated: one issued at generation 0
        will validate against whatever is inserted into the slot next.
        Out-of-range *slot* is ignored.
        """
        if slot is None:
            for i in range(self._capacity):
                self._values[i] = None
            self._free.fill(True)
            self._generations.fill(0)
            log.info("reset all %d slots", self._capacity)
            return

        if not 0 <= slot < self._capacity:
            return
        self._values[slot] = None
        self._free[slot] = True
        self._generations[slot] = 0
        log.info("reset slot %d", slot)

    # ── internals ────────────────────────────────────────────────────

    def _check(self, handle: Handle) -> int:
        """Validate bounds and generation; return the slot index."""
        index, generation = handle._decode()
        if not 0 <= index < self._capacity:
            raise AccessOutOfBounds(f"slot {index} out of bounds (capacity {self._capacity})")
        current = int(self._generations[index])
        if generation != current:
            raise DanglingHandle(
                f"slot {index} is at generation {current}, handle has generation {generation}"
            )
        return index

    def _clear(self, index: int) -> None:
        self._values[index] = None
        self._free[index] = True
        generation = int(self._generations[index])
        if generation >= MAX_GENERATION:
            return
        generation += 1
        self._generations[index] = generation
        if generation == MAX_GENERATION:
            self._on_slot_exhausted(index)

    def _on_slot_exhausted(self, index: int) -> None:
        reusable = self.reusable_slot_count()
        log.debug("slot %d reached generation %d", index, MAX_GENERATION)
        if reusable <= self._warn_threshold:
            log.warning(
                "only %d of %d slots reusable; reset exhausted slots to reclaim them",
                reusable, self._capacity,
            )

    def __repr__(self) -> str:
        return (
            f"StaticPool(capacity={self._capacity}, occupied={self.occupied_count()}, "
            f"reusable={self.reusable_slot_count()})"
        )
