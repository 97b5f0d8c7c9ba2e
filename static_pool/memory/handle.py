"""
Handle: opaque ``(slot index, generation)`` token issued by a StaticPool.

Only the pool encodes and decodes handles.  Callers copy them around,
compare them and hash them; nothing else.
"""

from dataclasses import dataclass, field
from typing import Tuple

# ---------------------------------------------------------------------------
# Handle layout: one 32-bit word
#   bits 31-8 : slot index   (24 bits)
#   bits  7-0 : generation   ( 8 bits)
# ---------------------------------------------------------------------------
INDEX_BITS: int = 24
GENERATION_BITS: int = 8
GENERATION_MASK: int = (1 << GENERATION_BITS) - 1  # 0xFF
INDEX_MASK: int = (1 << INDEX_BITS) - 1  # 0xFFFFFF
PACKED_MASK: int = (1 << (INDEX_BITS + GENERATION_BITS)) - 1  # 0xFFFFFFFF

# Generation counters saturate here; a slot at MAX_GENERATION is never
# handed out again until it is reset.
MAX_GENERATION: int = GENERATION_MASK  # 255

# Largest capacity whose highest index still fits in INDEX_BITS.
MAX_CAPACITY: int = INDEX_MASK  # 16 777 215


@dataclass(frozen=True)
class Handle:
    """Opaque reference to one slot at one generation.

    Handles compare and hash by value.  A handle is only meaningful to the
    pool that issued it.
    """

    _packed: int = field(repr=False)

    def __post_init__(self) -> None:
        if isinstance(self._packed, bool) or not isinstance(self._packed, int):
            raise TypeError(f"packed handle must be an int, got {type(self._packed).__name__}")
        if not 0 <= self._packed <= PACKED_MASK:
            raise ValueError(f"packed handle {self._packed} does not fit in 32 bits")

    @classmethod
    def _encode(cls, index: int, generation: int) -> "Handle":
        """Pack *index* and *generation* into a new handle (pool use only)."""
        if not 0 <= index <= INDEX_MASK:
            raise ValueError(f"slot index {index} does not fit in {INDEX_BITS} bits")
        if not 0 <= generation <= MAX_GENERATION:
            raise ValueError(f"generation {generation} does not fit in {GENERATION_BITS} bits")
        return cls((index << GENERATION_BITS) | generation)

    def _decode(self) -> Tuple[int, int]:
        """Return ``(index, generation)`` (pool use only)."""
        return self._packed >> GENERATION_BITS, self._packed & GENERATION_MASK

    def __repr__(self) -> str:
        index, generation = self._decode()
        return f"Handle(index={index}, generation={generation})"
