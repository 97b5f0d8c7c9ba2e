"""static_pool.memory — handle encoding, the slot pool and its thread-safe wrapper."""

from static_pool.memory.handle import (
    Handle,
    INDEX_BITS,
    GENERATION_BITS,
    GENERATION_MASK,
    MAX_GENERATION,
    MAX_CAPACITY,
)
from static_pool.memory.pool import StaticPool
from static_pool.memory.shared_state import SharedPool

__all__ = [
    "Handle",
    "StaticPool",
    "SharedPool",
    "INDEX_BITS",
    "GENERATION_BITS",
    "GENERATION_MASK",
    "MAX_GENERATION",
    "MAX_CAPACITY",
]
