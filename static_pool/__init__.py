"""static_pool — fixed-capacity object pool with generation-checked handles."""

from static_pool.errors import (
    StaticPoolError,
    NoAvailableSlots,
    AccessOutOfBounds,
    InvalidHandle,
    DanglingHandle,
)
from static_pool.memory import (
    Handle,
    StaticPool,
    SharedPool,
    MAX_CAPACITY,
    MAX_GENERATION,
)
from static_pool.config import PoolConfig

__all__ = [
    "StaticPool",
    "SharedPool",
    "Handle",
    "PoolConfig",
    "StaticPoolError",
    "NoAvailableSlots",
    "AccessOutOfBounds",
    "InvalidHandle",
    "DanglingHandle",
    "MAX_CAPACITY",
    "MAX_GENERATION",
]
