"""
Error taxonomy for the static pool.

Every runtime failure of a pool operation is one of the four classes below,
all raised synchronously and all recoverable by the caller.  Violating the
capacity bound at construction is a programming error and raises the
built-in ``ValueError`` / ``TypeError`` instead.
"""


class StaticPoolError(Exception):
    """Base class for every error a pool operation can raise."""


class NoAvailableSlots(StaticPoolError):
    """Insert found no slot that is both empty and below the generation limit."""


class AccessOutOfBounds(StaticPoolError, IndexError):
    """Handle index is not below the pool's capacity."""


class InvalidHandle(StaticPoolError):
    """Generation matches but the slot holds no value."""


class DanglingHandle(StaticPoolError):
    """Handle generation no longer matches the slot's generation."""
