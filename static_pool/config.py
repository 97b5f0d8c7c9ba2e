"""
Load pool configuration from a JSON file. Exposes capacity, exhaustion
warning threshold and logging settings.

The file is ``static_pool.json`` in the config dir: the directory passed in,
else $STATIC_POOL_CONFIG_DIR, else the package directory. A missing file
means all defaults.
"""
import json
import os
from typing import Optional

from static_pool.memory.handle import MAX_CAPACITY

CONFIG_FILE = "static_pool.json"
CONFIG_DIR_ENV = "STATIC_POOL_CONFIG_DIR"

_PKG_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_CAPACITY = 1024
DEFAULT_REUSABLE_WARN_THRESHOLD = 0
DEFAULT_LOG_LEVEL = "INFO"


def _load_json(directory: str, name: str) -> dict:
    path = os.path.join(directory, name)
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


class PoolConfig:
    """Single place for pool settings. Uses static_pool.json in the config dir."""

    def __init__(self, config_dir: Optional[str] = None):
        self._dir = config_dir or os.environ.get(CONFIG_DIR_ENV) or _PKG_DIR
        self._data = _load_json(self._dir, CONFIG_FILE)

    @property
    def config_dir(self) -> str:
        return self._dir

    def get_capacity(self) -> int:
        """Slot count, clamped to 1..MAX_CAPACITY."""
        capacity = int(self._data.get("capacity", DEFAULT_CAPACITY))
        return max(1, min(MAX_CAPACITY, capacity))

    def get_reusable_warn_threshold(self) -> int:
        """Warn once the reusable-slot count drops to this value or below."""
        return max(0, int(self._data.get("reusable_warn_threshold", DEFAULT_REUSABLE_WARN_THRESHOLD)))

    def get_log_dir(self) -> Optional[str]:
        """Directory for per-run log files; None means console only."""
        log_dir = self._data.get("log_dir")
        return str(log_dir) if log_dir else None

    def get_log_level(self) -> str:
        return str(self._data.get("log_level", DEFAULT_LOG_LEVEL)).upper()
