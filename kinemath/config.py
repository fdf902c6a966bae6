"""
Package settings with a JSON load/save round trip.

The module-level ``config`` lives in memory only; nothing is read from or
written to disk unless ``Config.load`` / ``Config.save`` is called.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from kinemath.log import get_logger

logger = get_logger("config")

DEFAULT_CONFIG = {
    "matrix_dimension": 4,
    "tolerance": 1e-6,
}


class Config:
    __slots__ = ("data", "path")

    def __init__(self, data: Optional[dict] = None, path: Optional[Union[str, Path]] = None):
        self.data = DEFAULT_CONFIG.copy()
        if data:
            self.data.update(data)
        self.path = Path(path) if path is not None else None

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Config":
        """Read settings from a JSON file; missing or broken files fall back to the defaults."""
        path = Path(path)
        if not path.is_file():
            logger.info("[Config] No config file at %s, using defaults.", path)
            return cls(path=path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("[Config] Failed to read config %s: %s", path, exc)
            return cls(path=path)
        if not isinstance(data, dict):
            logger.error("[Config] Config %s is not a JSON object, using defaults.", path)
            return cls(path=path)
        logger.info("[Config] Loaded configuration from %s.", path)
        return cls(data, path=path)

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path given and config was not loaded from a file")
        with target.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        self.path = target
        logger.info("[Config] Configuration saved to %s.", target)
        return target

    def __getitem__(self, key: str) -> Any:
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def reset(self) -> None:
        self.data = DEFAULT_CONFIG.copy()

    def __repr__(self) -> str:
        return f"Config({self.data!r})"


config = Config()
