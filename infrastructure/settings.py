"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path, *, required: bool = True) -> None:
        """Read `settings_path`.

        Args:
            settings_path: JSON file to read.
            required: When False, a missing file yields empty settings instead of raising.
        """
        self._path = Path(settings_path)
        self._data: dict[str, Any] = {}
        if not self._path.exists():
            if required:
                raise FileNotFoundError(f"settings.json not found: {self._path}")
            logger.info("No settings file at {}; using defaults", self._path)
            return
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"settings root must be an object: {self._path}")
        self._data = data

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_int(self, key: str, default: int) -> int:
        """Return `key` as int, falling back to `default` on missing or invalid values."""
        try:
            return int(self.get(key, default))
        except (ValueError, TypeError):
            logger.warning("Invalid integer for {}; using {}", key, default)
            return default

    def get_float(self, key: str, default: float) -> float:
        """Return `key` as float, falling back to `default` on missing or invalid values."""
        try:
            return float(self.get(key, default))
        except (ValueError, TypeError):
            logger.warning("Invalid number for {}; using {}", key, default)
            return default
