"""A small JSON key-value store, optionally backed by a file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union


class JsonStorage:
    """Key-value store holding JSON values; persists to ``path`` when one is given."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._path = Path(path) if path is not None else None
        self._data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if self._path is None or not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self) -> None:
        if self._path is not None:
            self._path.write_text(json.dumps(self._data), encoding="utf-8")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent or unreadable."""
        text = self._data.get(key)
        if text is None:
            return default
        try:
            return json.loads(text)
        except ValueError:
            return default

    def set(self, key: str, value: Any) -> None:
        """Store ``value``; raises ``TypeError`` if it cannot be encoded as JSON."""
        self._data[key] = json.dumps(value)
        self._write()

    def delete(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._write()

    def __contains__(self, key: object) -> bool:
        return key in self._data