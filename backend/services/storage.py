"""
Key-Value Store - Namespaced JSON persistence with safe fallbacks
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class KeyValueStore:
    """Persist JSON values under namespaced keys in a single file.

    Reads never raise: missing or corrupt data yields the caller's fallback.
    Writes report failure through their return value instead of raising.
    """

    def __init__(self, path: Path | str, namespace: str = "apb:"):
        self._path = Path(path)
        self.ns = namespace

    @property
    def path(self) -> Path:
        return self._path

    def key(self, name: str) -> str:
        return f"{self.ns}{name}"

    def _read_all(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {self._path}")
        return data

    def get(self, name: str, fallback: Any = None) -> Any:
        """Get a stored value, or the fallback if absent/unreadable"""
        try:
            data = self._read_all()
        except (json.JSONDecodeError, OSError, ValueError) as e:
            print(f"[Storage] get parse failed: {e}")
            return fallback
        value = data.get(self.key(name))
        return fallback if value is None else value

    def set(self, name: str, value: Any) -> bool:
        """Store a value; returns False when the write fails"""
        try:
            try:
                data = self._read_all()
            except (json.JSONDecodeError, ValueError):
                data = {}
            data[self.key(name)] = value
            payload = json.dumps(data, indent=2, ensure_ascii=False)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(payload)
            return True
        except (OSError, TypeError, ValueError) as e:
            print(f"[Storage] set write failed: {e}")
            return False

    def remove(self, name: str) -> bool:
        """Delete a stored value; returns False when the write fails"""
        try:
            data = self._read_all()
            if data.pop(self.key(name), None) is None:
                return True
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            return True
        except (json.JSONDecodeError, OSError, ValueError) as e:
            print(f"[Storage] remove failed: {e}")
            return False
