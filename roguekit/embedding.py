"""A registry of embedded resources, keyed by path."""

from __future__ import annotations

import threading
from collections.abc import Mapping


class ResourceDictionary:
    """Thread-safe mapping from resource paths to their raw bytes."""

    def __init__(self, entries: Mapping[str, bytes] | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, bytes] = {}
        for path, data in (entries or {}).items():
            self.add_resource(path, data)

    def add_resource(self, path: str, data: bytes) -> None:
        """Register (or replace) the bytes stored under ``path``."""
        with self._lock:
            self._entries[path] = bytes(data)

    def get_resource(self, path: str) -> bytes | None:
        """Return the bytes stored under ``path``, or None if there are none."""
        with self._lock:
            return self._entries.get(path)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


EMBED = ResourceDictionary()
"""The process-wide resource registry."""