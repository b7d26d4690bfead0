"""
Key-Value Backends - Ordered byte-keyed storage.

The backends:
- Keep keys in ascending byte order
- Support half-open range scans [start, end)
- Know nothing about games (the session store owns encoding)

Two implementations:
- MemoryKVStore: process-local, lost on exit
- FileKVStore: whole namespace written to one JSON file after each write
"""

from __future__ import annotations
import json
import logging
import os
from abc import ABC, abstractmethod
from bisect import bisect_left, insort
from pathlib import Path
from typing import Iterator


logger = logging.getLogger("roshambo.storage")


class KVStore(ABC):
    """Ordered key-value store with byte keys and values."""

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under key, or None."""

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove(self, key: bytes) -> None:
        """Remove key if present."""

    @abstractmethod
    def range(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
    ) -> Iterator[tuple[bytes, bytes]]:
        """
        Iterate (key, value) pairs with start <= key < end, ascending.

        None means unbounded on that side.
        """


class MemoryKVStore(KVStore):
    """
    In-memory ordered store.

    Values live in a dict; a sorted key list gives ordered iteration.
    """

    def __init__(self):
        self._data: dict[bytes, bytes] = {}
        self._keys: list[bytes] = []

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        if key not in self._data:
            insort(self._keys, key)
        self._data[key] = value

    def remove(self, key: bytes) -> None:
        if self._data.pop(key, None) is None:
            return
        index = bisect_left(self._keys, key)
        del self._keys[index]

    def range(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
    ) -> Iterator[tuple[bytes, bytes]]:
        lo = 0 if start is None else bisect_left(self._keys, start)
        hi = len(self._keys) if end is None else bisect_left(self._keys, end)
        # Snapshot so writes during iteration don't shift indices
        for key in self._keys[lo:hi]:
            yield key, self._data[key]


class StoreCorrupted(Exception):
    """The backing file exists but can't be read as a store."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Store file {path} is corrupted: {reason}")
        self.path = path
        self.reason = reason


class FileKVStore(MemoryKVStore):
    """
    File-backed ordered store.

    Usage:
        store = FileKVStore("~/.roshambo/games.json")
        store.set(b"key", b"value")   # persisted immediately

    The file holds {hex(key): hex(value)}. Writes go to a temp file
    that replaces the original, so a crash never leaves a half-written
    store behind. The file is written before memory changes: if the
    write fails, the store keeps its previous contents.
    """

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def set(self, key: bytes, value: bytes) -> None:
        payload = self._payload()
        payload[key.hex()] = value.hex()
        self._flush(payload)
        super().set(key, value)

    def remove(self, key: bytes) -> None:
        if key not in self._data:
            return
        payload = self._payload()
        del payload[key.hex()]
        self._flush(payload)
        super().remove(key)

    def _load(self):
        if not self.path.exists():
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object")
            entries = [
                (bytes.fromhex(key_hex), bytes.fromhex(value_hex))
                for key_hex, value_hex in raw.items()
            ]
        except (ValueError, TypeError) as e:
            logger.error("cannot load store %s: %s", self.path, e)
            raise StoreCorrupted(self.path, str(e)) from e

        for key, value in entries:
            MemoryKVStore.set(self, key, value)
        logger.debug("loaded %d entries from %s", len(self), self.path)

    def _payload(self) -> dict[str, str]:
        return {key.hex(): self._data[key].hex() for key in self._keys}

    def _flush(self, payload: dict[str, str]):
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)


def open_store(path: str | Path | None = None) -> KVStore:
    """Open a file-backed store at path, or an in-memory store if path is None."""
    if path is None:
        return MemoryKVStore()
    return FileKVStore(path)
