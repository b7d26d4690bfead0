"""
Session Store - Persistent map from (host, opponent) to Session.

The store:
- Owns every Session record; nothing else writes the "games" namespace
- Guarantees at most one Session per SessionKey (insert is check-then-write
  under one lock)
- Scans all games, or one host's games via a prefix range

Records are stored as compact JSON.
"""

from __future__ import annotations
import json
import logging
import threading
from dataclasses import dataclass
from typing import Callable

from ..engine_core.state import Session, SessionKey
from .kv import KVStore
from .keys import (
    decode_session_key,
    encode_session_key,
    host_prefix,
    namespace_prefix,
    prefix_upper_bound,
)


logger = logging.getLogger("roshambo.storage")

GAMES_NAMESPACE = "games"


class AlreadyExists(Exception):
    """A record already exists under this key."""

    def __init__(self, key: SessionKey):
        super().__init__(f"Record already exists for {key}")
        self.key = key


@dataclass(frozen=True)
class GameRecord:
    """A (key, session) pair returned by scans."""
    key: SessionKey
    session: Session

    @property
    def encoded_key(self) -> bytes:
        return encode_session_key(self.key)


class SessionStore:
    """
    Namespaced session storage on top of an ordered KVStore.

    Usage:
        store = SessionStore(MemoryKVStore())
        store.insert(SessionKey("alice", "bob"), Session.start(Move.ROCK))
        store.scan_by_host("alice")
    """

    def __init__(self, backend: KVStore, namespace: str = GAMES_NAMESPACE):
        self.backend = backend
        self.namespace = namespace
        self._prefix = namespace_prefix(namespace)
        self._lock = threading.RLock()

    def insert(self, key: SessionKey, session: Session) -> None:
        """
        Persist a new session.

        Raises AlreadyExists if the key is taken; the stored record
        is left untouched.
        """
        storage_key = self._storage_key(key)
        with self._lock:
            if self.backend.get(storage_key) is not None:
                raise AlreadyExists(key)
            self.backend.set(storage_key, self._serialize(session))
        logger.debug("inserted game %s", key)

    def get(self, key: SessionKey) -> Session | None:
        """Get the session stored under key."""
        raw = self.backend.get(self._storage_key(key))
        if raw is None:
            return None
        return self._deserialize(raw)

    def put(self, key: SessionKey, session: Session) -> None:
        """Overwrite the session stored under key."""
        with self._lock:
            self.backend.set(self._storage_key(key), self._serialize(session))
        logger.debug("updated game %s", key)

    def update(
        self,
        key: SessionKey,
        apply: Callable[[Session | None], Session],
    ) -> Session:
        """
        Read, transform and write a session as one step.

        apply receives the current session (or None) and returns the
        replacement. If it raises, nothing is written. No other insert,
        put or update can run between the read and the write.
        """
        with self._lock:
            updated = apply(self.get(key))
            self.backend.set(self._storage_key(key), self._serialize(updated))
        logger.debug("updated game %s", key)
        return updated

    def scan_all(self) -> list[GameRecord]:
        """All games in ascending encoded-key order."""
        return self._scan(self._prefix)

    def scan_by_host(self, host_id: str) -> list[GameRecord]:
        """One host's games in ascending opponent order."""
        return self._scan(self._prefix + host_prefix(host_id))

    def _scan(self, prefix: bytes) -> list[GameRecord]:
        records = []
        for storage_key, raw in self.backend.range(prefix, prefix_upper_bound(prefix)):
            key = decode_session_key(storage_key[len(self._prefix):])
            records.append(GameRecord(key=key, session=self._deserialize(raw)))
        return records

    def _storage_key(self, key: SessionKey) -> bytes:
        return self._prefix + encode_session_key(key)

    @staticmethod
    def _serialize(session: Session) -> bytes:
        return json.dumps(session.to_dict(), separators=(",", ":")).encode("utf-8")

    @staticmethod
    def _deserialize(raw: bytes) -> Session:
        return Session.from_dict(json.loads(raw.decode("utf-8")))
