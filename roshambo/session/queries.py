"""
Game Queries - Read-only views over the session store.
"""

from __future__ import annotations

from ..engine_core.identifiers import validate_identifier
from ..engine_core.state import SessionKey
from ..storage import GameRecord, SessionStore


class GameQueries:
    """Read-only projections. Never writes to the store."""

    def __init__(self, store: SessionStore):
        self.store = store

    def query_all_games(self) -> list[GameRecord]:
        """Every game, ordered by (host, opponent) key bytes."""
        return self.store.scan_all()

    def query_host_games(self, host_id: str) -> list[GameRecord]:
        """
        Games hosted by host_id, ordered by opponent.

        Raises InvalidIdentifier for a malformed host. An unknown host
        simply has no games.
        """
        host_id = validate_identifier(host_id)
        return self.store.scan_by_host(host_id)

    def query_game(self, host_id: str, opponent_id: str) -> GameRecord | None:
        """Look up a single game."""
        key = SessionKey(
            host_id=validate_identifier(host_id),
            opponent_id=validate_identifier(opponent_id),
        )
        session = self.store.get(key)
        if session is None:
            return None
        return GameRecord(key=key, session=session)
