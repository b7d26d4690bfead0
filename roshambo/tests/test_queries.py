"""
Tests for read-only game queries.
"""

import pytest

from ..engine_core.errors import InvalidIdentifier
from ..engine_core.state import Move, SessionKey


class TestQueries:

    def test_all_games(self, populated, queries):
        records = queries.query_all_games()

        assert len(records) == 3
        assert {r.key for r in records} == {
            SessionKey("creator", "an_opponent"),
            SessionKey("creator", "diff_opponent"),
            SessionKey("user", "diff_opponent"),
        }

    def test_host_games(self, populated, queries):
        records = queries.query_host_games("creator")

        assert [r.key.opponent_id for r in records] == ["an_opponent", "diff_opponent"]
        assert records[0].session.host_move is Move.SCISSORS
        assert records[1].session.host_move is Move.ROCK

    def test_other_host_games(self, populated, queries):
        records = queries.query_host_games("user")
        assert [r.key for r in records] == [SessionKey("user", "diff_opponent")]

    def test_unknown_host_is_empty(self, populated, queries):
        assert queries.query_host_games("stranger") == []

    def test_opponent_is_not_a_host(self, populated, queries):
        """Games are listed under their host only."""
        assert queries.query_host_games("diff_opponent") == []

    def test_malformed_host(self, queries):
        with pytest.raises(InvalidIdentifier):
            queries.query_host_games("NOT&VALID")

    def test_query_game(self, populated, queries):
        record = queries.query_game("creator", "an_opponent")
        assert record.key == SessionKey("creator", "an_opponent")
        assert record.session.host_move is Move.SCISSORS

        assert queries.query_game("creator", "stranger") is None

    def test_queries_never_write(self, populated, queries, backend):
        before = list(backend.range())
        queries.query_all_games()
        queries.query_host_games("creator")
        queries.query_game("creator", "an_opponent")
        assert list(backend.range()) == before


class TestScenario:
    """The reference walkthrough: three games, two hosted by creator."""

    def test_walkthrough(self, manager, queries):
        from ..engine_core.errors import GameInProgress

        manager.start_game("creator", "an_opponent", Move.SCISSORS)
        with pytest.raises(GameInProgress):
            manager.start_game("creator", "an_opponent", Move.ROCK)
        manager.start_game("creator", "diff_opponent", Move.ROCK)
        manager.start_game("user", "diff_opponent", Move.ROCK)

        assert len(queries.query_all_games()) == 3
        assert len(queries.query_host_games("creator")) == 2
