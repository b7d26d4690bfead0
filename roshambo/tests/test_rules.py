"""
Tests for game records and outcome rules.
"""

import pytest

from ..engine_core.errors import InvalidMove
from ..engine_core.rules import beats, resolve_outcome
from ..engine_core.state import Move, Outcome, Session


class TestOutcomeRules:
    """Tests for resolve_outcome."""

    @pytest.mark.parametrize(
        "host_move, opponent_move, expected",
        [
            (Move.ROCK, Move.SCISSORS, Outcome.HOST_WINS),
            (Move.SCISSORS, Move.PAPER, Outcome.HOST_WINS),
            (Move.PAPER, Move.ROCK, Outcome.HOST_WINS),
            (Move.SCISSORS, Move.ROCK, Outcome.OPPONENT_WINS),
            (Move.PAPER, Move.SCISSORS, Outcome.OPPONENT_WINS),
            (Move.ROCK, Move.PAPER, Outcome.OPPONENT_WINS),
            (Move.ROCK, Move.ROCK, Outcome.TIE),
            (Move.PAPER, Move.PAPER, Outcome.TIE),
            (Move.SCISSORS, Move.SCISSORS, Outcome.TIE),
        ],
    )
    def test_rule_table(self, host_move, opponent_move, expected):
        assert resolve_outcome(host_move, opponent_move) is expected

    def test_no_move_cannot_be_resolved(self):
        """A game with a missing move has no outcome."""
        with pytest.raises(InvalidMove):
            resolve_outcome(Move.ROCK, Move.NO_MOVE)
        with pytest.raises(InvalidMove):
            resolve_outcome(Move.NO_MOVE, Move.PAPER)

    def test_beats_is_not_symmetric(self):
        assert beats(Move.ROCK, Move.SCISSORS)
        assert not beats(Move.SCISSORS, Move.ROCK)
        assert not beats(Move.ROCK, Move.ROCK)
        assert not beats(Move.NO_MOVE, Move.ROCK)


class TestMove:
    """Tests for Move parsing."""

    @pytest.mark.parametrize("text", ["rock", "Rock", "ROCK", "  rock "])
    def test_parse_is_case_insensitive(self, text):
        assert Move.parse(text) is Move.ROCK

    def test_parse_no_move(self):
        assert Move.parse("NoMove") is Move.NO_MOVE
        assert Move.parse("no_move") is Move.NO_MOVE

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Move.parse("lizard")


class TestSession:
    """Tests for the Session record."""

    def test_started_alias(self):
        """STARTED and IN_PROGRESS are the same member."""
        assert Outcome.STARTED is Outcome.IN_PROGRESS
        assert Outcome("Started") is Outcome.IN_PROGRESS

    def test_new_session_is_in_progress(self):
        session = Session.start(Move.PAPER)
        assert session.host_move is Move.PAPER
        assert session.opponent_move is Move.NO_MOVE
        assert session.result is Outcome.IN_PROGRESS
        assert not session.is_resolved

    def test_with_opponent_move_returns_new_session(self):
        session = Session.start(Move.PAPER)
        resolved = session.with_opponent_move(Move.ROCK, Outcome.HOST_WINS)

        assert resolved.is_resolved
        assert resolved.opponent_move is Move.ROCK
        # Original unchanged
        assert session.opponent_move is Move.NO_MOVE

    def test_dict_format(self):
        """Stored records use the enum values."""
        session = Session(Move.ROCK, Move.PAPER, Outcome.OPPONENT_WINS)
        data = session.to_dict()

        assert data == {
            "host_move": "Rock",
            "opponent_move": "Paper",
            "result": "OpponentWins",
        }
        assert Session.from_dict(data) == session
