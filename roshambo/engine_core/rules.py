"""
Rules - Rock/Paper/Scissors outcome resolution.

Rock beats Scissors, Scissors beats Paper, Paper beats Rock.
Equal moves tie.
"""

from __future__ import annotations

from .state import Move, Outcome
from .errors import InvalidMove


# move -> the move it defeats
WINS: dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def beats(move: Move, other: Move) -> bool:
    """Check if move defeats other."""
    return WINS.get(move) is other


def resolve_outcome(host_move: Move, opponent_move: Move) -> Outcome:
    """
    Compute the result of a game from the host's perspective.

    Raises InvalidMove if either side has not played.
    """
    if not host_move.is_played or not opponent_move.is_played:
        raise InvalidMove("Both players must have played to resolve a game")

    if host_move is opponent_move:
        return Outcome.TIE
    if beats(host_move, opponent_move):
        return Outcome.HOST_WINS
    return Outcome.OPPONENT_WINS
