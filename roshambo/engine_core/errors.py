"""
Errors raised by the engine.

Every error is terminal for the operation that raised it. The API
layer reports error_code verbatim to its callers.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for game errors."""
    error_code = "GAME_ERROR"

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidIdentifier(GameError):
    """A participant identifier is not well-formed."""
    error_code = "INVALID_IDENTIFIER"


class InvalidMove(GameError):
    """NoMove was submitted as a player's choice."""
    error_code = "INVALID_MOVE"


class GameInProgress(GameError):
    """A game already exists for this (host, opponent) pair."""
    error_code = "GAME_IN_PROGRESS"


class NoSuchGame(GameError):
    """No game exists for this (host, opponent) pair."""
    error_code = "NO_SUCH_GAME"


class GameAlreadyResolved(GameError):
    """The game already has a result."""
    error_code = "GAME_ALREADY_RESOLVED"
