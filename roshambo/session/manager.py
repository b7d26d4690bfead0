"""
Game Manager - Starts games and resolves them.

LIFECYCLE:
1. Host starts a game against an opponent, submitting their move
   -> Session(host_move, NoMove, Started) is inserted
2. Opponent submits their move
   -> Outcome computed, Session overwritten with the result
3. Finished games stay in the store; the pair cannot start another

INVARIANTS:
- At most one game per (host, opponent) pair, enforced by the store's
  atomic insert
- A failed operation leaves no trace in the store
- NoMove is never accepted as a player's choice
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

from .. import CONTRACT_NAME, __version__
from ..engine_core.errors import (
    GameAlreadyResolved,
    GameInProgress,
    InvalidMove,
    NoSuchGame,
)
from ..engine_core.identifiers import validate_identifier
from ..engine_core.rules import resolve_outcome
from ..engine_core.state import Move, Session, SessionKey
from ..storage import AlreadyExists, SessionStore, set_contract_version


logger = logging.getLogger("roshambo.session")


@dataclass
class GameEvent:
    """
    Acknowledgement of a successful operation.

    method names the operation ("start_game", "submit_move", ...);
    attributes carry whatever the caller may want to surface.
    """
    method: str
    attributes: dict[str, Any] = field(default_factory=dict)
    session: Session | None = None


class GameManager:
    """
    Applies game operations to the session store.

    Responsibilities:
    - Validate identifiers and moves
    - Create games (one per ordered pair)
    - Record the opponent's move and compute the winner

    Usage:
        manager = GameManager(SessionStore(MemoryKVStore()))
        manager.start_game("alice", "bob", Move.ROCK)
        manager.submit_opponent_move("alice", "bob", Move.PAPER)
    """

    def __init__(self, store: SessionStore):
        self.store = store

    def instantiate(self, owner: str) -> GameEvent:
        """Record contract name and version in the store."""
        set_contract_version(self.store.backend, CONTRACT_NAME, __version__)
        logger.info("instantiated %s %s for owner %s", CONTRACT_NAME, __version__, owner)
        return GameEvent(method="instantiate", attributes={"owner": owner})

    def start_game(self, host_id: str, opponent_id: str, first_move: Move) -> GameEvent:
        """
        Start a game between host and opponent.

        host_id is the authenticated caller and is trusted as-is;
        opponent_id is user input and gets validated.

        Raises:
            InvalidIdentifier: opponent_id is malformed
            InvalidMove: first_move is NoMove
            GameInProgress: a game already exists for this pair
        """
        opponent_id = validate_identifier(opponent_id)
        if not first_move.is_played:
            logger.warning("rejected start_game %s/%s: no move", host_id, opponent_id)
            raise InvalidMove("A game must start with Rock, Paper or Scissors")

        key = SessionKey(host_id=host_id, opponent_id=opponent_id)
        session = Session.start(first_move)
        try:
            self.store.insert(key, session)
        except AlreadyExists:
            logger.warning("rejected start_game %s: game in progress", key)
            raise GameInProgress(
                f"A game between {host_id} and {opponent_id} already exists",
                host_id=host_id,
                opponent_id=opponent_id,
            ) from None

        logger.info("started game %s", key)
        return GameEvent(
            method="start_game",
            attributes={"host": host_id, "opponent": opponent_id},
            session=session,
        )

    def submit_opponent_move(self, host_id: str, opponent_id: str, move: Move) -> GameEvent:
        """
        Record the opponent's answer and resolve the game.

        opponent_id is the authenticated caller; host_id is user input.

        Raises:
            InvalidIdentifier: host_id is malformed
            InvalidMove: move is NoMove
            NoSuchGame: no game for this pair
            GameAlreadyResolved: the game already has a result
        """
        host_id = validate_identifier(host_id)
        if not move.is_played:
            raise InvalidMove("Opponent must answer with Rock, Paper or Scissors")

        key = SessionKey(host_id=host_id, opponent_id=opponent_id)

        def answer(session: Session | None) -> Session:
            if session is None:
                logger.warning("rejected submit_move %s: no such game", key)
                raise NoSuchGame(
                    f"No game between {host_id} and {opponent_id}",
                    host_id=host_id,
                    opponent_id=opponent_id,
                )
            if session.is_resolved:
                logger.warning("rejected submit_move %s: already resolved", key)
                raise GameAlreadyResolved(
                    f"Game between {host_id} and {opponent_id} is already finished",
                    host_id=host_id,
                    opponent_id=opponent_id,
                    result=session.result.value,
                )
            return session.with_opponent_move(move, resolve_outcome(session.host_move, move))

        # Check and write happen under the store lock: one answer per game
        resolved = self.store.update(key, answer)
        result = resolved.result

        logger.info("resolved game %s: %s", key, result.value)
        return GameEvent(
            method="submit_move",
            attributes={"host": host_id, "opponent": opponent_id, "result": result.value},
            session=resolved,
        )
