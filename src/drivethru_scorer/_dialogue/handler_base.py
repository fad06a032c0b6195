# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_base - Base Intent Handler
=============================================================

Abstract base class for all intent handlers. Provides slot parsing,
state advancement and logging helpers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .enums import DialogueEvent
from .state_machine import DialogueStateMachine
from ..types import DialogueResponse, InboundEvent
from .._state import Game, Session
from .._storage.store import ScoreStore

logger = logging.getLogger("drivethru_scorer.dialogue.handler")


class BaseIntentHandler(ABC):
    """
    Abstract base class for intent handlers.

    Every handler gets the score store and implements handle(). Handlers
    persist their own changes; a StorageError from the store is left to
    propagate to the dialogue manager.
    """

    def __init__(self, store: ScoreStore):
        self.store = store

    @abstractmethod
    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        """
        Handle one turn.

        Args:
            event: The inbound event with its slots
            session: The stored session, or None for a new conversation

        Returns:
            The rendered response
        """
        pass

    def load_or_create_game(self, game_id: str) -> Game:
        """Load a game, or return a new empty one (not yet saved)."""
        game = self.store.load_game(game_id)
        if game is None:
            logger.info(f"Creating game {game_id}")
            game = Game(game_id=game_id)
        return game

    def advance(self, session: Session, event: DialogueEvent) -> None:
        """Move the session's state along the transition table."""
        machine = DialogueStateMachine(session.state)
        session.state = machine.transition(event)

    def parse_score(self, raw: Optional[str]) -> Optional[int]:
        """
        Parse a score slot.

        Any integer literal is accepted as-is, including negatives.

        Returns:
            The integer, or None if the slot is absent or not an integer
        """
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def log_handling(self, intent: str, session_id: str) -> None:
        """
        Log that an intent is being handled.

        Args:
            intent: The intent name
            session_id: The conversation identifier
        """
        logger.info(
            f"Handling {intent} (session_id={session_id})",
            extra={"session_id": session_id, "intent": intent},
        )
