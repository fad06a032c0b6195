# Area: State
"""
drivethru_scorer._state - Game and session records
==================================================

Game is the durable record of players and scores. Session is the
per-conversation working state layered on top of it.

Player order is part of the data: ``Game.players`` is a plain dict,
whose insertion order is guaranteed by the language, and every reader
(speech, leaderboard, persistence) iterates it in that order. Ranking
on the leaderboard is by join order, never by score.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from ._dialogue.enums import DialogueState

logger = logging.getLogger("drivethru_scorer.state")


@dataclass
class Game:
    """
    One drive-thru game: an ordered mapping of player name to score.

    Attributes:
        game_id: Immutable identifier, assigned on creation
        players: Player name -> score, in join order
    """
    game_id: str
    players: Dict[str, int] = field(default_factory=dict)

    def has_player(self, name: str) -> bool:
        """Names are case-sensitive."""
        return name in self.players

    def add_player(self, name: str) -> bool:
        """
        Register a player with a score of zero.

        Returns:
            False if the name is already taken (nothing changes)
        """
        if name in self.players:
            return False
        self.players[name] = 0
        logger.debug(f"Game {self.game_id}: added player {name}")
        return True

    def add_score(self, name: str, delta: int) -> int:
        """
        Add delta to a player's score. Negative deltas are applied as-is.

        Returns:
            The player's new score

        Raises:
            KeyError: If the player is not registered
        """
        self.players[name] += delta
        return self.players[name]

    def player_count(self) -> int:
        return len(self.players)

    def ordered_scores(self) -> List[Tuple[str, int]]:
        """Return (name, score) pairs in join order."""
        return list(self.players.items())


@dataclass
class Session:
    """
    Working state of one conversation.

    Attributes:
        session_id: Conversation identifier
        game_id: Game this conversation scores into
        state: Current dialogue state
        pending_player_name: Player just named and awaiting a score
        help_count: Number of help responses delivered so far
        needs_more_help: True until the first score has been added
    """
    session_id: str
    game_id: str
    state: DialogueState = DialogueState.AWAITING_NAME
    pending_player_name: Optional[str] = None
    help_count: int = 0
    needs_more_help: bool = True

    @classmethod
    def new(cls, session_id: str) -> "Session":
        """Fresh session whose game shares the session's identifier."""
        return cls(session_id=session_id, game_id=session_id)

    @property
    def has_had_help(self) -> bool:
        return self.help_count > 0
