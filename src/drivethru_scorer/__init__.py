"""
drivethru_scorer - Drive Thru Score Keeper
==========================================

Conversational score keeping: each call takes one recognized intent
(launch, a player name, a score, help, exit) and returns the speech,
reprompt and card to play back.

Quick Start:
    from drivethru_scorer import DialogueManager, InboundEvent, SQLiteScoreStore
    manager = DialogueManager(SQLiteScoreStore("drivethru.db"))
    response = manager.handle(InboundEvent(session_id="S1", intent_name="Launch"))
    print(response.speech_text)

Adapters that receive JSON can call ``manager.handle_payload(dict)``
instead; it validates the payload and raises InvalidEventError when
it is malformed.
"""

from ._dialogue.manager import DialogueManager
from ._dialogue.enums import DialogueState, DialogueEvent
from ._dialogue.formatter import leaderboard_card, scores_as_speech
from ._dialogue.response_builder import build_apology_response
from ._state import Game, Session
from ._storage.store import ScoreStore, SQLiteScoreStore
from .errors import (
    DriveThruError,
    StorageError,
    InvalidEventError,
)
from .types import (
    InboundEvent,
    Card,
    DialogueResponse,
)

__all__ = [
    # Main classes
    "DialogueManager",
    "ScoreStore",
    "SQLiteScoreStore",
    # State
    "DialogueState",
    "DialogueEvent",
    "Game",
    "Session",
    # Rendering
    "scores_as_speech",
    "leaderboard_card",
    "build_apology_response",
    # Errors
    "DriveThruError",
    "StorageError",
    "InvalidEventError",
    # Records
    "InboundEvent",
    "Card",
    "DialogueResponse",
]
__version__ = "1.0.0"
