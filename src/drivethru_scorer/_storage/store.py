# Area: Storage
"""
drivethru_scorer._storage.store - Score Store
=============================================

The narrow load/save contract the dialogue engine consumes, and its
SQLite-backed implementation. Load operations return None when a
record does not exist; any backend failure raises StorageError. The
store never retries.

A turn that changes both records writes them through save_turn, which
commits both or neither.
"""

import logging
from typing import Optional, Protocol

from .database import execute_in_transaction, init_database
from .repo_games import GameRepository
from .repo_sessions import SessionRepository
from .._state import Game, Session

logger = logging.getLogger("drivethru_scorer.storage")


class ScoreStore(Protocol):
    """Protocol for durable game and session storage."""

    def load_game(self, game_id: str) -> Optional[Game]:
        """Return the game, or None if it does not exist."""
        ...

    def save_game(self, game: Game) -> None:
        """Upsert a game. Raises StorageError on failure."""
        ...

    def load_session(self, session_id: str) -> Optional[Session]:
        """Return the session, or None if it does not exist."""
        ...

    def save_session(self, session: Session) -> None:
        """Upsert a session. Raises StorageError on failure."""
        ...

    def save_turn(self, game: Game, session: Session) -> None:
        """Upsert a game and a session atomically. Raises StorageError on failure."""
        ...


class SQLiteScoreStore:
    """
    ScoreStore backed by a single SQLite file.

    Usage:
        store = SQLiteScoreStore("drivethru.db")
        game = store.load_game("SESSION_1")
    """

    def __init__(self, db_path: str = "drivethru.db"):
        """
        Initialize the store and make sure the schema exists.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path
        init_database(db_path)
        self.games = GameRepository(db_path)
        self.sessions = SessionRepository(db_path)

    def load_game(self, game_id: str) -> Optional[Game]:
        return self.games.get_game(game_id)

    def save_game(self, game: Game) -> None:
        self.games.save_game(game)
        logger.debug(f"Saved game {game.game_id} ({game.player_count()} players)")

    def load_session(self, session_id: str) -> Optional[Session]:
        return self.sessions.get_session(session_id)

    def save_session(self, session: Session) -> None:
        self.sessions.save_session(session)
        logger.debug(f"Saved session {session.session_id} in {session.state.value}")

    def save_turn(self, game: Game, session: Session) -> None:
        execute_in_transaction(
            self.db_path,
            [
                self.games.upsert_statement(game),
                self.sessions.upsert_statement(session),
            ],
            operation="save_turn",
            key=session.session_id,
        )
        logger.debug(
            f"Saved game {game.game_id} with session {session.session_id} "
            f"in {session.state.value}"
        )
