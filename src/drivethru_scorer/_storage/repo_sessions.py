# Area: Storage
"""
drivethru_scorer._storage.repo_sessions - Sessions Repository
=============================================================

Repository for the sessions table.
"""

from typing import Optional, Tuple

from .database import BaseRepository
from ..errors import StorageError
from .._state import Session
from .._dialogue.enums import DialogueState


class SessionRepository(BaseRepository):
    """
    Repository for sessions table.

    Handles saving and retrieving session records.
    """

    def upsert_statement(self, session: Session) -> Tuple[str, tuple]:
        """
        Build the insert-or-update statement for a session.

        Args:
            session: The session to persist

        Returns:
            (query, params) ready for execution
        """
        query = """
            INSERT INTO sessions
            (session_id, game_id, state, pending_player_name, help_count, needs_more_help)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(session_id) DO UPDATE SET
                game_id = excluded.game_id,
                state = excluded.state,
                pending_player_name = excluded.pending_player_name,
                help_count = excluded.help_count,
                needs_more_help = excluded.needs_more_help,
                updated_at = CURRENT_TIMESTAMP
        """
        params = (
            session.session_id,
            session.game_id,
            session.state.value,
            session.pending_player_name,
            session.help_count,
            int(session.needs_more_help),
        )
        return query, params

    def save_session(self, session: Session) -> None:
        """Insert or replace a session record."""
        query, params = self.upsert_statement(session)
        self._execute(query, params, operation="save_session", key=session.session_id)

    def get_session(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            session_id: Session identifier to look up

        Returns:
            Session or None if not found
        """
        query = "SELECT * FROM sessions WHERE session_id = ?"
        row = self._execute_one(query, (session_id,), operation="load_session", key=session_id)
        if row is None:
            return None
        try:
            state = DialogueState(row["state"])
        except ValueError as exc:
            raise StorageError("load_session", session_id, exc) from exc
        return Session(
            session_id=row["session_id"],
            game_id=row["game_id"],
            state=state,
            pending_player_name=row["pending_player_name"],
            help_count=row["help_count"],
            needs_more_help=bool(row["needs_more_help"]),
        )
