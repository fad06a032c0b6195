# Area: Storage
"""
drivethru_scorer._storage.repo_games - Games Repository
=======================================================

Repository for the games table. Players are stored as a JSON list of
[name, score] pairs so join order survives any backend.
"""

import json
from typing import Any, Dict, Optional, Tuple

from .database import BaseRepository
from ..errors import StorageError
from .._state import Game


class GameRepository(BaseRepository):
    """
    Repository for games table.

    Handles saving and retrieving game records.
    """

    def upsert_statement(self, game: Game) -> Tuple[str, tuple]:
        """
        Build the insert-or-update statement for a game.

        Args:
            game: The game to persist

        Returns:
            (query, params) ready for execution
        """
        query = """
            INSERT INTO games (game_id, players)
            VALUES (?, ?)
            ON CONFLICT(game_id) DO UPDATE SET
                players = excluded.players,
                updated_at = CURRENT_TIMESTAMP
        """
        players = json.dumps([[name, score] for name, score in game.ordered_scores()])
        return query, (game.game_id, players)

    def save_game(self, game: Game) -> None:
        """Insert or replace a game record."""
        query, params = self.upsert_statement(game)
        self._execute(query, params, operation="save_game", key=game.game_id)

    def get_game(self, game_id: str) -> Optional[Game]:
        """
        Get a game by ID.

        Args:
            game_id: Game identifier to look up

        Returns:
            Game or None if not found
        """
        query = "SELECT * FROM games WHERE game_id = ?"
        row = self._execute_one(query, (game_id,), operation="load_game", key=game_id)
        if row is None:
            return None
        return Game(game_id=row["game_id"], players=self._decode_players(row, game_id))

    def _decode_players(self, row: Dict[str, Any], game_id: str) -> Dict[str, int]:
        try:
            pairs = json.loads(row["players"] or "[]")
            return {str(name): int(score) for name, score in pairs}
        except (TypeError, ValueError) as exc:
            raise StorageError("load_game", game_id, exc) from exc
