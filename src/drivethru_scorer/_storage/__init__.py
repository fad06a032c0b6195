# Area: Storage
"""
Score store: the persistence collaborator of the dialogue engine.

This package handles:
- The ScoreStore contract (load/save game, load/save session)
- SQLite schema initialization
- One repository per table
"""

from .database import init_database
from .repo_games import GameRepository
from .repo_sessions import SessionRepository
from .store import ScoreStore, SQLiteScoreStore

__all__ = [
    "init_database",
    "GameRepository",
    "SessionRepository",
    "ScoreStore",
    "SQLiteScoreStore",
]
