# Area: Storage Tests
"""Tests for the SQLite score store."""

import pytest
import sqlite3
import tempfile
import os
from unittest.mock import patch
from drivethru_scorer._storage.store import SQLiteScoreStore
from drivethru_scorer._state import Game, Session
from drivethru_scorer.errors import StorageError


class TestSQLiteScoreStore:
    """Tests for SQLiteScoreStore."""

    @pytest.fixture
    def db_path(self):
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        yield path
        os.unlink(path)

    @pytest.fixture
    def store(self, db_path):
        return SQLiteScoreStore(db_path)

    def test_creates_schema(self, store):
        """Test that a fresh file is usable straight away."""
        assert store.load_game("G1") is None
        assert store.load_session("S1") is None

    def test_game_round_trip(self, store):
        store.save_game(Game(game_id="G1", players={"Ann": 2}))
        assert store.load_game("G1").players == {"Ann": 2}

    def test_session_round_trip(self, store):
        store.save_session(Session.new("S1"))
        assert store.load_session("S1") == Session.new("S1")

    def test_save_turn_writes_both(self, store):
        session = Session.new("S1")
        session.pending_player_name = "Ann"
        store.save_turn(Game(game_id="S1", players={"Ann": 0}), session)

        assert store.load_game("S1").players == {"Ann": 0}
        assert store.load_session("S1").pending_player_name == "Ann"

    def test_save_turn_rolls_back_game_on_session_failure(self, store):
        store.save_game(Game(game_id="S1", players={"Ann": 5}))
        broken = ("INSERT INTO missing_table VALUES (?)", ("S1",))

        with patch.object(store.sessions, "upsert_statement", return_value=broken):
            with pytest.raises(StorageError) as exc_info:
                store.save_turn(Game(game_id="S1", players={"Ann": 9}), Session.new("S1"))

        assert exc_info.value.operation == "save_turn"
        assert exc_info.value.key == "S1"
        assert store.load_game("S1").players == {"Ann": 5}
        assert store.load_session("S1") is None

    def test_reopening_keeps_data(self, db_path, store):
        store.save_game(Game(game_id="G1", players={"Ann": 2}))
        reopened = SQLiteScoreStore(db_path)
        assert reopened.load_game("G1").players == {"Ann": 2}

    def test_sqlite_failure_becomes_storage_error(self, store):
        with patch(
            "drivethru_scorer._storage.database.get_connection",
            side_effect=sqlite3.OperationalError("disk I/O error"),
        ):
            with pytest.raises(StorageError) as exc_info:
                store.save_game(Game(game_id="G1"))

        assert exc_info.value.operation == "save_game"
        assert exc_info.value.key == "G1"

    def test_corrupt_players_becomes_storage_error(self, db_path, store):
        conn = sqlite3.connect(db_path)
        conn.execute("INSERT INTO games (game_id, players) VALUES ('G1', 'not json')")
        conn.commit()
        conn.close()

        with pytest.raises(StorageError) as exc_info:
            store.load_game("G1")
        assert exc_info.value.operation == "load_game"

    def test_unopenable_database(self, tmp_path):
        with pytest.raises(StorageError):
            SQLiteScoreStore(str(tmp_path / "missing" / "scores.db"))
