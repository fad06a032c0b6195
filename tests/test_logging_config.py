# Area: Shared Tests
"""Tests for logging setup."""

import json
import logging
from drivethru_scorer._shared.logging_config import log_storage_error, setup_logging
from drivethru_scorer.errors import StorageError


class TestSetupLogging:
    def test_writes_json_lines(self, tmp_path):
        log_file = tmp_path / "logs" / "drivethru.log"
        setup_logging(str(log_file), logging.INFO)

        logging.getLogger("drivethru_scorer.test").info("hello")
        for handler in logging.getLogger("drivethru_scorer").handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["message"] == "hello"
        assert record["logger"] == "drivethru_scorer.test"

    def test_storage_error_logged_with_session(self, tmp_path):
        log_file = tmp_path / "drivethru.log"
        setup_logging(str(log_file), logging.INFO)

        log_storage_error(StorageError("save_game", "G1"), session_id="S1")
        for handler in logging.getLogger("drivethru_scorer").handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["level"] == "ERROR"
        assert record["session_id"] == "S1"
        assert "STORAGE_FAILURE" in record["message"]

    def teardown_method(self):
        pkg_logger = logging.getLogger("drivethru_scorer")
        for handler in pkg_logger.handlers:
            handler.close()
        pkg_logger.handlers.clear()
        pkg_logger.propagate = True
        pkg_logger.setLevel(logging.NOTSET)
