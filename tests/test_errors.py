# Area: Errors Tests
"""Tests for exception classes."""

from drivethru_scorer.errors import DriveThruError, InvalidEventError, StorageError


class TestStorageError:
    def test_message_and_fields(self):
        cause = OSError("disk full")
        error = StorageError("save_game", "G1", cause)

        assert isinstance(error, DriveThruError)
        assert error.operation == "save_game"
        assert error.key == "G1"
        assert "disk full" in str(error)

    def test_format_error_log(self):
        block = StorageError("load_session", "S1").format_error_log()

        assert "STORAGE_FAILURE" in block
        assert '"key": "S1"' in block


class TestInvalidEventError:
    def test_format_error_log_lists_errors(self):
        error = InvalidEventError({"intentName": "Launch"}, ["sessionId: Field required"])
        block = error.format_error_log()

        assert "INVALID_EVENT" in block
        assert "* sessionId: Field required" in block
