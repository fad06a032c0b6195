import os
import tempfile

import pytest

from drivethru_scorer._storage.store import SQLiteScoreStore


@pytest.fixture()
def store():
    """Score store on a temporary SQLite file."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield SQLiteScoreStore(path)
    os.unlink(path)
