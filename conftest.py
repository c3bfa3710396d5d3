import pytest
from fastapi.testclient import TestClient

from task_service import main


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture()
def client(db_path, monkeypatch):
    """TestClient whose startup hook loads the database from a temp file."""
    monkeypatch.setattr(main, "DB_PATH", db_path)
    with TestClient(main.app) as test_client:
        yield test_client
