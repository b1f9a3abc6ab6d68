import pytest
from fastapi.testclient import TestClient

import database


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(database, "DATA_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def client(data_dir):
    from main import app

    with TestClient(app) as c:
        yield c
