"""Test configuration and shared fixtures."""

import pytest

from core import db
from core.assessment import AssessmentGrid
from core.auth import AuthUser


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point core.db at a fresh SQLite file with the schema created."""
    path = tmp_path / "iwp_test.db"
    monkeypatch.setattr(db, "DB_PATH", path)
    db.ensure_base_schema()
    return path


@pytest.fixture
def grid():
    return AssessmentGrid()


@pytest.fixture
def sample_user():
    return AuthUser(id="user_01", email="sonam.wangmo@university.edu",
                    first_name="Sonam", last_name="Wangmo")


class RecordingSurface:
    def __init__(self):
        self.documents = []

    def print_document(self, document):
        self.documents.append(document)


@pytest.fixture
def surface():
    return RecordingSurface()
