import pytest
from fastapi.testclient import TestClient

from exam_server.config import Settings
from exam_server.database import StorageGateway
from exam_server.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'exam.db'}",
        db_pool_size=5,
        db_pool_timeout=10,
        log_level="DEBUG",
    )


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def storage(test_settings):
    gateway = StorageGateway(test_settings.sqlalchemy_url, pool_size=test_settings.db_pool_size)
    gateway.create_all()
    yield gateway
    gateway.dispose()


@pytest.fixture
def db(storage):
    with storage.session() as session:
        yield session


def make_submission(roll_number="CS-001", **overrides):
    payload = {
        "roll_number": roll_number,
        "name": "Asha Rao",
        "department": "CSE",
        "section": "A",
        "score": 18,
        "total_questions": 20,
        "was_tab_switched": False,
    }
    payload.update(overrides)
    return payload
