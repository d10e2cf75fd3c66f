import pytest
from fastapi.testclient import TestClient

from crud_api.main import create_app


@pytest.fixture
def app():
    """A fresh application, so every test starts from the seeded users and no projects."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
