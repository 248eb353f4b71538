import pytest
from fastapi.testclient import TestClient

from bookstore.main import create_app
from bookstore.storage import BookStore


@pytest.fixture
def store():
    """A fresh, empty store for each test."""
    return BookStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
