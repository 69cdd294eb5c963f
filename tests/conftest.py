"""
Pytest configuration and shared fixtures.
"""

import os

# keep test runs from writing a log file
os.environ["LOG_FILE_PATH"] = ""

import pytest
from fastapi.testclient import TestClient

from crud.store import BookStore
from schemas.book import BookPayload


@pytest.fixture
def client():
    """Create a test client; each lifespan starts with an empty store."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    """Create a store with predictable ids and timestamps."""
    counter = iter(range(1, 1000))
    return BookStore(
        id_factory=lambda: f"book-{next(counter)}",
        clock=lambda: "2023-05-01T10:20:30.123Z",
    )


@pytest.fixture
def sample_book_data():
    """Sample request body for creating a book."""
    return {
        "name": "Buku A",
        "year": 2010,
        "author": "John Doe",
        "summary": "Lorem ipsum dolor sit amet",
        "publisher": "Dicoding Indonesia",
        "pageCount": 100,
        "readPage": 25,
        "reading": False,
    }


@pytest.fixture
def sample_payload(sample_book_data):
    return BookPayload(**sample_book_data)
