"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.schemas.books import Book
from bookshelf.core.books.seed import seed_books
from bookshelf.core.books.store import BookStore
from bookshelf.main import app


@pytest.fixture
def client():
    """Create a test client with a freshly seeded book store."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def store(client) -> BookStore:
    """The book store behind the test client."""
    return app.state.book_store


@pytest.fixture
def seeded_store() -> BookStore:
    """A standalone store holding the seed dataset."""
    return BookStore(seed_books())


@pytest.fixture
def sample_book() -> Book:
    """A valid book not present in the seed dataset."""
    return Book(
        isbn="9788202289331",
        title="Kurtby",
        author="Loe, Erlend",
        summary="Kurt og gjengen er på vei til Mummidalen da Kurt sovner ved rattet.",
    )
