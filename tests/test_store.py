"""Tests for the in-memory book store."""

import pytest

from bookshelf.api.schemas.books import Book
from bookshelf.core.books.seed import SEED_BOOKS
from bookshelf.core.books.store import BookStore


def test_seed_dataset(seeded_store):
    """The store starts with every seed book, in order."""
    assert seeded_store.count_books() == len(SEED_BOOKS)
    assert [b.isbn for b in seeded_store.get_all_books()] == [b.isbn for b in SEED_BOOKS]


def test_find_book(seeded_store):
    book = seeded_store.find_book("9781846883668")
    assert book is not None
    assert book.author == "Hawking, Jane"
    assert seeded_store.find_book("0000000000000") is None


def test_add_book(seeded_store, sample_book):
    count = seeded_store.count_books()
    assert seeded_store.add_book(sample_book) == sample_book
    assert seeded_store.count_books() == count + 1
    assert seeded_store.get_all_books()[-1] == sample_book


def test_add_duplicate_book_raises(seeded_store):
    with pytest.raises(ValueError, match="already exists"):
        seeded_store.add_book(Book(isbn="9788202148683", title="Fisken", author="Someone"))


def test_update_book(seeded_store):
    book = seeded_store.find_book("9788202148683")
    assert seeded_store.update_book(book.model_copy(update={"title": "Fisken II"}))
    assert seeded_store.find_book("9788202148683").title == "Fisken II"


def test_update_missing_book(seeded_store, sample_book):
    assert not seeded_store.update_book(sample_book)
    assert seeded_store.find_book(sample_book.isbn) is None


def test_remove_book(seeded_store):
    assert seeded_store.remove_book("9788202148683")
    assert seeded_store.find_book("9788202148683") is None
    assert not seeded_store.remove_book("9788202148683")


@pytest.mark.parametrize(
    "offset, limit, expected",
    [
        (None, None, slice(0, None)),
        (0, 5, slice(0, 5)),
        (5, 5, slice(5, 10)),
        (10, None, slice(10, None)),
        (3, 0, slice(3, 3)),
        (100, 5, slice(100, 105)),
    ],
)
def test_get_all_books_slices(seeded_store, offset, limit, expected):
    """Pages are plain slices of the insertion-ordered books."""
    assert seeded_store.get_all_books(offset, limit) == list(SEED_BOOKS)[expected]


def test_get_books_by_publisher(seeded_store):
    books = seeded_store.get_books_by_publisher("Vintage")
    assert len(books) == 4
    assert all(b.publisher == "Vintage" for b in books)
    assert seeded_store.get_books_by_publisher("vintage") == []


def test_empty_store():
    store = BookStore()
    assert store.count_books() == 0
    assert store.get_all_books() == []
