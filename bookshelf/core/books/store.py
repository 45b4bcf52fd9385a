"""In-memory book storage."""

import threading
from typing import Iterable, Optional

import structlog

from bookshelf.api.schemas.books import Book

logger = structlog.get_logger(__name__)


class BookStore:
    """In-memory store for books keyed by ISBN, iterated in insertion order."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: dict[str, Book] = {}
        self._lock = threading.Lock()
        for book in books:
            self._books[book.isbn] = book

    def find_book(self, isbn: str) -> Optional[Book]:
        """Get a book by ISBN."""
        with self._lock:
            return self._books.get(isbn)

    def add_book(self, book: Book) -> Book:
        """Add a book to the store. Raises ValueError if the ISBN is taken."""
        with self._lock:
            if book.isbn in self._books:
                raise ValueError(f"Book with isbn '{book.isbn}' already exists")
            self._books[book.isbn] = book
        logger.debug("Book added", isbn=book.isbn)
        return book

    def update_book(self, book: Book) -> bool:
        """Replace the stored book with the same ISBN, keeping its position."""
        with self._lock:
            if book.isbn not in self._books:
                return False
            self._books[book.isbn] = book
        logger.debug("Book replaced", isbn=book.isbn)
        return True

    def remove_book(self, isbn: str) -> bool:
        """Delete a book."""
        with self._lock:
            removed = self._books.pop(isbn, None)
        return removed is not None

    def get_all_books(self, offset: Optional[int] = None, limit: Optional[int] = None) -> list[Book]:
        """
        List books in insertion order.

        Returns up to ``limit`` books starting at ``offset``. A missing offset
        starts at the first book, a missing limit runs to the end.
        """
        start = offset or 0
        with self._lock:
            books = list(self._books.values())
        if limit is None:
            return books[start:]
        return books[start:start + limit]

    def count_books(self) -> int:
        with self._lock:
            return len(self._books)

    def get_books_by_publisher(self, publisher: str) -> list[Book]:
        """List books whose publisher equals ``publisher``."""
        with self._lock:
            return [b for b in self._books.values() if b.publisher == publisher]
