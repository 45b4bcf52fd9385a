"""Book management module."""

from bookshelf.core.books.dates import parse_date
from bookshelf.core.books.seed import seed_books
from bookshelf.core.books.store import BookStore

__all__ = ["BookStore", "parse_date", "seed_books"]
