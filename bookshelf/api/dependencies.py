"""FastAPI dependencies."""

from fastapi import Request

from bookshelf.core.books.store import BookStore


def get_book_store(request: Request) -> BookStore:
    """Provide the book store created by the application lifespan."""
    return request.app.state.book_store
