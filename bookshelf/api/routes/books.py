"""Book resource endpoints."""

from typing import Annotated, Optional
from urllib.parse import quote, urlencode

import structlog
from fastapi import APIRouter, Depends, Form, HTTPException, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from bookshelf.api.dependencies import get_book_store
from bookshelf.api.errors import BookValidationError, non_null
from bookshelf.api.schemas.books import ISBN_PATTERN, Book, BookBuilder, ValidationErrorRecord, validate_book
from bookshelf.core.books.dates import parse_date
from bookshelf.core.books.store import BookStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])

IsbnPath = Annotated[
    str,
    Path(
        min_length=13,
        max_length=13,
        pattern=ISBN_PATTERN,
        description="ISBN, exactly 13 digits",
    ),
]

VALIDATION_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": list[ValidationErrorRecord], "description": "Validation failed"},
}


class BookFormParams:
    """Book fields collected from a form-encoded body."""

    def __init__(
        self,
        isbn: Annotated[Optional[str], Form()] = None,
        title: Annotated[Optional[str], Form()] = None,
        author: Annotated[Optional[str], Form()] = None,
        published: Annotated[Optional[str], Form(description="yyyy-MM-ddTHH:mm:ss or yyyy-MM-dd")] = None,
        translator: Annotated[Optional[str], Form()] = None,
        summary: Annotated[Optional[str], Form()] = None,
    ) -> None:
        self.isbn = isbn
        self.title = title
        self.author = author
        self.published = published
        self.translator = translator
        self.summary = summary

    def to_book(self) -> Book:
        return _form_book(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            published=self.published,
            translator=self.translator,
            summary=self.summary,
        )


def _form_book(
    isbn: Optional[str],
    title: Optional[str],
    author: Optional[str],
    published: Optional[str],
    translator: Optional[str],
    summary: Optional[str],
) -> Book:
    """Build a book from raw form values. Empty values count as absent."""
    return (
        BookBuilder(isbn or None)
        .title(title or None)
        .author(author or None)
        .published(parse_date(published))
        .translator(translator or None)
        .summary(summary or None)
        .build()
    )


def _request_location(request: Request, **params: Optional[int]) -> str:
    """
    Request URL carrying only the query parameters that were supplied.

    The path is percent-encoded so the header stays ASCII.
    """
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return str(request.url.replace(path=quote(request.url.path), query=query))


def _book_location(request: Request, isbn: str) -> str:
    return str(request.url_for("get_book", isbn=isbn))


def _list_response(books: list[Book], location: str) -> Response:
    if not books:
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Location": location})
    return JSONResponse(
        content=[b.model_dump(mode="json") for b in books],
        headers={"Location": location},
    )


def _create(book: Book, request: Request, store: BookStore) -> JSONResponse:
    """Validate and insert a book. 400 if invalid, 409 if the ISBN is taken."""
    violations = validate_book(book)
    if violations:
        raise BookValidationError(violations)

    location = _book_location(request, book.isbn)
    try:
        store.add_book(book)
    except ValueError:
        logger.debug("Can not create book, ISBN already in repository", isbn=book.isbn)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Book with isbn '{book.isbn}' already exists",
            headers={"Location": location},
        ) from None

    logger.debug("Book created", isbn=book.isbn)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=book.model_dump(mode="json"),
        headers={"Location": location},
    )


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    """Liveness probe for the resource."""
    return "Pong!"


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Book, responses=VALIDATION_RESPONSES)
async def create_book(
    book: Book,
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Response:
    """
    Create a book.

    Responds 201 with a Location header pointing at the new book, or 409 if a
    book with the same ISBN already exists.
    """
    return _create(book, request, store)


@router.post(
    "/post-with-formparam",
    status_code=status.HTTP_201_CREATED,
    response_model=Book,
    responses=VALIDATION_RESPONSES,
)
async def post_with_form_params(
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
    isbn: Annotated[Optional[str], Form()] = None,
    title: Annotated[Optional[str], Form()] = None,
    author: Annotated[Optional[str], Form()] = None,
    published: Annotated[Optional[str], Form()] = None,
    translator: Annotated[Optional[str], Form()] = None,
    summary: Annotated[Optional[str], Form()] = None,
) -> Response:
    """Create a book from individual form fields."""
    logger.debug("POST with form params")
    book = _form_book(
        isbn=isbn,
        title=title,
        author=author,
        published=published,
        translator=translator,
        summary=summary,
    )
    return _create(book, request, store)


@router.post(
    "/post-with-beanparam",
    status_code=status.HTTP_201_CREATED,
    response_model=Book,
    responses=VALIDATION_RESPONSES,
)
async def post_with_bean_params(
    params: Annotated[BookFormParams, Depends()],
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Response:
    """Create a book from form fields gathered into a parameter object."""
    logger.debug("POST with bean params")
    return _create(params.to_book(), request, store)


@router.put("", response_model=Book, responses=VALIDATION_RESPONSES)
async def update_book(
    book: Book,
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Book:
    """Replace an existing book. 404 if no book has the given ISBN."""
    violations = validate_book(book)
    if violations:
        raise BookValidationError(violations)

    if not store.update_book(book):
        logger.debug("Could not update book, no such book in repository", isbn=book.isbn)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with isbn '{book.isbn}' not found",
            headers={"Location": _request_location(request)},
        )

    logger.debug("Book updated", isbn=book.isbn)
    return book


@router.get("/unhandeled-exception")
async def unhandled_exception(request: Request) -> Response:
    """Always fails. Surfaces as 500."""
    logger.debug("Raising unhandled exception", url=str(request.url))
    raise RuntimeError("Illegal state exception thrown")


@router.get("/null-result", response_model=Book)
@non_null("Return NULL not allowed")
async def null_result() -> Optional[Book]:
    """Returns None in spite of its non-null contract. Surfaces as 500."""
    return None


@router.post(
    "/entity-bean-validation-exception",
    status_code=status.HTTP_201_CREATED,
    response_model=Book,
    responses=VALIDATION_RESPONSES,
)
async def entity_validation(book: Book, request: Request) -> Response:
    """Echo a book whose body passed validation. Nothing is stored."""
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=book.model_dump(mode="json"),
        headers={"Location": _book_location(request, book.isbn)},
    )


@router.get(
    "/constraint-bean-validation-exception/{isbn}",
    response_model=Book,
    responses=VALIDATION_RESPONSES,
)
async def constraint_validation(
    isbn: IsbnPath,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Response | Book:
    """Look up a validated ISBN. A miss is returned as is, an empty 204."""
    book = store.find_book(isbn)
    if book is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return book


@router.get("/publisher/{name}", response_model=list[Book])
async def books_by_publisher(
    name: str,
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Response:
    """List books from one publisher. 204 if there are none."""
    books = store.get_books_by_publisher(name)
    return _list_response(books, _request_location(request))


@router.get("", response_model=list[Book], responses=VALIDATION_RESPONSES)
async def list_books(
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
    offset: Optional[int] = Query(default=None, ge=0, description="Index of the first book"),
    limit: Optional[int] = Query(default=None, ge=0, description="Maximum number of books"),
) -> Response:
    """
    List books a page at a time.

    Without parameters every book is returned. An empty page answers 204.
    Both answers carry a Location header echoing the applied parameters.
    """
    books = store.get_all_books(offset, limit)
    return _list_response(books, _request_location(request, offset=offset, limit=limit))


@router.get("/{isbn}", response_model=Book, responses=VALIDATION_RESPONSES)
async def get_book(
    isbn: IsbnPath,
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Book:
    """Get a book by ISBN."""
    book = store.find_book(isbn)
    if book is None:
        logger.debug("Book not found", isbn=isbn)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with isbn '{isbn}' not found",
            headers={"Location": _request_location(request)},
        )
    return book


@router.delete("/{isbn}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    isbn: str,
    request: Request,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Response:
    """Delete a book. 404 with a plain text message if it does not exist."""
    if not store.remove_book(isbn):
        logger.debug("Book not found", isbn=isbn)
        return PlainTextResponse(
            f"Book with isbn: '{isbn}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            headers={"Location": _request_location(request)},
        )
    logger.debug("Book deleted", isbn=isbn)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
