"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from bookshelf.api.errors import register_exception_handlers
from bookshelf.api.routes import books_router, health_router
from bookshelf.config import get_settings
from bookshelf.core.books.seed import seed_books
from bookshelf.core.books.store import BookStore
from bookshelf.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(log_level=settings.log_level, log_format=settings.log_format, debug=settings.debug)
    app.state.book_store = BookStore(seed_books() if settings.seed_enabled else ())
    logger.info("Book store initialized", books=app.state.book_store.count_books())
    yield
    logger.info("Shutting down", service=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="REST resource for managing books keyed by ISBN",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, endpoint="/metrics")

register_exception_handlers(app)

# Include routers
app.include_router(health_router)
app.include_router(books_router, prefix=settings.api_prefix)


@app.get("/")
async def api_info():
    """API information endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
        "health": "/health",
        "books": f"{settings.api_prefix}/books",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
