"""
FastAPI exception handlers.

Catalog errors become JSON error bodies; internals never reach the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import AuthorStoreError, CatalogError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthorStoreError)
    async def handle_author_store(_request: Request, exc: AuthorStoreError) -> JSONResponse:
        logger.error("Author store error: %s", exc)
        return _error_response(503, "Author store unavailable")

    @app.exception_handler(CatalogError)
    async def handle_catalog(_request: Request, exc: CatalogError) -> JSONResponse:
        logger.error("Unhandled catalog error: %s", exc)
        return _error_response(500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for anything else. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(500, "Internal server error")
