"""
Exception handlers for FastAPI applications embedding neo-access.

Maps the library's exception hierarchy onto JSON error responses using the
HTTP status mapping of :mod:`neo_access.core.exceptions`.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import NeoAccessError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register neo-access exception handlers on an application.

    Args:
        app: FastAPI application instance
    """
    @app.exception_handler(NeoAccessError)
    async def neo_access_exception_handler(request: Request, exc: NeoAccessError):
        """Handle neo-access exceptions."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content=create_error_response(exc),
        )
