"""
Error handlers for the directory API.

Maps the directory error taxonomy to HTTP responses.
No driver messages or stack traces reach the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from staff_directory.domain.errors import BadRequest, InternalError, NotFound

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register directory error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(NotFound)
    async def handle_not_found(request: Request, exc: NotFound) -> JSONResponse:
        logger.debug("Not found: %s", request.url.path)
        return _error_response(status.HTTP_404_NOT_FOUND, NotFound.message)

    @app.exception_handler(BadRequest)
    async def handle_bad_request(request: Request, exc: BadRequest) -> JSONResponse:
        logger.info("Bad request on %s: %s", request.url.path, exc.message)
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(InternalError)
    async def handle_internal(request: Request, exc: InternalError) -> JSONResponse:
        # Cause was already logged at the repository boundary
        logger.error("Internal error on %s", request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.message)
