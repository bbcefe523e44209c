"""Error Handlers — global exception handlers for the Joyas API.

Invariants:
    - JoyasError → its own status and {"error": message}
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500 {"error": "Algo salió mal."}, never leaks internals

Design Decisions:
    - Three-layer handler: domain (JoyasError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app factory stays a short list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from joyas_api.core.errors import (
    INVALID_PARAMETERS, UNHANDLED_FAILURE, JoyasError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_joyas_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_joyas_error_handler(app: FastAPI) -> None:

    @app.exception_handler(JoyasError)
    async def joyas_error_handler(request: Request, exc: JoyasError):
        """Handle all Joyas domain/infrastructure errors."""
        logger.error(
            f"JoyasError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle query-parameter validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Error no manejado en {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": UNHANDLED_FAILURE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": INVALID_PARAMETERS,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
