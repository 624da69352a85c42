"""Global exception handlers that map registered error codes to HTTP responses."""

import logging
from typing import Any, Sequence

from fastapi import Request
from fastapi.responses import JSONResponse

from errorstore.core.config import settings
from errorstore.errors import INTERNAL_SERVER_ERROR, DuplicateCodeError, ErrorStoreError
from errorstore.schemas.error import ErrorResponse, RestResponse

logger = logging.getLogger(__name__)


class RegisteredError(ErrorStoreError):
    """Raised by request handlers to answer with a registered error code."""

    def __init__(
        self,
        code: int | str,
        debug_args: Sequence[Any] = (),
        user_args: Sequence[Any] = (),
        admin_args: Sequence[Any] = (),
    ):
        self.code = code
        self.debug_args = debug_args
        self.user_args = user_args
        self.admin_args = admin_args
        super().__init__(f"Error code {code}")


def _error_response(result: RestResponse) -> JSONResponse:
    """Return a standardized error response for a resolved descriptor."""
    body = ErrorResponse(**result.response)
    return JSONResponse(status_code=result.status_code, content=body.model_dump(mode="json"))


def registered_error_handler(request: Request, exc: RegisteredError) -> JSONResponse:
    registry = request.app.state.error_registry
    result = registry.respond(
        exc.code,
        exc.debug_args,
        exc.user_args,
        exc.admin_args,
        include_debug=settings.expose_debug,
    )
    return _error_response(result)


def duplicate_code_error_handler(request: Request, exc: DuplicateCodeError) -> JSONResponse:
    # Registration happens at startup; reaching a request means a handler registered lazily.
    logger.error("Duplicate error code registered while serving a request: %s", exc, exc_info=exc)
    registry = request.app.state.error_registry
    result = registry.respond(INTERNAL_SERVER_ERROR, include_debug=settings.expose_debug)
    return _error_response(result)


def register_exception_handlers(app):
    """Register errorstore exception handlers on the FastAPI app."""
    app.add_exception_handler(RegisteredError, registered_error_handler)
    app.add_exception_handler(DuplicateCodeError, duplicate_code_error_handler)
