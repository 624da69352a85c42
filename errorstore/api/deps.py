from typing import Any, Sequence

from fastapi import Depends, Request, Response

from errorstore.core.config import settings
from errorstore.services.registry import ErrorRegistry


def get_registry(request: Request) -> ErrorRegistry:
    """Registry attached to the application by create_app."""
    return request.app.state.error_registry


class ErrorResponder:
    """
    Resolves error codes for one request.

    The status of the current response is set through the registry's status
    emission hook, so the one-shot suppression applies as usual.
    """

    def __init__(self, registry: ErrorRegistry, response: Response):
        self.registry = registry
        self.response = response

    def _set_status(self, status_code: int) -> None:
        self.response.status_code = status_code

    def __call__(
        self,
        code: int | str,
        debug_args: Sequence[Any] = (),
        user_args: Sequence[Any] = (),
        admin_args: Sequence[Any] = (),
    ) -> dict[str, Any]:
        resolved = self.registry.lookup(
            code,
            debug_args,
            user_args,
            admin_args,
            status_emitter=self._set_status,
        )
        body = resolved.serialize()
        if not settings.expose_debug:
            body["debug"] = ""
        return body


def get_error_responder(
    response: Response,
    registry: ErrorRegistry = Depends(get_registry),
) -> ErrorResponder:
    return ErrorResponder(registry, response)
