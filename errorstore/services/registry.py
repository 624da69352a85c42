"""Error registry: codes mapped to descriptors, looked up per error occurrence."""

import logging
import threading
from typing import Any, Callable, Iterator, Sequence

from errorstore.core.config import settings
from errorstore.domain.codes import BASELINE_CODES, BASELINE_ERRORS
from errorstore.domain.descriptor import ErrorDescriptor, Message
from errorstore.errors import (
    UNKNOWN_ERROR,
    DuplicateCodeError,
    DuplicateNameError,
    RegistryError,
)
from errorstore.schemas.error import RestResponse

logger = logging.getLogger(__name__)

StatusEmitter = Callable[[int], None]
Populate = Callable[["ErrorRegistry"], None]


def _identity(message: str) -> str:
    return message


class ErrorRegistry:
    """
    Owns the mapping from error code to ErrorDescriptor.

    Every registry starts with the baseline errors (UNKNOWN_ERROR,
    INTERNAL_SERVER_ERROR, FORBIDDEN, UNAUTHORIZED). Domain errors are added
    by the ``populate`` callback, which the owning application runs once
    through ``populate()`` (or ``build_registry``).

    Registration and merging must be finished before requests are served;
    ``lookup`` only reads the codemap.
    """

    def __init__(
        self,
        populate: Populate | None = None,
        *,
        status_emitter: StatusEmitter | None = None,
        emit_http_status: bool = True,
        translate: Callable[[str], str] = _identity,
    ):
        self._codemap: dict[int | str, ErrorDescriptor] = {}
        self._populate = populate
        self._populated = False
        self._default_emit = emit_http_status
        self._emit_http_status = emit_http_status
        self._flag_lock = threading.Lock()
        self.status_emitter = status_emitter
        self.translate = translate

        for row in BASELINE_ERRORS:
            message = translate(row.message)
            self.register(
                ErrorDescriptor(row.code, row.name, row.http_status, message, message)
            )

    def __contains__(self, code: object) -> bool:
        return code in self._codemap

    def __len__(self) -> int:
        return len(self._codemap)

    def __iter__(self) -> Iterator[int | str]:
        return iter(self._codemap)

    def populate(self) -> None:
        """
        Register the application's domain errors.

        Raises:
            RegistryError: If no populate callback was given or it already ran.
        """
        if self._populate is None:
            raise RegistryError("No populate callback was supplied to this registry")
        if self._populated:
            raise RegistryError("Registry has already been populated")
        self._populate(self)
        self._populated = True
        logger.debug("Registry populated with %d error codes", len(self._codemap))

    def register(self, descriptor: ErrorDescriptor) -> ErrorDescriptor:
        """
        Add a descriptor to the codemap.

        Raises:
            DuplicateCodeError: If the code is already registered.
            DuplicateNameError: If another code already uses the name.
        """
        if descriptor.code in self._codemap:
            raise DuplicateCodeError(descriptor.code)
        if any(existing.name == descriptor.name for existing in self._codemap.values()):
            raise DuplicateNameError(descriptor.name)
        self._codemap[descriptor.code] = descriptor
        return descriptor

    def add_error(
        self,
        code: int | str,
        name: str,
        http_status: int,
        debug_message: Message,
        user_message: Message,
        admin_message: Message | None = None,
    ) -> ErrorDescriptor:
        """Build and register a descriptor; returns it so optional setters can be chained."""
        return self.register(
            ErrorDescriptor(
                code,
                name,
                http_status,
                debug_message,
                user_message,
                admin_message=admin_message,
            )
        )

    def get_error_code_map(self) -> dict[int | str, ErrorDescriptor]:
        return dict(self._codemap)

    def default_error(self, code: Any) -> ErrorDescriptor:
        """Generic descriptor returned for codes that were never registered."""
        return ErrorDescriptor(
            UNKNOWN_ERROR,
            "UNKNOWN_ERROR",
            500,
            self.translate("An error with the code {code} does not exist.").replace(
                "{code}", str(code)
            ),
            self.translate("An internal error occurred"),
        )

    def suppress_http_status(self) -> None:
        """Skip the HTTP status side effect for the next lookup only."""
        with self._flag_lock:
            self._emit_http_status = False

    def _take_emit_flag(self) -> bool:
        with self._flag_lock:
            emit = self._emit_http_status
            self._emit_http_status = self._default_emit
        return emit

    def lookup(
        self,
        code: int | str,
        debug_args: Sequence[Any] = (),
        user_args: Sequence[Any] = (),
        admin_args: Sequence[Any] = (),
        *,
        emit_http_status: bool | None = None,
        status_emitter: StatusEmitter | None = None,
    ) -> ErrorDescriptor:
        """
        Resolve the descriptor registered under ``code``.

        Formatter messages are called with the matching argument list.
        Unless suppressed, the descriptor's HTTP status is handed to
        ``status_emitter`` (falling back to the registry's emitter).
        An explicit ``emit_http_status`` wins over the one-shot flag and
        leaves a pending suppression in place; prefer it when the registry is
        shared across requests.

        Unknown codes never raise: the generic UNKNOWN_ERROR descriptor is
        resolved instead and its 500 status is emitted like any other.
        """
        descriptor = self._codemap.get(code)
        if descriptor is None:
            logger.warning("Lookup of unregistered error code %r", code)
            resolved = self.default_error(code)
        else:
            resolved = descriptor.resolve(debug_args, user_args, admin_args)

        if emit_http_status is None:
            emit = self._take_emit_flag()
        else:
            emit = emit_http_status
        emitter = status_emitter or self.status_emitter
        if emit and emitter is not None:
            emitter(resolved.http_status)

        if resolved.logger is not None:
            level = logging.ERROR if resolved.http_status >= 500 else logging.WARNING
            resolved.logger.log(level, "%s", resolved, extra={"error": resolved.serialize()})

        return resolved

    def respond(
        self,
        code: int | str,
        debug_args: Sequence[Any] = (),
        user_args: Sequence[Any] = (),
        admin_args: Sequence[Any] = (),
        *,
        include_debug: bool = True,
    ) -> RestResponse:
        """Resolve ``code`` into a response body and status without emitting the status."""
        resolved = self.lookup(
            code, debug_args, user_args, admin_args, emit_http_status=False
        )
        body = resolved.serialize()
        if not include_debug:
            body["debug"] = ""
        return RestResponse(response=body, status_code=resolved.http_status)

    def merge(self, other: "ErrorRegistry", disallow_duplicates: bool = True) -> None:
        """
        Import every descriptor of ``other``.

        Baseline codes may always collide and are overwritten. Any other
        collision raises before the codemap is touched, unless
        ``disallow_duplicates`` is False, in which case ``other`` wins.

        Raises:
            DuplicateCodeError: Listing every colliding non-baseline code.
            DuplicateNameError: If the merged codemap would give one name to two codes.
        """
        incoming = other.get_error_code_map()
        if disallow_duplicates:
            collisions = [
                code
                for code in incoming
                if code in self._codemap and code not in BASELINE_CODES
            ]
            if collisions:
                raise DuplicateCodeError(*collisions)
        merged = {**self._codemap, **incoming}
        owners = {}
        clashes = []
        for code, descriptor in merged.items():
            owner = owners.setdefault(descriptor.name, code)
            if owner != code and descriptor.name not in clashes:
                clashes.append(descriptor.name)
        if clashes:
            raise DuplicateNameError(*clashes)
        self._codemap = merged

    def export_for_client(self) -> dict[str, dict]:
        """
        Return ``errorMetaMap`` and ``errorCodes`` for the front-end library.

        The shape is a wire contract and is passed as-is to client scripts.
        """
        error_meta_map = {}
        error_codes = {}
        for code, descriptor in self._codemap.items():
            error_meta_map[code] = descriptor.serialize()
            error_codes[descriptor.name] = code
        return {
            "errorMetaMap": error_meta_map,
            "errorCodes": error_codes,
        }


def build_registry(populate: Populate | None = None, **kwargs) -> ErrorRegistry:
    """
    Create a registry and run its populate callback once.

    ``emit_http_status`` defaults to the ERRORSTORE_EMIT_HTTP_STATUS setting.
    """
    kwargs.setdefault("emit_http_status", settings.emit_http_status)
    registry = ErrorRegistry(populate, **kwargs)
    if populate is not None:
        registry.populate()
    return registry
