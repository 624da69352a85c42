"""Error descriptor: one registered error and how it is presented."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Sequence, Union

# A fixed string, a list of strings, or a formatter taking any arguments.
Message = Union[str, list[str], Callable[..., str]]
Logger = Union[logging.Logger, logging.LoggerAdapter]


def _is_formatter(message: Message | None) -> bool:
    return callable(message)


def _resolve(message: Message | None, args: Sequence[Any]) -> str | list[str] | None:
    if _is_formatter(message):
        return message(*args)
    return message


def _client_safe(message: Message | None) -> str | list[str]:
    """Formatters and missing messages become empty strings."""
    if message is None or _is_formatter(message):
        return ""
    return message


def _flatten(message: Message | None) -> str:
    message = _client_safe(message)
    if isinstance(message, list):
        return ",".join(message)
    return message


@dataclass(slots=True)
class ErrorDescriptor:
    """Describes one error condition and its presentation.

    ``debug_message`` is for developers and must never be shown to end users.
    ``user_message`` is end-user facing, ``admin_message`` is optional and
    aimed at administrators. A non-None ``logger`` means the error is logged
    every time a registry surfaces it.
    """

    code: int | str
    name: str
    http_status: int
    debug_message: Message
    user_message: Message
    admin_message: Message | None = None
    data: Any = None
    logger: Logger | None = None

    def set_admin_message(self, message: Message) -> ErrorDescriptor:
        self.admin_message = message
        return self

    def set_data(self, data: Any) -> ErrorDescriptor:
        self.data = data
        return self

    def set_logger(self, logger: Logger) -> ErrorDescriptor:
        self.logger = logger
        return self

    @property
    def is_resolved(self) -> bool:
        """True when no message field is still a formatter."""
        return not any(
            _is_formatter(message)
            for message in (self.debug_message, self.user_message, self.admin_message)
        )

    def resolve(
        self,
        debug_args: Sequence[Any] = (),
        user_args: Sequence[Any] = (),
        admin_args: Sequence[Any] = (),
    ) -> ErrorDescriptor:
        """
        Return a copy with every formatter invoked with its argument list.

        Literal messages (strings and lists) are carried over unchanged.
        The descriptor itself is left untouched so it can be resolved again
        with different arguments.
        """
        return replace(
            self,
            debug_message=_resolve(self.debug_message, debug_args),
            user_message=_resolve(self.user_message, user_args),
            admin_message=_resolve(self.admin_message, admin_args),
        )

    def serialize(self) -> dict[str, Any]:
        """Client-safe projection, consumed by front-end error handling code."""
        return {
            "errorcode": self.code,
            "errorname": self.name,
            "debug": _client_safe(self.debug_message),
            "message": _client_safe(self.user_message),
            "adminmsg": _client_safe(self.admin_message),
            "data": self.data,
        }

    def stringify(self) -> str:
        s = (
            f"(Code: {self.code}) (Name: {self.name}) "
            f"[DebugMessage]: {_flatten(self.debug_message)} "
            f"[UserMessage]: {_flatten(self.user_message)}"
        )
        admin_message = _flatten(self.admin_message)
        if admin_message:
            s += f" [AdminMessage]: {admin_message}"
        return s

    def __str__(self) -> str:
        return self.stringify()
