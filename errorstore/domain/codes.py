"""Baseline errors pre-registered by every registry."""

from __future__ import annotations

from dataclasses import dataclass

from errorstore.errors import (
    FORBIDDEN,
    INTERNAL_SERVER_ERROR,
    UNAUTHORIZED,
    UNKNOWN_ERROR,
)


@dataclass(frozen=True, slots=True)
class BaselineError:
    """One row of the baseline table.

    The name is part of the row so registries never need to look it up
    from the constant that defines the code.
    """

    code: int
    name: str
    http_status: int
    message: str


BASELINE_ERRORS: tuple[BaselineError, ...] = (
    BaselineError(UNKNOWN_ERROR, "UNKNOWN_ERROR", 500, "An unknown error occurred."),
    BaselineError(INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", 500, "An internal error occurred"),
    BaselineError(FORBIDDEN, "FORBIDDEN", 403, "You are not allowed to perform this action."),
    BaselineError(UNAUTHORIZED, "UNAUTHORIZED", 401, "Authentication is required."),
)

# Codes allowed to collide during a merge; the incoming entry wins.
BASELINE_CODES: frozenset[int] = frozenset(row.code for row in BASELINE_ERRORS)
