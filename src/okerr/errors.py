"""Exception hierarchy for okerr."""

from __future__ import annotations

from typing import Any


class OkErrError(Exception):
    """Base exception for all okerr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(OkErrError, ValueError):
    """A checked accessor was called on the wrong variant.

    This signals a programmer error, not a domain failure: the caller assumed
    a variant without inspecting the Result first. ``payload`` is the value or
    error the Result actually held.
    """

    def __init__(
        self,
        message: str,
        *,
        payload: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.payload = payload
