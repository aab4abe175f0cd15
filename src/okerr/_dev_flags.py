"""Internal helpers for opt-in behavior toggles.

This module stays minimal on purpose. It centralizes how environment toggles
are read so their semantics stay consistent across the codebase.
"""

from __future__ import annotations

import os

__all__ = ["STRICT_UNCHECKED_ENV", "strict_unchecked_enabled"]

STRICT_UNCHECKED_ENV = "OKERR_STRICT_UNCHECKED"


def strict_unchecked_enabled(*, override: bool | None = None) -> bool:
    """Return True when unchecked accessors should raise on a variant mismatch.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``OKERR_STRICT_UNCHECKED`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(STRICT_UNCHECKED_ENV) == "1"
