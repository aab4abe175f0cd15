"""okerr: explicit success/failure values instead of exceptions.

Public API:
    - Result: The container type, generic over value ``T`` and error ``E``
    - Ok / Err: Factories for the two variants
    - from_call / from_awaitable: Capture a call's or awaitable's outcome
    - UnwrapError: Raised when a checked accessor hits the wrong variant
"""

from __future__ import annotations

import logging

from okerr.errors import OkErrError, UnwrapError
from okerr.result import Err, Ok, Result, ResultKind, from_awaitable, from_call

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("okerr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("okerr").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Ok",
    "OkErrError",
    "Result",
    "ResultKind",
    "UnwrapError",
    "__version__",
    "from_awaitable",
    "from_call",
]
