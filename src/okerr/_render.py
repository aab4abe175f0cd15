"""Stringification used in unwrap failure messages.

Two renderings exist and each accessor uses exactly one of them:

- ``render`` backs ``unwrap``/``unwrap_err``: compact JSON via
  ``pydantic_core.to_json``, so strings keep their quotes and containers
  show their structure.
- ``display`` backs ``expect``/``expect_err``: the plain ``str()`` form.

Exceptions read as ``TypeName: message`` in both.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import to_json

__all__ = ["display", "render"]


def describe_exception(exc: BaseException) -> str:
    """Return ``TypeName: message``, or just ``TypeName`` for an empty message."""
    name = type(exc).__name__
    message = str(exc)
    return f"{name}: {message}" if message else name


def _fallback(obj: Any) -> str:
    if isinstance(obj, BaseException):
        return describe_exception(obj)
    return repr(obj)


def render(obj: Any) -> str:
    """Return the structured rendering of a Result payload."""
    if isinstance(obj, BaseException):
        return describe_exception(obj)
    try:
        return to_json(obj, fallback=_fallback).decode("utf-8")
    except ValueError:
        # Circular references and similar serializer rejections
        return repr(obj)


def display(obj: Any) -> str:
    """Return the human-readable rendering of a Result payload."""
    if isinstance(obj, BaseException):
        return describe_exception(obj)
    try:
        return str(obj)
    except Exception:
        # A broken __str__ must not mask the UnwrapError being built
        return repr(obj)
