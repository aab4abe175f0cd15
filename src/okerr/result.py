"""Result type for explicit, exception-free error handling.

A ``Result`` is either ``Ok`` (holding a value) or ``Err`` (holding an
error). Operations that can fail return one instead of raising, and callers
inspect or transform it:

    def parse_port(raw: str) -> Result[int, ValueError]:
        if not raw.isdigit():
            return Err(ValueError(f"not a port: {raw!r}"))
        return Ok(int(raw))

    port = parse_port(raw).map(lambda p: p + 1).unwrap_or(8080)

The variant is fixed at construction. Every operation is a pure query or
returns a new Result; nothing mutates an existing instance.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
from typing import TYPE_CHECKING, Any, cast

from okerr import _render
from okerr._dev_flags import strict_unchecked_enabled
from okerr.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["Err", "Ok", "Result", "ResultKind", "from_awaitable", "from_call"]

logger = logging.getLogger(__name__)

_Catchable = type[BaseException] | tuple[type[BaseException], ...]


class ResultKind(enum.Enum):
    """Tag identifying which variant a Result holds."""

    OK = "Ok"
    ERR = "Err"


@dataclass(frozen=True, slots=True, repr=False)
class Result[T, E]:
    """Either a success value of type ``T`` or an error of type ``E``.

    Build instances with ``Ok``/``Err`` rather than calling the constructor.
    Only the active payload is stored, so an Err can be handed back under any
    value type (and an Ok under any error type) without copying.
    """

    kind: ResultKind
    _payload: Any

    def __post_init__(self) -> None:
        """Reject tags other than the two known variants."""
        if not isinstance(self.kind, ResultKind):
            raise TypeError(f"Result kind must be a ResultKind, got {self.kind!r}")

    def __repr__(self) -> str:
        return f"{self.kind.value}({self._payload!r})"

    # --- Construction ---

    @staticmethod
    def Ok[V, X](value: V) -> Result[V, X]:  # noqa: N802
        """Wrap ``value`` in a success Result."""
        return Result(ResultKind.OK, value)

    @staticmethod
    def Err[V, X](error: X) -> Result[V, X]:  # noqa: N802
        """Wrap ``error`` in a failure Result."""
        return Result(ResultKind.ERR, error)

    @staticmethod
    def from_call[V](
        fn: Callable[..., V],
        /,
        *args: Any,
        catch: _Catchable = Exception,
        **kwargs: Any,
    ) -> Result[V, BaseException]:
        """Call ``fn`` once and capture its outcome.

        A return value becomes ``Ok``. An exception matching ``catch`` becomes
        ``Err``; anything else propagates.
        """
        try:
            value = fn(*args, **kwargs)
        except catch as exc:
            logger.debug("Captured %s from %r as Err", type(exc).__name__, fn)
            return Result(ResultKind.ERR, exc)
        return Result(ResultKind.OK, value)

    @staticmethod
    async def from_awaitable[V](
        awaitable: Awaitable[V],
        *,
        catch: _Catchable = Exception,
    ) -> Result[V, BaseException]:
        """Await one outcome and capture it as a Result.

        Completion maps to ``Ok`` and a raised exception matching ``catch``
        maps to ``Err``. Cancellation is a ``BaseException`` and is never
        captured by the default ``catch``.

        With the default ``catch`` no ordinary exception escapes this call.
        Narrowing ``catch`` opts out of that guarantee: exceptions outside
        it propagate to the caller unchanged.
        """
        try:
            value = await awaitable
        except catch as exc:
            logger.debug("Captured %s from awaitable as Err", type(exc).__name__)
            return Result(ResultKind.ERR, exc)
        return Result(ResultKind.OK, value)

    # --- Inspection ---

    def is_ok(self) -> bool:
        """Return True if this is an Ok."""
        return self.kind is ResultKind.OK

    def is_err(self) -> bool:
        """Return True if this is an Err."""
        return self.kind is ResultKind.ERR

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if this is an Ok whose value satisfies ``predicate``."""
        return self.kind is ResultKind.OK and bool(predicate(self._payload))

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if this is an Err whose error satisfies ``predicate``."""
        return self.kind is ResultKind.ERR and bool(predicate(self._payload))

    def ok(self) -> T | None:
        """Return the value, or None for an Err."""
        if self.kind is ResultKind.ERR:
            return None
        return cast("T", self._payload)

    def err(self) -> E | None:
        """Return the error, or None for an Ok."""
        if self.kind is ResultKind.ERR:
            return cast("E", self._payload)
        return None

    # --- Checked unwrapping ---

    def unwrap(self) -> T:
        """Return the value.

        Raises:
            UnwrapError: If this is an Err. The message embeds the rendered
                error.
        """
        if self.kind is ResultKind.ERR:
            raise UnwrapError(
                f"Called Result.unwrap() on an Err value: {_render.render(self._payload)}",
                payload=self._payload,
                hint="Check is_ok() first, or use unwrap_or()/unwrap_or_else().",
            )
        return cast("T", self._payload)

    def unwrap_err(self) -> E:
        """Return the error.

        Raises:
            UnwrapError: If this is an Ok. The message embeds the rendered
                value.
        """
        if self.kind is ResultKind.OK:
            raise UnwrapError(
                f"Called Result.unwrap_err() on an Ok value: {_render.render(self._payload)}",
                payload=self._payload,
                hint="Check is_err() first, or use err().",
            )
        return cast("E", self._payload)

    def expect(self, message: str) -> T:
        """Return the value, raising ``UnwrapError("<message>: <error>")`` on Err."""
        if self.kind is ResultKind.ERR:
            raise UnwrapError(
                f"{message}: {_render.display(self._payload)}", payload=self._payload
            )
        return cast("T", self._payload)

    def expect_err(self, message: str) -> E:
        """Return the error, raising ``UnwrapError("<message>: <value>")`` on Ok."""
        if self.kind is ResultKind.OK:
            raise UnwrapError(
                f"{message}: {_render.display(self._payload)}", payload=self._payload
            )
        return cast("E", self._payload)

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` for an Err."""
        if self.kind is ResultKind.ERR:
            return default
        return cast("T", self._payload)

    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        """Return the value, or ``fallback(error)`` for an Err."""
        if self.kind is ResultKind.ERR:
            return fallback(self._payload)
        return cast("T", self._payload)

    # --- Unchecked unwrapping ---

    def unwrap_unchecked(self, *, strict: bool | None = None) -> T | None:
        """Return the value without checking the variant.

        On an Err this returns None instead of raising. Set ``strict=True``, or
        ``OKERR_STRICT_UNCHECKED=1`` in the environment, to raise
        ``UnwrapError`` instead.
        """
        if self.kind is ResultKind.OK:
            return cast("T", self._payload)
        if strict_unchecked_enabled(override=strict):
            raise UnwrapError(
                "Called Result.unwrap_unchecked() on an Err value: "
                f"{_render.render(self._payload)}",
                payload=self._payload,
            )
        logger.debug("unwrap_unchecked() on an Err; returning None")
        return None

    def unwrap_err_unchecked(self, *, strict: bool | None = None) -> E | None:
        """Return the error without checking the variant.

        On an Ok this returns None, or raises ``UnwrapError`` in strict mode.
        """
        if self.kind is ResultKind.ERR:
            return cast("E", self._payload)
        if strict_unchecked_enabled(override=strict):
            raise UnwrapError(
                "Called Result.unwrap_err_unchecked() on an Ok value: "
                f"{_render.render(self._payload)}",
                payload=self._payload,
            )
        logger.debug("unwrap_err_unchecked() on an Ok; returning None")
        return None

    # --- Combinators ---

    def or_(self, alternative: Result[T, E]) -> Result[T, E]:
        """Return self if Ok, otherwise ``alternative``."""
        if self.kind is ResultKind.ERR:
            return alternative
        return self

    def or_else(self, op: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Return self if Ok, otherwise ``op(error)``."""
        if self.kind is ResultKind.ERR:
            return op(self._payload)
        return self

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if Ok, otherwise this Err."""
        if self.kind is ResultKind.ERR:
            return cast("Result[U, E]", self)
        return other

    def and_then[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Return ``op(value)`` if Ok, otherwise this Err."""
        if self.kind is ResultKind.ERR:
            return cast("Result[U, E]", self)
        return op(self._payload)

    # --- Transformation ---

    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        """Apply ``op`` to an Ok value; an Err passes through untouched."""
        if self.kind is ResultKind.ERR:
            return cast("Result[U, E]", self)
        return Result(ResultKind.OK, op(self._payload))

    def map_or[U](self, default: U, op: Callable[[T], U]) -> U:
        """Return ``op(value)`` if Ok, otherwise ``default``."""
        if self.kind is ResultKind.ERR:
            return default
        return op(self._payload)

    def map_or_else[U](self, default_op: Callable[[E], U], op: Callable[[T], U]) -> U:
        """Return ``op(value)`` if Ok, otherwise ``default_op(error)``."""
        if self.kind is ResultKind.ERR:
            return default_op(self._payload)
        return op(self._payload)

    def map_err[F](self, op: Callable[[E], F]) -> Result[T, F]:
        """Apply ``op`` to an Err error; an Ok passes through untouched."""
        if self.kind is ResultKind.ERR:
            return Result(ResultKind.ERR, op(self._payload))
        return cast("Result[T, F]", self)


Ok = Result.Ok
Err = Result.Err
from_call = Result.from_call
from_awaitable = Result.from_awaitable
