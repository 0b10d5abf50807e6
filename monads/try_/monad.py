"""Try Monad

Outcome of a fallible computation:
- Success(value) - the computation returned normally
- Failure(error) - the computation raised, the exception is captured

Instances are immutable. Every combinator returns a Try (or a plain value),
never mutates the receiver."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from functools import wraps
from types import TracebackType

from kungfu import Error, Nothing, Ok, Option, Result, Some

from .._errors import PredicateFilterError, UnwrapError
from .._types import Consumer, ErrorType, Function, Predicate, Supplier
from ..logging import logger

def _capture[S](exc: Exception) -> Try[S]:
    logger().debug("captured `%s` into Failure: %s", type(exc).__name__, exc)
    return Failure(exc)

def _matches(error: Exception, error_type: ErrorType | None) -> bool:
    return error_type is None or isinstance(error, error_type)

def _expect_try[S](result: object, combinator: str) -> Try[S]:
    if isinstance(result, Try):
        return result
    return _capture(TypeError(f"{combinator} expected Try, got {type(result).__name__}"))

class Try[T]:
    """Try Monad.

    Construct with Try.of / Try.success / Try.failure, never directly.

    Capture policy:
    - of, map, flat_map, recover, flat_recover, or_else_try and lifted
      functions catch Exception and turn it into Failure
    - on_success / on_failure actions and filter predicates propagate
    """

    __slots__ = ()

    # Construction

    @staticmethod
    def of[S](supplier: Supplier[S], /) -> Try[S]:
        """
        Call supplier now and capture the outcome.

        A runnable (returns None) gives Try[None].

        Example:
            Try.of(lambda: int("42"))    # Success(value=42)
            Try.of(lambda: int("nope"))  # Failure(error=ValueError(...))
        """
        try:
            return Success(supplier())
        except Exception as exc:
            return _capture(exc)

    @staticmethod
    def success[S](value: S = None, /) -> Try[S]:  # type: ignore[assignment]
        """Successful Try. No argument gives the unit success Success(None)."""
        return Success(value)

    @staticmethod
    def failure[S](error: Exception | str, /) -> Try[S]:
        """Failed Try. A str message is wrapped in a new RuntimeError."""
        if isinstance(error, str):
            error = RuntimeError(error)
        return Failure(error)

    @staticmethod
    def lift[**P, R](func: Callable[P, R], /) -> Callable[P, Try[R]]:
        """
        Adapt func so that calling it returns a Try instead of raising.

        Same arity as func. Nothing runs until the lifted function is called.

        Example:
            parse = Try.lift(int)
            parse("42")    # Success(value=42)
            parse("nope")  # Failure(error=ValueError(...))
        """
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[R]:
            return Try.of(lambda: func(*args, **kwargs))

        return wrapper

    @staticmethod
    def lift_void[**P](func: Callable[P, object], /) -> Callable[P, Try[None]]:
        """Like lift, but the return value of func is discarded."""
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[None]:
            def run() -> None:
                func(*args, **kwargs)

            return Try.of(run)

        return wrapper

    @staticmethod
    def from_result[S](result: Result[S, typing.Any], /) -> Try[S]:
        """Convert kungfu Result. Non-exception errors are wrapped in RuntimeError."""
        match result:
            case Ok(value):
                return Success(value)
            case Error(error):
                if isinstance(error, Exception):
                    return Failure(error)
                return Failure(RuntimeError(error))

    # Inspection

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def __bool__(self) -> bool:
        return self.is_success()

    # Observation

    def on_success(self, action: Consumer[T], /) -> Try[T]:
        """Run action on the value if Success. Exceptions from action propagate."""
        match self:
            case Success(value):
                action(value)
            case Failure(_):
                pass
        return self

    @typing.overload
    def on_failure(self, action: Consumer[Exception], /) -> Try[T]: ...

    @typing.overload
    def on_failure[X: Exception](
        self,
        action: Consumer[X],
        /,
        *,
        error_type: type[X] | tuple[type[X], ...],
    ) -> Try[T]: ...

    def on_failure(
        self,
        action: Consumer[typing.Any],
        /,
        *,
        error_type: ErrorType | None = None,
    ) -> Try[T]:
        """
        Run action on the error if Failure (and error matches error_type).

        Exceptions from action propagate.
        """
        match self:
            case Failure(error) if _matches(error, error_type):
                action(error)
            case _:
                pass
        return self

    # Projections

    @typing.overload
    def contra_optional(self) -> Option[Exception]: ...

    @typing.overload
    def contra_optional[X: Exception](
        self,
        error_type: type[X] | tuple[type[X], ...],
        /,
    ) -> Option[X]: ...

    def contra_optional(self, error_type: ErrorType | None = None, /) -> Option[typing.Any]:
        """Some(error) if Failure (and error matches error_type), else Nothing."""
        match self:
            case Failure(error) if _matches(error, error_type):
                return Some(error)
            case _:
                return Nothing()

    def contra_map[S](self, fn: Function[Exception, S], /) -> Option[S]:
        """Some(fn(error)) if Failure, else Nothing."""
        match self:
            case Failure(error):
                return Some(fn(error))
            case _:
                return Nothing()

    def flat_contra_map[S](self, fn: Function[Exception, Option[S]], /) -> Option[S]:
        """fn(error) if Failure, else Nothing."""
        match self:
            case Failure(error):
                return fn(error)
            case _:
                return Nothing()

    def optional(self) -> Option[T]:
        """Some(value) if Success, else Nothing."""
        match self:
            case Success(value):
                return Some(value)
            case _:
                return Nothing()

    def stream(self) -> Iterator[T]:
        """Iterator over the value: one item for Success, none for Failure."""
        match self:
            case Success(value):
                yield value
            case Failure(_):
                return

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def to_result(self) -> Result[T, Exception]:
        """Convert to kungfu Result: Ok(value) / Error(error)."""
        match self:
            case Success(value):
                return Ok(value)
            case Failure(error):
                return Error(error)

    # Filtering

    def filter(self, predicate: Predicate[T], /) -> Try[T]:
        """
        Turn Success into Failure(PredicateFilterError) if predicate is false.

        Failure passes through untouched. Exceptions from predicate propagate.
        """
        match self:
            case Success(value) if not predicate(value):
                return Failure(PredicateFilterError())
            case _:
                return self

    # Extraction

    def get(self) -> T:
        """
        Value, or raise.

        A RuntimeError is raised as is, anything else is wrapped in
        UnwrapError with the original error as __cause__. The error is
        raised with the traceback it was captured with, so repeated calls
        do not stack frames onto it.
        """
        match self:
            case Success(value):
                return value
            case Failure(error, traceback=tb):
                if isinstance(error, RuntimeError):
                    raise error.with_traceback(tb)
                raise UnwrapError(error) from error.with_traceback(tb)

    def get_checked(self) -> T:
        """Value, or raise the captured error unwrapped (with its captured traceback)."""
        match self:
            case Success(value):
                return value
            case Failure(error, traceback=tb):
                raise error.with_traceback(tb)

    def or_else(self, default: T, /) -> T:
        match self:
            case Success(value):
                return value
            case Failure(_):
                return default

    def or_else_get(self, supplier: Supplier[T], /) -> T:
        match self:
            case Success(value):
                return value
            case Failure(_):
                return supplier()

    def or_else_raise(self, error: Exception | Supplier[Exception] | None = None, /) -> T:
        """
        Value, or raise.

        Without arguments this is get(). With an exception (or a zero-arg
        factory producing one) that exception replaces the captured error,
        which is kept as __cause__.
        """
        match self:
            case Success(value):
                return value
            case Failure(cause):
                if error is None:
                    return self.get()
                raise (error if isinstance(error, Exception) else error()) from cause

    def or_else_raise_checked(self) -> T:
        return self.get_checked()

    def or_else_try(self, supplier: Supplier[T], /) -> Try[T]:
        """Self if Success, else a fresh Try.of(supplier)."""
        match self:
            case Success(_):
                return self
            case Failure(_):
                return Try.of(supplier)

    # Transformation

    def map[U](self, fn: Function[T, U], /) -> Try[U]:
        """Apply fn to the value, capturing what it raises. Failure short-circuits."""
        match self:
            case Success(value):
                return Try.of(lambda: fn(value))
            case Failure(error, traceback=tb):
                return Failure(error, traceback=tb)

    def flat_map[U](self, fn: Function[T, Try[U]], /) -> Try[U]:
        """
        Monadic bind. fn returns a Try; if it raises, that is captured.

        A non-Try result becomes Failure(TypeError).
        """
        match self:
            case Success(value):
                try:
                    return _expect_try(fn(value), "flat_map")
                except Exception as exc:
                    return _capture(exc)
            case Failure(error, traceback=tb):
                return Failure(error, traceback=tb)

    def recover(
        self,
        fn: Function[typing.Any, T],
        /,
        *,
        error_type: ErrorType | None = None,
    ) -> Try[T]:
        """Turn Failure (matching error_type) into Try.of(fn(error))."""
        match self:
            case Failure(error) if _matches(error, error_type):
                return Try.of(lambda: fn(error))
            case _:
                return self

    def flat_recover(
        self,
        fn: Function[typing.Any, Try[T]],
        /,
        *,
        error_type: ErrorType | None = None,
    ) -> Try[T]:
        """Like recover, but fn returns a Try. A non-Try result becomes Failure(TypeError)."""
        match self:
            case Failure(error) if _matches(error, error_type):
                try:
                    return _expect_try(fn(error), "flat_recover")
                except Exception as exc:
                    return _capture(exc)
            case _:
                return self

    # Flattening

    @staticmethod
    def flatten(nested: Try[typing.Any], /, depth: int = 2) -> Try[typing.Any]:
        """
        Collapse depth levels of Try-of-Try into one Try.

        Unwraps one level at a time; the first Failure met is the result
        and deeper levels are never looked at.
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")

        current: typing.Any = nested
        for level in range(1, depth):
            match current:
                case Success(inner):
                    current = inner
                case Failure(_):
                    return current
                case _:
                    raise TypeError(
                        f"expected Try at nesting level {level}, got {type(current).__name__}"
                    )
        if not isinstance(current, Try):
            raise TypeError(f"expected Try at nesting level {depth}, got {type(current).__name__}")
        return current

    @staticmethod
    def flatten2[S](nested: Try[Try[S]], /) -> Try[S]:
        return Try.flatten(nested, 2)

    @staticmethod
    def flatten3[S](nested: Try[Try[Try[S]]], /) -> Try[S]:
        return Try.flatten(nested, 3)

    @staticmethod
    def flatten4[S](nested: Try[Try[Try[Try[S]]]], /) -> Try[S]:
        return Try.flatten(nested, 4)

    @staticmethod
    def flatten5[S](nested: Try[Try[Try[Try[Try[S]]]]], /) -> Try[S]:
        return Try.flatten(nested, 5)

    @staticmethod
    def flatten6[S](nested: Try[Try[Try[Try[Try[Try[S]]]]]], /) -> Try[S]:
        return Try.flatten(nested, 6)

    @staticmethod
    def flatten7[S](nested: Try[Try[Try[Try[Try[Try[Try[S]]]]]]], /) -> Try[S]:
        return Try.flatten(nested, 7)

    @staticmethod
    def flatten8[S](nested: Try[Try[Try[Try[Try[Try[Try[Try[S]]]]]]]], /) -> Try[S]:
        return Try.flatten(nested, 8)

@dataclass(frozen=True, slots=True)
class Success[T](Try[T]):
    """The computation returned value."""

    value: T

@dataclass(frozen=True, slots=True)
class Failure[T](Try[T]):
    """The computation raised error."""

    error: Exception
    # traceback at capture time; extraction re-raises with it
    traceback: TracebackType | None = field(default=None, kw_only=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.traceback is None:
            object.__setattr__(self, "traceback", self.error.__traceback__)

__all__ = (
    "Failure",
    "Success",
    "Try",
)
