"""
Вызов функций с автоматическим лифтингом в Try.

Bridge between exception-raising code and Try: call a function at the call
site, or decorate it once so every call returns a Try.
"""

from __future__ import annotations

from collections.abc import Callable

from .monad import Try


def lifted[**P, R](func: Callable[P, R]) -> Callable[P, Try[R]]:
    """
    Decorator: calls of func return Try[R] instead of raising.

    **When to use:** For frequently-used functions that raise. For one-off
    calls prefer `call()` at the call site.

    Example:
        from monads import lift as L

        @L.lifted
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port("8080")  # Success(value=8080)
        parse_port("http")  # Failure(error=ValueError(...))
    """
    return Try.lift(func)


def lifted_void[**P](func: Callable[P, object]) -> Callable[P, Try[None]]:
    """
    Decorator for side-effecting functions: calls return Try[None].

    The return value of func is discarded.
    """
    return Try.lift_void(func)


def call[**P, R](
    func: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Try[R]:
    """
    Call func with arguments and capture the outcome.

    **Grammar:** `L.call(func, *args, **kwargs)` reads as "call function with args"

    Example:
        from monads import lift as L

        L.call(int, "42")          # Success(value=42)
        L.call(int, "ff", base=16) # Success(value=255)
    """
    return Try.of(lambda: func(*args, **kwargs))


__all__ = (
    "call",
    "lifted",
    "lifted_void",
)
