"""Lazy Monad

Memoized deferred value:
- the generator runs on first get(), at most once per successful run
- the result is cached for the lifetime of the instance
- the generator is dropped after it ran, releasing what it captured

Safe to share between threads: concurrent first callers wait on a lock
while one of them evaluates, then all see the same value.

A raising generator propagates to the caller of get() and leaves the
instance unevaluated, so the next get() runs the generator again."""

from __future__ import annotations

import threading
import typing
from collections.abc import Iterator

from kungfu import Nothing, Option, Some

from .._types import Function, Supplier
from ..logging import logger

class Lazy[T]:
    """Lazy Monad.

    Laziness is preserved by map, flat_map, flatten and stream: none of them
    run anything until a get() (or a pull on the stream) happens.
    """

    __slots__ = ("_generator", "_value", "_evaluated", "_lock")

    def __init__(self, generator: Supplier[T], /) -> None:
        """Create a deferred Lazy. Same as Lazy.of(generator)."""
        self._generator: Supplier[T] | None = generator
        self._value: T | None = None
        self._evaluated = False
        self._lock = threading.Lock()

    @staticmethod
    def of[V](generator: Supplier[V], /) -> Lazy[V]:
        """Defer generator until the first get()."""
        return Lazy(generator)

    @staticmethod
    def pure[V](value: V, /) -> Lazy[V]:
        """Pre-evaluated Lazy holding value."""
        lazy = Lazy(lambda: value)
        lazy._store(value)
        return lazy

    @staticmethod
    def empty() -> Lazy[typing.Any]:
        """Pre-evaluated Lazy holding None."""
        return Lazy.pure(None)

    def _store(self, value: T) -> None:
        # value first: the unlocked fast path in get() trusts _evaluated
        self._value = value
        self._evaluated = True
        self._generator = None

    @property
    def is_evaluated(self) -> bool:
        return self._evaluated

    # Evaluation

    def get(self) -> T:
        """Evaluate once (double-checked under the lock), then return the cached value."""
        if not self._evaluated:
            with self._lock:
                if not self._evaluated:
                    generator = typing.cast(Supplier[T], self._generator)
                    logger().debug("evaluating `%s`", getattr(generator, "__qualname__", generator))
                    try:
                        value = generator()
                    except Exception as exc:
                        logger().debug("generator raised `%s`, left unevaluated", type(exc).__name__)
                        raise
                    self._store(value)
        return typing.cast(T, self._value)

    def __call__(self) -> T:
        return self.get()

    # Views

    def optional(self) -> Option[T]:
        """Forces evaluation. Nothing if the value is None, else Some(value)."""
        value = self.get()
        if value is None:
            return Nothing()
        return Some(value)

    def stream(self) -> Iterator[T]:
        """
        One-item iterator over the value (empty when None).

        Building the iterator evaluates nothing; the first pull does.
        """
        value = self.get()
        if value is not None:
            yield value

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    # Functor / Monad operations

    def map[U](self, fn: Function[T, U], /) -> Lazy[U]:
        """Lazy of fn(self.get()). None passes through without calling fn."""

        def run() -> U:
            value = self.get()
            if value is None:
                return typing.cast(U, None)
            return fn(value)

        return Lazy(run)

    def flat_map[U](self, fn: Function[T, Lazy[U]], /) -> Lazy[U]:
        """Lazy of fn(self.get()).get(). None passes through without calling fn."""

        def run() -> U:
            value = self.get()
            if value is None:
                return typing.cast(U, None)
            return fn(value).get()

        return Lazy(run)

    # Flattening

    @staticmethod
    def flatten(nested: Lazy[typing.Any], /, depth: int = 2) -> Lazy[typing.Any]:
        """
        Collapse depth levels of Lazy-of-Lazy into one Lazy.

        Nothing is forced until get() on the result; then every level is
        forced in turn, outermost first.
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")

        def run() -> typing.Any:
            current: typing.Any = nested
            for level in range(1, depth + 1):
                if current is None:
                    return None
                if not isinstance(current, Lazy):
                    raise TypeError(
                        f"expected Lazy at nesting level {level}, got {type(current).__name__}"
                    )
                current = current.get()
            return current

        return Lazy(run)

    @staticmethod
    def flatten2[S](nested: Lazy[Lazy[S]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 2)

    @staticmethod
    def flatten3[S](nested: Lazy[Lazy[Lazy[S]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 3)

    @staticmethod
    def flatten4[S](nested: Lazy[Lazy[Lazy[Lazy[S]]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 4)

    @staticmethod
    def flatten5[S](nested: Lazy[Lazy[Lazy[Lazy[Lazy[S]]]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 5)

    @staticmethod
    def flatten6[S](nested: Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[S]]]]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 6)

    @staticmethod
    def flatten7[S](nested: Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[S]]]]]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 7)

    @staticmethod
    def flatten8[S](nested: Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[Lazy[S]]]]]]]], /) -> Lazy[S]:
        return Lazy.flatten(nested, 8)

    # Protocol methods

    def __repr__(self) -> str:
        if self._evaluated:
            return f"Lazy({self._value!r})"
        return "Lazy(<pending>)"

__all__ = ("Lazy",)
