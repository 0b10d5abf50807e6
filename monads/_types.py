"""
Core type definitions for monads.

Callable shapes accepted by Try and Lazy. Any of them may raise; Try
captures what they raise, Lazy lets it propagate.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Callable shapes
# ============================================================================

# Supplier = zero-arg function producing a value
type Supplier[T] = Callable[[], T]

# Runnable = zero-arg function run for its side effect
type Runnable = Callable[[], None]

# Consumer = function that accepts a value and returns nothing
type Consumer[T] = Callable[[T], None]

# BiConsumer = two-arg Consumer
type BiConsumer[T, U] = Callable[[T, U], None]

# Function = one-arg transformation
type Function[T, R] = Callable[[T], R]

# BiFunction = two-arg transformation
type BiFunction[T, U, R] = Callable[[T, U], R]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# ErrorType = what isinstance() accepts for exception filtering
type ErrorType = type[Exception] | tuple[type[Exception], ...]

__all__ = (
    "BiConsumer",
    "BiFunction",
    "Consumer",
    "ErrorType",
    "Function",
    "Predicate",
    "Runnable",
    "Supplier",
)
