"""
Monads for exception-raising Python code.

Two value wrappers with a fluent combinator API:
- Try[T]  - outcome of a fallible computation: Success(value) | Failure(error)
- Lazy[T] - memoized deferred value, evaluated at most once, thread-safe

Both interoperate with kungfu: Option is returned by every "maybe" view,
Try converts to and from Result.
"""

# Core types
from ._types import (
    BiConsumer,
    BiFunction,
    Consumer,
    ErrorType,
    Function,
    Predicate,
    Runnable,
    Supplier,
)

# Try
from . import try_
from .try_ import Failure, Success, Try

# Lift helpers (namespace import preferred: from monads import lift as L)
from .try_ import lift
from .try_ import call, lifted, lifted_void

# Lazy
from . import lazy
from .lazy import Lazy

# Errors
from ._errors import PredicateFilterError, UnwrapError

__all__ = (
    # Types
    "BiConsumer",
    "BiFunction",
    "Consumer",
    "ErrorType",
    "Function",
    "Predicate",
    "Runnable",
    "Supplier",
    # Try
    "try_",
    "Try",
    "Success",
    "Failure",
    # Lift
    "lift",
    "call",
    "lifted",
    "lifted_void",
    # Lazy
    "lazy",
    "Lazy",
    # Errors
    "PredicateFilterError",
    "UnwrapError",
)
