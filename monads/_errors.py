from __future__ import annotations

FILTER_MESSAGE = "Predicate filter resulted in the successful result being dropped."

class UnwrapError(RuntimeError):
    """Try.get() hit a Failure whose error is not a RuntimeError."""

    error: Exception

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"{type(error).__name__}: {error}")

class PredicateFilterError(RuntimeError):
    """Try.filter() dropped a successful value."""

    def __init__(self) -> None:
        super().__init__(FILTER_MESSAGE)

__all__ = ("FILTER_MESSAGE", "PredicateFilterError", "UnwrapError")
