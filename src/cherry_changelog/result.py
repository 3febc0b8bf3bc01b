"""
Explicit success/failure values for optional external state.

Several inputs of a changelog run may be unavailable without that being
an error: the repository may have no tags yet, and the persisted
changelog may be missing or corrupt. Instead of nesting ``try`` blocks
at every call site, the collaborators return a :class:`Result` and the
caller states its fallback policy with :meth:`Result.recover` or
:meth:`Result.unwrap_or`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that may legitimately fail.

    Attributes
    ----------
    value : Optional[T]
        The produced value when the operation succeeded.
    error : Optional[Exception]
        The cause of the failure, ``None`` on success.
    """

    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def recover(self, handler: Callable[[Exception], T]) -> T:
        """Return the value, or ``handler(error)`` when the result failed."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        return handler(self.error)  # type: ignore[arg-type]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when the result failed."""
        return self.value if self.ok else default  # type: ignore[return-value]
