"""Custom exceptions for valuewarden."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, override


class LogicError(Exception):
  """Raised when a constrained type definition is impossible or contradictory."""


class ErrorKind(StrEnum):
  """Machine-readable reason a constructor rejected its input."""

  TOO_LOW = "too_low"
  TOO_HIGH = "too_high"
  EMPTY = "empty"
  BLANK = "blank"
  # Raised by user-defined rules that do not pick a more specific kind.
  INVALID = "invalid"


class ConstraintError(ValueError):
  """Base class for every rejected construction."""

  kind: ErrorKind = ErrorKind.INVALID

  def context(self) -> dict[str, Any]:
    """Return the payload of the error as a plain dict."""
    return {}

  @override
  def __repr__(self) -> str:
    context = self.context()
    if not context:
      return f"{self.__class__.__name__}({str(self)!r})"
    args = ", ".join(f"{k}={v!r}" for k, v in context.items())
    return f"{self.__class__.__name__}({args})"

  @override
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, ConstraintError):
      return NotImplemented
    return (
      type(self) is type(other)
      and self.args == other.args
      and self.context() == other.context()
    )

  @override
  def __hash__(self) -> int:
    return hash((type(self), self.args))


# ---------------------------------------------------------------------------
# Numeric
# ---------------------------------------------------------------------------


class OutOfBoundsError(ConstraintError):
  """A value fell outside an inclusive ``[min, max]`` range."""

  def __init__(self, min: Any, max: Any, value: Any) -> None:  # noqa: A002
    self.min = min
    self.max = max
    self.value = value
    super().__init__(self._message())

  def _message(self) -> str:
    raise NotImplementedError

  @override
  def context(self) -> dict[str, Any]:
    return {"min": self.min, "max": self.max, "value": self.value}


class TooLowError(OutOfBoundsError):
  """The value is below the lower bound."""

  kind = ErrorKind.TOO_LOW

  @override
  def _message(self) -> str:
    return f"{self.value} is too low (range: {self.min}..={self.max})"


class TooHighError(OutOfBoundsError):
  """The value is above the upper bound."""

  kind = ErrorKind.TOO_HIGH

  @override
  def _message(self) -> str:
    return f"{self.value} is too high (range: {self.min}..={self.max})"


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class StringContentError(ConstraintError):
  """Text content did not satisfy its rule."""


class EmptyStringError(StringContentError):
  """The string has no characters."""

  kind = ErrorKind.EMPTY

  def __init__(self) -> None:
    super().__init__("string is empty")


class BlankStringError(StringContentError):
  """The string consists only of whitespace (or nothing at all)."""

  kind = ErrorKind.BLANK

  def __init__(self, value: str) -> None:
    self.value = value
    super().__init__(f"string is blank (content: {value!r})")

  @override
  def context(self) -> dict[str, Any]:
    return {"value": self.value}


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


class CollectionContentError(ConstraintError):
  """Collection content did not satisfy its rule."""


class EmptyCollectionError(CollectionContentError):
  """The collection yields no elements."""

  kind = ErrorKind.EMPTY

  def __init__(self) -> None:
    super().__init__("collection is empty")
