"""Validators bound to the constrained value families."""

from __future__ import annotations

from collections.abc import Iterable
import math
from typing import Any, override

from valuewarden.base import Validator
from valuewarden.exceptions import (
  BlankStringError,
  EmptyCollectionError,
  EmptyStringError,
  LogicError,
  TooHighError,
  TooLowError,
)
from valuewarden.utils import is_empty_iterable, is_nan, plain_scalar


class Between(Validator[Any]):
  """Validator for values within an inclusive range [lower, upper].

  NaN is placed using IEEE total order: a NaN with the sign bit clear sorts
  above +inf and is too high, a negative NaN sorts below -inf and is too low.

  Args:
    lower: Minimum allowed value (inclusive).
    upper: Maximum allowed value (inclusive).

  Raises:
    LogicError: If ``lower > upper``.
  """

  def __init__(self, lower: Any, upper: Any) -> None:
    super().__init__()
    if lower > upper:
      raise LogicError(f"Impossible range: lower bound {lower} > upper bound {upper}")
    self.lower = lower
    self.upper = upper

  @override
  def __repr__(self) -> str:
    return f"Between({self.lower!r}, {self.upper!r})"

  @override
  def describe(self) -> str:
    return f"{self.lower}..={self.upper}"

  @override
  def validate(self, value: Any) -> None:
    if is_nan(value):
      if math.copysign(1.0, value) < 0:
        raise TooLowError(self.lower, self.upper, value)
      raise TooHighError(self.lower, self.upper, value)

    # Compare as Python scalars so unsigned numpy values never wrap.
    v = plain_scalar(value)
    if v < self.lower:
      raise TooLowError(self.lower, self.upper, value)
    if v > self.upper:
      raise TooHighError(self.lower, self.upper, value)


class NotEmpty(Validator[Iterable[Any]]):
  """Validator for containers that yield at least one element or entry."""

  @override
  def validate(self, value: Iterable[Any]) -> None:
    if is_empty_iterable(value):
      raise EmptyCollectionError()


class NonEmptyText(Validator[str]):
  """Validator for strings with at least one character."""

  @override
  def validate(self, value: str) -> None:
    if not value:
      raise EmptyStringError()


class NonBlankText(Validator[str]):
  """Validator for strings with at least one non-whitespace character.

  The empty string is blank too. This rule does not consult NonEmptyText.
  """

  @override
  def validate(self, value: str) -> None:
    if not value.strip():
      raise BlankStringError(value)
