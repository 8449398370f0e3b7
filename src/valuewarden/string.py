"""Strings validated by a pluggable rule.

``ValidatedString[Rule]`` wraps a ``str`` whose content the rule accepts. The
rule is a ``Validator[str]`` subclass and is part of the type, so
``NonEmptyString`` and ``NonBlankString`` are distinct, incompatible classes.
Validation never transforms the payload: the original, untrimmed text is what
gets wrapped.

Example:
  ```python
  NonBlankString.new("  Hello  ").into_inner()  # "  Hello  "
  NonBlankString.new("   ")  # raises BlankStringError
  NonEmptyString.new("   ")  # accepted


  class Slug(Validator[str]):
    def validate(self, value: str) -> None:
      ...


  SlugString = ValidatedString[Slug]
  ```
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, ClassVar, override

from pydantic_core import core_schema

from valuewarden.base import Constrained, Validator
from valuewarden.utils import instantiate_validator
from valuewarden.validators import NonBlankText, NonEmptyText

if TYPE_CHECKING:
  from pydantic import GetCoreSchemaHandler
  from pydantic_core import CoreSchema

_UNSET: Any = object()


@functools.cache
def _validated_string(base: type[ValidatedString], rule: Validator[str]) -> type[ValidatedString]:
  name = f"{base.__name__}[{rule.describe()}]"
  ns = {"__slots__": (), "__module__": base.__module__, "__qualname__": name}
  cls = type(base)(name, (base,), ns, rule=rule)
  cls._origin = base
  cls._params = (type(rule) if rule == _default_instance(rule) else rule,)
  return cls


def _default_instance(rule: Validator[str]) -> Validator[str] | None:
  try:
    return type(rule)()
  except TypeError:
    return None


class ValidatedString(Constrained[str]):
  """A ``str`` whose content satisfies the rule bound to the class."""

  __slots__ = ()

  rule: ClassVar[Validator[str] | None] = None

  def __init_subclass__(cls, rule: Any = _UNSET, **kwargs: Any) -> None:
    super().__init_subclass__(**kwargs)
    if rule is _UNSET:
      return
    if cls.rule is not None:
      raise TypeError(f"{cls.__name__} already has a rule")
    validator = rule if isinstance(rule, Validator) else instantiate_validator(rule)
    if validator is None:
      raise TypeError(f"{cls.__name__} rule must be a Validator, got {rule!r}")
    cls.rule = validator
    cls.validator = validator

  def __class_getitem__(cls, rule: Any) -> type[ValidatedString]:  # type: ignore[override]
    if isinstance(rule, tuple) and len(rule) == 1:
      (rule,) = rule
    if cls.rule is not None:
      raise TypeError(f"{cls.__name__} already has a rule")
    validator = instantiate_validator(rule)
    if validator is None:
      raise TypeError(f"{cls.__name__}[...] expects a Validator, got {rule!r}")
    return _validated_string(cls, validator)

  @override
  @classmethod
  def _check_type(cls, value: Any) -> None:
    if not isinstance(value, str):
      raise TypeError(f"{cls.__name__} expects str, got {type(value).__name__}")

  @override
  @classmethod
  def _inner_schema(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
    return core_schema.str_schema(strict=True)


NonEmptyString = ValidatedString[NonEmptyText]
"""A string with at least one character."""

NonBlankString = ValidatedString[NonBlankText]
"""A string with at least one non-whitespace character."""
