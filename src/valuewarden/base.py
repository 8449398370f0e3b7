"""Base classes for validators and constrained values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self, override

from loguru import logger

from valuewarden.config import get_config
from valuewarden.exceptions import ConstraintError
from valuewarden.serde import constrained_schema

if TYPE_CHECKING:
  from pydantic import GetCoreSchemaHandler
  from pydantic_core import CoreSchema


class Validator[T]:
  """Base class for validators."""

  def validate(self, value: T) -> None:
    """Validate the value and raise a ConstraintError if invalid.

    Returns None. Does not return the value because validation must never
    modify the payload it guards.
    """
    pass

  def describe(self) -> str:
    """Return a descriptive string for the validator."""
    return self.__class__.__name__

  @override
  def __repr__(self) -> str:
    return f"{self.__class__.__name__}()"

  @override
  def __eq__(self, other: object) -> bool:
    """Check equality based on type and attributes."""
    if not isinstance(other, type(self)):
      return NotImplemented
    return self.__dict__ == other.__dict__

  @override
  def __hash__(self) -> int:
    """Hash based on type and attributes."""
    return hash((type(self), tuple(sorted(self.__dict__.items()))))


def _reconstruct(origin: type[Constrained[Any]], params: tuple[Any, ...], inner: Any) -> Any:
  """Rebuild a parameterised constrained value (pickle support)."""
  return origin[params].new_unchecked(inner)  # type: ignore[index]


class Constrained[T]:
  """An immutable wrapper whose inner value satisfies ``validator``.

  The only ways to obtain an instance are the validating constructor
  (``cls(value)`` or ``cls.new(value)``) and ``cls.new_unchecked(value)``,
  which trusts the caller.

  Subclasses bind a validator and may override the hooks below:

  - ``_check_type``: reject values of the wrong Python type (TypeError).
  - ``_snapshot``: the object actually stored, e.g. a private copy of a
    mutable container.
  - ``_inner_schema``: pydantic schema of the inner value's external form.
  - ``_from_parsed`` / ``_serializable``: convert between that form and
    the inner value when they differ.
  """

  __slots__ = ("_inner",)

  _inner: T
  validator: ClassVar[Validator[Any] | None] = None
  # Set on classes created by subscription, e.g. BoundedI8[0, 10].
  _origin: ClassVar[type[Constrained[Any]] | None] = None
  _params: ClassVar[tuple[Any, ...] | None] = None

  def __init__(self, value: T) -> None:
    object.__setattr__(self, "_inner", type(self)._check(value))

  # -------------------------------------------------------------------------
  # Construction
  # -------------------------------------------------------------------------

  @classmethod
  def new(cls, value: T) -> Self:
    """Validate ``value`` and wrap it.

    Raises:
      ConstraintError: If the value violates the invariant.
      TypeError: If the value is not of the wrapped type.
    """
    return cls(value)

  @classmethod
  def new_unchecked(cls, value: T) -> Self:
    """Wrap ``value`` without validating it.

    Precondition: the caller has already established the invariant (for
    example, the value was read back from storage that only ever received
    validated values). Violating the precondition yields an instance that
    reports itself as valid while breaking its contract. Nothing is raised.
    """
    cls._require_validator()
    if get_config().audit_unchecked:
      cls._audit(value)
    obj = cls.__new__(cls)
    object.__setattr__(obj, "_inner", cls._snapshot(value))
    return obj

  def into_inner(self) -> T:
    """Return the raw inner value. The invariant is no longer tracked."""
    return self._inner

  @classmethod
  def _require_validator(cls) -> Validator[Any]:
    if cls.validator is None:
      raise TypeError(
        f"{cls.__name__} is not fully specified and cannot be instantiated"
      )
    return cls.validator

  @classmethod
  def _check_type(cls, value: Any) -> None:
    pass

  @classmethod
  def _snapshot(cls, value: Any) -> Any:
    return value

  @classmethod
  def _check(cls, value: Any) -> Any:
    """Validate ``value`` and return the object the instance will hold."""
    validator = cls._require_validator()
    cls._check_type(value)
    owned = cls._snapshot(value)
    validator.validate(owned)
    return owned

  @classmethod
  def _audit(cls, value: Any) -> None:
    try:
      cls._check(value)
    except (ConstraintError, TypeError) as e:
      msg = f"{cls.__name__}.new_unchecked received a value violating its invariant: {e}"
      logger.warning(msg)

  # -------------------------------------------------------------------------
  # Immutability
  # -------------------------------------------------------------------------

  @override
  def __setattr__(self, name: str, value: Any) -> None:
    raise AttributeError(f"{type(self).__name__} is immutable")

  @override
  def __delattr__(self, name: str) -> None:
    raise AttributeError(f"{type(self).__name__} is immutable")

  @override
  def __reduce__(self) -> tuple[Any, ...]:
    cls = type(self)
    if cls._origin is not None and "_params" in cls.__dict__:
      return (_reconstruct, (cls._origin, cls._params, self._inner))
    return (cls.new_unchecked, (self._inner,))

  # -------------------------------------------------------------------------
  # Display, equality, ordering
  # -------------------------------------------------------------------------

  @override
  def __str__(self) -> str:
    return str(self._inner)

  @override
  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._inner!r})"

  @classmethod
  def _inner_equals(cls, left: Any, right: Any) -> bool:
    return bool(left == right)

  @override
  def __eq__(self, other: object) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return type(self)._inner_equals(self._inner, other._inner)  # type: ignore[attr-defined]

  @override
  def __hash__(self) -> int:
    return hash(self._inner)

  def __lt__(self, other: object) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return self._inner < other._inner  # type: ignore[attr-defined,operator]

  def __le__(self, other: object) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return self._inner <= other._inner  # type: ignore[attr-defined,operator]

  def __gt__(self, other: object) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return self._inner > other._inner  # type: ignore[attr-defined,operator]

  def __ge__(self, other: object) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return self._inner >= other._inner  # type: ignore[attr-defined,operator]

  # -------------------------------------------------------------------------
  # Serialization
  # -------------------------------------------------------------------------

  @classmethod
  def __get_pydantic_core_schema__(
    cls, source: Any, handler: GetCoreSchemaHandler
  ) -> CoreSchema:
    return constrained_schema(cls, source, handler)

  @classmethod
  def _inner_schema(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
    return handler.generate_schema(Any)

  @classmethod
  def _from_parsed(cls, parsed: Any) -> Any:
    return parsed

  @classmethod
  def _serializable(cls, inner: Any) -> Any:
    return inner
