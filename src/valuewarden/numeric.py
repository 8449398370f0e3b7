"""Bounded numeric types.

A bounded number wraps a primitive numeric value together with a fixed,
inclusive range ``[MIN, MAX]``. The range belongs to the class, not to the
instance: ``BoundedI32[-10, 10]`` creates (once, then caches) a subclass whose
``MIN`` and ``MAX`` are class constants. Two ranges are two distinct classes,
and their instances never compare equal.

Python has no compile-time numeric parameters, so the range is enforced when
an instance is constructed rather than by a type checker. The bounds are
logically const: they are validated once, when the class is created, and
cannot be changed afterwards.

Integer families are keyed to numpy dtypes, which fix the representable width
of the bounds (``BoundedU8[0, 300]`` is rejected). Float families take their
bounds as runtime class constants, either by subclassing with keywords or
through ``bounded_float``.

Example:
  ```python
  Score = BoundedI32[-10, 10]
  Score.new(11)  # raises TooHighError(min=-10, max=10, value=11)
  Score.new(-10).into_inner()  # -10


  class Ratio(BoundedF64, min=0.0, max=1.0):
    pass


  Percent = bounded_float("Percent", 0.0, 100.0, np.float32)
  ```
"""

from __future__ import annotations

import functools
import math
import sys
from typing import TYPE_CHECKING, Any, ClassVar, override

import numpy as np
from pydantic_core import core_schema

from valuewarden.base import Constrained
from valuewarden.exceptions import LogicError
from valuewarden.utils import plain_scalar
from valuewarden.validators import Between

if TYPE_CHECKING:
  from pydantic import GetCoreSchemaHandler
  from pydantic_core import CoreSchema

_UNSET: Any = object()


class BoundedNumber[T](Constrained[T]):
  """Base class for numbers bounded between two values (inclusive)."""

  __slots__ = ()

  MIN: ClassVar[Any]
  MAX: ClassVar[Any]
  # numpy scalar type fixing the width of the bounds; None means unlimited.
  dtype: ClassVar[type[np.generic] | None] = None
  _expected: ClassVar[str] = "a number"

  def __init_subclass__(cls, min: Any = _UNSET, max: Any = _UNSET, **kwargs: Any) -> None:  # noqa: A002
    super().__init_subclass__(**kwargs)
    if min is _UNSET and max is _UNSET:
      return
    if min is _UNSET or max is _UNSET:
      raise TypeError(f"{cls.__name__} needs both 'min' and 'max'")
    if hasattr(cls, "MIN"):
      raise TypeError(f"{cls.__name__} inherits bounds and cannot redefine them")
    cls._check_bound_type(min)
    cls._check_bound_type(max)
    cls._check_representable(min)
    cls._check_representable(max)
    cls.validator = Between(min, max)
    cls.MIN = min
    cls.MAX = max

  @classmethod
  def _check_bound_type(cls, bound: Any) -> None:
    raise NotImplementedError

  @classmethod
  def _check_representable(cls, bound: Any) -> None:
    raise NotImplementedError

  @classmethod
  def _accepts(cls, value: Any) -> bool:
    raise NotImplementedError

  @override
  @classmethod
  def _check_type(cls, value: Any) -> None:
    if not cls._accepts(value):
      raise TypeError(f"{cls.__name__} expects {cls._expected}, got {type(value).__name__}")

  @override
  @classmethod
  def _serializable(cls, inner: Any) -> Any:
    return plain_scalar(inner)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def _is_int(value: Any) -> bool:
  return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@functools.cache
def _bounded_subclass(base: type[BoundedInt], lower: int, upper: int) -> type[BoundedInt]:
  name = f"{base.__name__}[{lower}, {upper}]"
  ns = {"__slots__": (), "__module__": base.__module__, "__qualname__": name}
  cls = type(base)(name, (base,), ns, min=lower, max=upper)
  cls._origin = base
  cls._params = (lower, upper)
  return cls


class BoundedInt(BoundedNumber[int]):
  """An integer bounded between two values (inclusive).

  Subscript with the bounds to get a concrete type: ``BoundedInt[0, 10]``.
  ``BoundedInt`` itself has unlimited width; use the width-specific
  subclasses (``BoundedI8`` ... ``BoundedU128``) to limit the bounds to a
  machine type.
  """

  __slots__ = ()
  _expected = "an integer"
  # Width limits for machine types numpy has no dtype for.
  _lo: ClassVar[int | None] = None
  _hi: ClassVar[int | None] = None
  _type_name: ClassVar[str] = ""

  def __class_getitem__(cls, params: Any) -> type[BoundedInt]:  # type: ignore[override]
    if not isinstance(params, tuple) or len(params) != 2:
      raise TypeError(f"{cls.__name__}[...] expects two bounds: {cls.__name__}[MIN, MAX]")
    lower, upper = params
    if hasattr(cls, "MIN"):
      raise TypeError(f"{cls.__name__} is already bounded")
    cls._check_bound_type(lower)
    cls._check_bound_type(upper)
    return _bounded_subclass(cls, int(lower), int(upper))

  @override
  @classmethod
  def _check_bound_type(cls, bound: Any) -> None:
    if not _is_int(bound):
      raise TypeError(
        f"{cls.__name__} bounds must be integers, got {type(bound).__name__}"
      )

  @override
  @classmethod
  def _check_representable(cls, bound: Any) -> None:
    limits = cls._limits()
    if limits is None:
      return
    lo, hi, type_name = limits
    if not lo <= int(bound) <= hi:
      raise LogicError(
        f"Bound {bound} is not representable as {type_name} (range: {lo}..={hi})"
      )

  @classmethod
  def _limits(cls) -> tuple[int, int, str] | None:
    if cls.dtype is not None:
      info = np.iinfo(cls.dtype)
      return int(info.min), int(info.max), str(info.dtype)
    if cls._lo is None or cls._hi is None:
      return None
    return cls._lo, cls._hi, cls._type_name

  @override
  @classmethod
  def _accepts(cls, value: Any) -> bool:
    return _is_int(value)

  @override
  @classmethod
  def _inner_schema(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
    return core_schema.int_schema(strict=True)


class BoundedI8(BoundedInt):
  """A signed 8-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.int8


class BoundedI16(BoundedInt):
  """A signed 16-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.int16


class BoundedI32(BoundedInt):
  """A signed 32-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.int32


class BoundedI64(BoundedInt):
  """A signed 64-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.int64


class BoundedI128(BoundedInt):
  """A signed 128-bit integer bounded between two values (inclusive).

  numpy has no 128-bit integer dtype, so the width is given as explicit limits.
  """

  __slots__ = ()
  _lo = -(2**127)
  _hi = 2**127 - 1
  _type_name = "int128"


class BoundedIsize(BoundedInt):
  """A pointer-sized signed integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.intp


class BoundedU8(BoundedInt):
  """An unsigned 8-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.uint8


class BoundedU16(BoundedInt):
  """An unsigned 16-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.uint16


class BoundedU32(BoundedInt):
  """An unsigned 32-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.uint32


class BoundedU64(BoundedInt):
  """An unsigned 64-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.uint64


class BoundedU128(BoundedInt):
  """An unsigned 128-bit integer bounded between two values (inclusive)."""

  __slots__ = ()
  _lo = 0
  _hi = 2**128 - 1
  _type_name = "uint128"


class BoundedUsize(BoundedInt):
  """A pointer-sized unsigned integer bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.uintp


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------


def _is_real(value: Any) -> bool:
  return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(
    value, bool
  )


class BoundedFloat(BoundedNumber[float]):
  """A floating-point number bounded between two values (inclusive).

  Bounds are runtime class constants, set by subclassing:

    class Ratio(BoundedF64, min=0.0, max=1.0):
      pass
  """

  __slots__ = ()
  dtype = np.float64

  @override
  @classmethod
  def _check_bound_type(cls, bound: Any) -> None:
    if not _is_real(bound):
      raise TypeError(f"{cls.__name__} bounds must be numbers, got {type(bound).__name__}")

  @override
  @classmethod
  def _check_representable(cls, bound: Any) -> None:
    try:
      finite = math.isfinite(bound)
    except OverflowError:
      finite = False
    if not finite:
      raise LogicError(f"{cls.__name__} bounds must be finite, got {bound}")
    info = np.finfo(cls.dtype)
    if not float(info.min) <= bound <= float(info.max):
      raise LogicError(f"Bound {bound} is not representable as {info.dtype}")

  @override
  @classmethod
  def _accepts(cls, value: Any) -> bool:
    return _is_real(value)

  @override
  @classmethod
  def _inner_schema(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
    return core_schema.float_schema(strict=True)


class BoundedF32(BoundedFloat):
  """A 32-bit float bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.float32


class BoundedF64(BoundedFloat):
  """A 64-bit float bounded between two values (inclusive)."""

  __slots__ = ()
  dtype = np.float64


_FLOAT_FAMILIES: dict[type[np.floating], type[BoundedFloat]] = {
  np.float32: BoundedF32,
  np.float64: BoundedF64,
}


def bounded_float(
  name: str,
  min: float,  # noqa: A002
  max: float,  # noqa: A002
  dtype: Any = np.float64,
  *,
  module: str | None = None,
) -> type[BoundedFloat]:
  """Create a bounded float type.

  Args:
    name: Name of the generated class.
    min: The minimum value allowed for the type (inclusive).
    max: The maximum value allowed for the type (inclusive).
    dtype: ``np.float32`` or ``np.float64`` (anything ``np.dtype`` accepts).
    module: Module the class is attributed to, for pickling. Defaults to the
      caller's module.

  Raises:
    LogicError: If the bounds are not finite, not representable, or min > max.
    TypeError: If ``dtype`` is not a supported float type.
  """
  scalar_type = np.dtype(dtype).type
  base = _FLOAT_FAMILIES.get(scalar_type)
  if base is None:
    raise TypeError(f"Unsupported float dtype: {np.dtype(dtype)}")
  if module is None:
    module = sys._getframe(1).f_globals.get("__name__", "__main__")
  ns = {"__slots__": (), "__module__": module, "__qualname__": name}
  return type(base)(name, (base,), ns, min=min, max=max)
