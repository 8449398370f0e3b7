"""Collections that are guaranteed to hold at least one element.

``NonEmptyCollection`` takes a shallow snapshot of a container (same elements,
same order) and checks that iterating it yields something. The check is shape
independent, so lists, tuples, sets, deques, mappings and pandas objects share
it. The wrapper owns its snapshot: later changes to the caller's container do
not reach it, and ``into_inner`` hands out a fresh copy. To mutate, unwrap and
construct again.

Equality, ordering and hashing delegate to the inner container.

Example:
  ```python
  NonEmptyList.new([1, 2, 3]).into_inner()  # [1, 2, 3]
  NonEmptyList.new([])  # raises EmptyCollectionError
  to_json(NonEmptyList.new([1, 2, 3]))  # "[1,2,3]"
  ```
"""

from __future__ import annotations

from collections import OrderedDict, deque
import copy
from typing import TYPE_CHECKING, Any, ClassVar, get_args, override

import pandas as pd

from valuewarden.base import Constrained, Validator
from valuewarden.validators import NotEmpty

if TYPE_CHECKING:
  from collections.abc import Iterator

  from pydantic import GetCoreSchemaHandler
  from pydantic_core import CoreSchema


class NonEmptyCollection[C](Constrained[C]):
  """A generic non-empty container wrapper.

  Subclasses set ``container`` to the accepted container type.
  """

  __slots__ = ()

  container: ClassVar[type[Any] | None] = None
  validator = NotEmpty()

  @override
  @classmethod
  def _require_validator(cls) -> Validator[Any]:
    if cls.container is None:
      raise TypeError(f"{cls.__name__} has no container type and cannot be instantiated")
    return super()._require_validator()

  @override
  @classmethod
  def _check_type(cls, value: Any) -> None:
    if not isinstance(value, cls.container):  # type: ignore[arg-type]
      raise TypeError(
        f"{cls.__name__} expects {cls.container.__name__}, got {type(value).__name__}"  # type: ignore[union-attr]
      )

  @override
  @classmethod
  def _snapshot(cls, value: Any) -> Any:
    # Only containers of the right shape are copied; new_unchecked never raises.
    if not isinstance(value, cls.container):  # type: ignore[arg-type]
      return value
    return cls._copy(value)

  @classmethod
  def _copy(cls, value: Any) -> Any:
    return copy.copy(value)

  @override
  def into_inner(self) -> C:
    """Return a shallow copy of the inner container.

    The wrapper keeps its own snapshot, so emptying the returned container
    cannot break the wrapped invariant.
    """
    return type(self)._snapshot(self._inner)

  def __len__(self) -> int:
    return len(self._inner)  # type: ignore[arg-type]

  def __iter__(self) -> Iterator[Any]:
    return iter(self._inner)  # type: ignore[call-overload]

  def __contains__(self, item: object) -> bool:
    return item in self._inner  # type: ignore[operator]

  def first(self) -> Any:
    """Return the first element (or key, for mappings) in iteration order."""
    return next(iter(self._inner))  # type: ignore[call-overload]

  @override
  @classmethod
  def _inner_schema(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
    return handler.generate_schema(cls._inner_annotation(get_args(source)))

  @classmethod
  def _inner_annotation(cls, args: tuple[Any, ...]) -> Any:
    if not args:
      return cls.container
    return cls.container[args]  # type: ignore[index]


class NonEmptyList[T](NonEmptyCollection[list[T]]):
  """A non-empty ``list``."""

  __slots__ = ()
  container = list


class NonEmptyTuple[T](NonEmptyCollection[tuple[T, ...]]):
  """A non-empty, variable-length ``tuple``."""

  __slots__ = ()
  container = tuple

  @override
  @classmethod
  def _inner_annotation(cls, args: tuple[Any, ...]) -> Any:
    if not args:
      return tuple[Any, ...]
    return tuple[args[0], ...]


class NonEmptySet[T](NonEmptyCollection[set[T]]):
  """A non-empty ``set``."""

  __slots__ = ()
  container = set


class NonEmptyFrozenSet[T](NonEmptyCollection[frozenset[T]]):
  """A non-empty ``frozenset``."""

  __slots__ = ()
  container = frozenset


class NonEmptyDeque[T](NonEmptyCollection[deque[T]]):
  """A non-empty double-ended queue."""

  __slots__ = ()
  container = deque


class NonEmptyDict[K, V](NonEmptyCollection[dict[K, V]]):
  """A non-empty ``dict`` (at least one entry)."""

  __slots__ = ()
  container = dict


class NonEmptyOrderedDict[K, V](NonEmptyCollection[OrderedDict[K, V]]):
  """A non-empty ``OrderedDict`` (at least one entry)."""

  __slots__ = ()
  container = OrderedDict


# ---------------------------------------------------------------------------
# pandas
# ---------------------------------------------------------------------------


class _PandasCollection[C](NonEmptyCollection[C]):
  """Shared behaviour for pandas containers, serialized as plain lists."""

  __slots__ = ()

  @override
  @classmethod
  def _inner_equals(cls, left: Any, right: Any) -> bool:
    return bool(left.equals(right))

  @override
  @classmethod
  def _inner_annotation(cls, args: tuple[Any, ...]) -> Any:
    if not args:
      return list[Any]
    return list[args[0]]

  @override
  @classmethod
  def _copy(cls, value: Any) -> Any:
    return value.copy()

  @override
  @classmethod
  def _from_parsed(cls, parsed: Any) -> Any:
    return cls.container(parsed)  # type: ignore[misc]

  @override
  @classmethod
  def _serializable(cls, inner: Any) -> Any:
    return inner.tolist()


class NonEmptySeries[T](_PandasCollection[pd.Series]):
  """A ``pandas.Series`` with at least one row."""

  __slots__ = ()
  container = pd.Series


class NonEmptyIndex[T](_PandasCollection[pd.Index]):
  """A ``pandas.Index`` with at least one label."""

  __slots__ = ()
  container = pd.Index
