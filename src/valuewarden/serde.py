"""Transparent (de)serialization of constrained values through pydantic.

A constrained value serializes exactly as its inner value would. Deserializing
parses the inner value's natural form and then runs the same validating
constructor as direct construction, so there is one gate for both paths.

Rejections surface as ``pydantic.ValidationError`` entries whose ``type`` is
the constraint kind (``too_low``, ``too_high``, ``empty``, ``blank``) and whose
``ctx`` carries the payload of the original error plus its ``message``.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from loguru import logger
from pydantic import TypeAdapter
from pydantic_core import PydanticCustomError, core_schema

from valuewarden.config import get_config
from valuewarden.exceptions import ConstraintError

if TYPE_CHECKING:
  from pydantic import GetCoreSchemaHandler
  from pydantic_core import CoreSchema

  from valuewarden.base import Constrained


def constrained_schema(
  cls: type[Constrained[Any]], source: Any, handler: GetCoreSchemaHandler
) -> CoreSchema:
  """Build the pydantic core schema shared by every constrained type.

  Args:
    cls: The constrained class (the origin when ``source`` is a generic alias).
    source: The annotation being resolved, e.g. ``NonEmptyList[int]``.
    handler: pydantic's schema handler, used for the inner value's schema.
  """
  inner_schema = cls._inner_schema(source, handler)

  def construct(parsed: Any) -> Constrained[Any]:
    try:
      return cls.new(cls._from_parsed(parsed))
    except ConstraintError as e:
      if get_config().log_rejections:
        logger.debug(f"Rejected {cls.__name__} during deserialization: {e!r}")
      # The message goes in last so placeholders inside it are never substituted.
      context = {**e.context(), "message": str(e)}
      raise PydanticCustomError(e.kind.value, "{message}", context) from e

  def passthrough(value: Any, parse: core_schema.ValidatorFunctionWrapHandler) -> Any:
    # Already-constructed instances were validated (or trusted) when built.
    if isinstance(value, cls):
      return value
    return parse(value)

  from_inner = core_schema.chain_schema([
    inner_schema,
    core_schema.no_info_plain_validator_function(construct),
  ])

  return core_schema.no_info_wrap_validator_function(
    passthrough,
    from_inner,
    serialization=core_schema.plain_serializer_function_ser_schema(
      lambda value: cls._serializable(value.into_inner()),
      return_schema=inner_schema,
    ),
  )


@functools.cache
def _adapter(tp: Any) -> TypeAdapter[Any]:
  return TypeAdapter(tp)


def to_json(value: Any, tp: Any = None) -> str:
  """Serialize ``value`` to a JSON string.

  Args:
    value: A constrained value, or any structure containing them.
    tp: The annotation to serialize against. Defaults to ``type(value)``;
      pass it explicitly for generic containers such as ``NonEmptyList[int]``
      or for structures like ``list[NonEmptyString]``.
  """
  return _adapter(type(value) if tp is None else tp).dump_json(value).decode()


def from_json(tp: Any, data: str | bytes) -> Any:
  """Parse JSON ``data`` into an instance of ``tp``, validating on the way.

  Raises:
    pydantic.ValidationError: If the JSON is malformed or any constrained
      value inside it violates its invariant.
  """
  return _adapter(tp).validate_json(data)


def to_python(value: Any, tp: Any = None) -> Any:
  """Serialize ``value`` to JSON-compatible Python objects."""
  return _adapter(type(value) if tp is None else tp).dump_python(value, mode="json")


def from_python(tp: Any, data: Any) -> Any:
  """Validate plain Python ``data`` (e.g. decoded JSON) into ``tp``."""
  return _adapter(tp).validate_python(data)
