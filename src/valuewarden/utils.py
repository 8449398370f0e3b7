"""Utility functions for valuewarden."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import math
from typing import Any

import numpy as np

from valuewarden.base import Validator

_MISSING = object()


def instantiate_validator(item: object) -> Validator[Any] | None:
  """Helper to instantiate a validator from a type or instance.

  Validators that take no arguments must be given as classes, which keeps
  ``ValidatedString[NonBlankText]`` as the single spelling of that type.

  Args:
    item: The object to check and potentially instantiate.

  Returns:
    The validator instance if item is a Validator or Validator subclass,
    otherwise None.
  """
  if isinstance(item, Validator):
    try:
      default_instance = item.__class__()
      if item == default_instance:
        raise ValueError(
          f"Use validator class '{item.__class__.__name__}' instead of instance "
          + f"'{item.__class__.__name__}()' when no arguments are provided."
        )
    except TypeError:
      # __init__ requires arguments, so an instance is valid/required
      pass
    return item
  if isinstance(item, type) and issubclass(item, Validator):
    try:
      return item()
    except TypeError as e:
      raise TypeError(
        f"Validator class '{item.__name__}' could not be instantiated (missing arguments?). "
        + f"Did you forget to instantiate it like '{item.__name__}(...)'?"
      ) from e
  return None


def is_empty_iterable(container: Iterable[Any]) -> bool:
  """Check whether iterating ``container`` yields nothing.

  This is the only emptiness test used by the collection wrappers, so lists,
  sets, deques, mappings and pandas objects all follow the same definition.

  Raises:
    TypeError: If ``container`` is a one-shot iterator, which the check
      would consume.
  """
  if isinstance(container, Iterator):
    raise TypeError(
      f"Expected a re-iterable container, got iterator {type(container).__name__}"
    )
  return next(iter(container), _MISSING) is _MISSING


def plain_scalar(value: Any) -> Any:
  """Convert numpy scalars to the equivalent Python scalar."""
  if isinstance(value, np.generic):
    return value.item()
  return value


def is_nan(value: Any) -> bool:
  """Check for NaN without raising on non-float input."""
  return isinstance(value, (float, np.floating)) and math.isnan(value)
