"""Valuewarden - constrained value types validated at construction."""

__version__ = "0.1.0"

# Base classes
from valuewarden.base import Constrained, Validator

# Collections
from valuewarden.collection import (
  NonEmptyCollection,
  NonEmptyDeque,
  NonEmptyDict,
  NonEmptyFrozenSet,
  NonEmptyIndex,
  NonEmptyList,
  NonEmptyOrderedDict,
  NonEmptySeries,
  NonEmptySet,
  NonEmptyTuple,
)

# Exceptions
from valuewarden.exceptions import (
  BlankStringError,
  CollectionContentError,
  ConstraintError,
  EmptyCollectionError,
  EmptyStringError,
  ErrorKind,
  LogicError,
  OutOfBoundsError,
  StringContentError,
  TooHighError,
  TooLowError,
)

# Numbers
from valuewarden.numeric import (
  BoundedF32,
  BoundedF64,
  BoundedFloat,
  BoundedI8,
  BoundedI16,
  BoundedI32,
  BoundedI64,
  BoundedI128,
  BoundedInt,
  BoundedIsize,
  BoundedNumber,
  BoundedU8,
  BoundedU16,
  BoundedU32,
  BoundedU64,
  BoundedU128,
  BoundedUsize,
  bounded_float,
)

# Serialization
from valuewarden.serde import from_json, from_python, to_json, to_python

# Strings
from valuewarden.string import NonBlankString, NonEmptyString, ValidatedString

# Validators
from valuewarden.validators import Between, NonBlankText, NonEmptyText, NotEmpty

__all__ = [
  "Between",
  "BlankStringError",
  "BoundedF32",
  "BoundedF64",
  "BoundedFloat",
  "BoundedI8",
  "BoundedI16",
  "BoundedI32",
  "BoundedI64",
  "BoundedI128",
  "BoundedInt",
  "BoundedIsize",
  "BoundedNumber",
  "BoundedU8",
  "BoundedU16",
  "BoundedU32",
  "BoundedU64",
  "BoundedU128",
  "BoundedUsize",
  "CollectionContentError",
  "Constrained",
  "ConstraintError",
  "EmptyCollectionError",
  "EmptyStringError",
  "ErrorKind",
  "LogicError",
  "NonBlankString",
  "NonBlankText",
  "NonEmptyCollection",
  "NonEmptyDeque",
  "NonEmptyDict",
  "NonEmptyFrozenSet",
  "NonEmptyIndex",
  "NonEmptyList",
  "NonEmptyOrderedDict",
  "NonEmptySeries",
  "NonEmptySet",
  "NonEmptyString",
  "NonEmptyText",
  "NonEmptyTuple",
  "NotEmpty",
  "OutOfBoundsError",
  "StringContentError",
  "TooHighError",
  "TooLowError",
  "ValidatedString",
  "Validator",
  "__version__",
  "bounded_float",
  "from_json",
  "from_python",
  "to_json",
  "to_python",
]
