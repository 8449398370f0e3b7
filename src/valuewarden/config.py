"""Global configuration for the valuewarden library."""

from __future__ import annotations

import contextlib
import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator


@dataclasses.dataclass
class Config:
  """Global configuration settings.

  None of these settings change what a validating constructor accepts.

  Attributes:
    audit_unchecked: Re-run the validator inside ``new_unchecked`` and log a
      warning when the caller's precondition does not hold (default: False).
      The instance is still returned; the call never raises.
    log_rejections: Log a debug message whenever deserialization rejects a
      value, before the error propagates (default: False).
  """

  audit_unchecked: bool = False
  log_rejections: bool = False


_FIELDS = frozenset(f.name for f in dataclasses.fields(Config))


# Singleton instance
_config = Config()


def get_config() -> Config:
  """Get the global configuration."""
  return _config


def reset_config() -> None:
  """Reset configuration to defaults (mostly for testing)."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Context manager to temporarily override configuration.

  Useful for:
  - Auditing trusted call sites while debugging (audit_unchecked=True)
  - Tracing rejected payloads from an API boundary (log_rejections=True)

  Example:
    ```python
    with overrides(audit_unchecked=True):
      rows = [Percent.new_unchecked(r) for r in load_rows()]
    ```

  Raises:
    AttributeError: If any key is not a Config field. Nothing is changed in
      that case.
  """
  unknown = [key for key in kwargs if key not in _FIELDS]
  if unknown:
    raise AttributeError(f"Config has no attribute {', '.join(map(repr, unknown))}")

  config = get_config()
  previous = dataclasses.replace(config)
  try:
    for key, value in kwargs.items():
      setattr(config, key, value)
    yield
  finally:
    for key in kwargs:
      setattr(config, key, getattr(previous, key))
