import pytest
from loguru import logger

from valuewarden.config import reset_config


@pytest.fixture(autouse=True)
def _reset_config():
  """Every test starts and ends with the default configuration."""
  reset_config()
  yield
  reset_config()


@pytest.fixture
def log_messages():
  """Capture loguru messages emitted during the test."""
  messages: list[str] = []
  handler_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG", format="{level} {message}")
  yield messages
  logger.remove(handler_id)
