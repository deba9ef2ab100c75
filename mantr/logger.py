"""
Mantr client logging.

Exposes the loggers and helpers used by the client modules. The ``mantr``
logger is silent (``NullHandler``) unless the host configures logging or sets
``MANTR_ENVIRONMENT``, which opts in to the structured setup.
"""

import logging
from typing import Any, Dict, Optional

from .config.constants import SLOW_REQUEST_THRESHOLD_MS
from .config.env import get_str_env
from .config.logging import (
  get_logger,
  log_api_request,
  log_error,
  setup_logging,
)

logger = get_logger("mantr")
logger.addHandler(logging.NullHandler())

if get_str_env("MANTR_ENVIRONMENT"):
  setup_logging()

client_logger = get_logger("mantr.client")


def log_api_call(
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  credits_used: Optional[int] = None,
) -> None:
  """Log a completed API call, flagging slow ones."""
  log_api_request(
    client_logger,
    method,
    path,
    status_code,
    duration_ms,
    credits_used=credits_used,
    slow_threshold_ms=SLOW_REQUEST_THRESHOLD_MS,
  )


def log_client_error(
  error: Exception,
  action: str,
  metadata: Optional[Dict[str, Any]] = None,
) -> None:
  """Log a client error before it propagates to the caller."""
  log_error(client_logger, error, "client", action, metadata=metadata)


def mask_api_key(api_key: str) -> str:
  """Mask a credential for debug output."""
  return api_key[:8] + "..." if len(api_key) > 8 else "***"
