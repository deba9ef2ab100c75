"""
Mantr - Python client for the Mantr semantic graph API.

  from mantr import MantrClient, WalkRequest

  with MantrClient("vak_...") as client:
    result = client.walk(WalkRequest(phonemes=["om", "ah"]))
"""

from .client import (
  AsyncMantrClient,
  MantrAPIError,
  MantrAuthenticationError,
  MantrClient,
  MantrClientConfig,
  MantrDecodeError,
  MantrError,
  MantrFormatError,
  MantrInsufficientCreditsError,
  MantrRateLimitError,
  MantrTimeoutError,
  MantrTransportError,
  MantrValidationError,
  get_async_mantr_client,
  get_mantr_client,
  with_base_url,
  with_timeout,
  with_verify_ssl,
)
from .config.constants import CLIENT_VERSION
from .config.logging import setup_logging
from .models import PathResult, WalkRequest, WalkResponse

__version__ = CLIENT_VERSION

__all__ = [
  "AsyncMantrClient",
  "MantrAPIError",
  "MantrAuthenticationError",
  "MantrClient",
  "MantrClientConfig",
  "MantrDecodeError",
  "MantrError",
  "MantrFormatError",
  "MantrInsufficientCreditsError",
  "MantrRateLimitError",
  "MantrTimeoutError",
  "MantrTransportError",
  "MantrValidationError",
  "PathResult",
  "WalkRequest",
  "WalkResponse",
  "get_async_mantr_client",
  "get_mantr_client",
  "setup_logging",
  "with_base_url",
  "with_timeout",
  "with_verify_ssl",
]
