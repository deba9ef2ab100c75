"""
Mantr API Client - access to the Mantr semantic graph walk endpoint.

Provides a blocking client, an asyncio client and the exception hierarchy
shared by both.
"""

from .async_client import AsyncMantrClient
from .client import MantrClient
from .config import (
  ClientOption,
  MantrClientConfig,
  with_base_url,
  with_timeout,
  with_verify_ssl,
)
from .exceptions import (
  MantrAPIError,
  MantrAuthenticationError,
  MantrDecodeError,
  MantrError,
  MantrFormatError,
  MantrInsufficientCreditsError,
  MantrRateLimitError,
  MantrTimeoutError,
  MantrTransportError,
  MantrValidationError,
)
from .factory import get_async_mantr_client, get_mantr_client

__all__ = [
  "AsyncMantrClient",
  "ClientOption",
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
  "get_async_mantr_client",
  "get_mantr_client",
  "with_base_url",
  "with_timeout",
  "with_verify_ssl",
]
