"""
Synchronous Mantr API Client.

Blocking client for the walk endpoint. One call is one HTTP request: no
retries, no caching.
"""

import time
from typing import Optional

import httpx

from mantr.config.constants import WALK_PATH
from mantr.models.walk import WalkResponse
from .base import BaseMantrClient, WalkInput
from .config import ClientOption, MantrClientConfig


class MantrClient(BaseMantrClient):
  """Blocking client for Mantr API operations."""

  def __init__(
    self,
    api_key: str,
    *options: ClientOption,
    config: Optional[MantrClientConfig] = None,
  ):
    """
    Initialize synchronous Mantr client.

    No network I/O happens here; connections are opened lazily by httpx.

    Args:
        api_key: Mantr API key, must start with ``vak_``
        *options: Config overrides such as ``with_base_url(...)``
        config: Starting configuration
    """
    super().__init__(api_key, *options, config=config)

    self.client = httpx.Client(
      timeout=httpx.Timeout(self.config.timeout),
      headers=self._build_headers(),
      verify=self.config.verify_ssl,
      follow_redirects=True,
    )

  def __enter__(self):
    """Context manager entry."""
    return self

  def __exit__(self, exc_type, exc_val, exc_tb):
    """Context manager exit."""
    self.close()

  def close(self):
    """Close the client and release pooled connections."""
    self.client.close()

  def walk(self, request: WalkInput) -> WalkResponse:
    """
    Traverse the semantic graph.

    Safe to call from several threads at once; each call works on its own
    copy of the request.

    Args:
        request: Walk parameters; ``phonemes`` must be nonempty

    Returns:
        Decoded walk response

    Raises:
        MantrValidationError: If the request is malformed (no I/O performed)
        MantrTransportError: On network failure or timeout
        MantrAuthenticationError: 401
        MantrInsufficientCreditsError: 402
        MantrRateLimitError: 429
        MantrAPIError: Any other non-200 status
        MantrDecodeError: If the 200 body cannot be decoded
    """
    payload = self._prepare_walk(request)

    started_at = time.time()
    try:
      response = self.client.request(
        method="POST", url=self._build_url(WALK_PATH), json=payload
      )
    except httpx.RequestError as e:
      raise self._convert_transport_error(e) from e

    try:
      return self._handle_walk_response(response, started_at)
    finally:
      response.close()
