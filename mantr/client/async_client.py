"""
Asynchronous Mantr API Client.

Same contract as ``MantrClient`` over ``httpx.AsyncClient``.
"""

import time
from typing import Optional

import httpx

from mantr.config.constants import WALK_PATH
from mantr.models.walk import WalkResponse
from .base import BaseMantrClient, WalkInput
from .config import ClientOption, MantrClientConfig


class AsyncMantrClient(BaseMantrClient):
  """Asynchronous client for Mantr API operations."""

  def __init__(
    self,
    api_key: str,
    *options: ClientOption,
    config: Optional[MantrClientConfig] = None,
  ):
    """
    Initialize asynchronous Mantr client.

    Args:
        api_key: Mantr API key, must start with ``vak_``
        *options: Config overrides such as ``with_base_url(...)``
        config: Starting configuration
    """
    super().__init__(api_key, *options, config=config)

    self.client = httpx.AsyncClient(
      timeout=httpx.Timeout(self.config.timeout),
      headers=self._build_headers(),
      verify=self.config.verify_ssl,
      follow_redirects=True,
    )

  async def __aenter__(self):
    """Async context manager entry."""
    return self

  async def __aexit__(self, exc_type, exc_val, exc_tb):
    """Async context manager exit."""
    await self.close()

  async def close(self):
    """Close the client and cleanup resources."""
    await self.client.aclose()

  async def walk(self, request: WalkInput) -> WalkResponse:
    """Traverse the semantic graph. See ``MantrClient.walk``."""
    payload = self._prepare_walk(request)

    started_at = time.time()
    try:
      response = await self.client.request(
        method="POST", url=self._build_url(WALK_PATH), json=payload
      )
    except httpx.RequestError as e:
      raise self._convert_transport_error(e) from e

    try:
      return self._handle_walk_response(response, started_at)
    finally:
      await response.aclose()
