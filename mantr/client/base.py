"""
Base Mantr API Client.

Shared functionality for the sync and async clients: credential checks,
option handling, request preparation and response mapping. Subclasses only
own the transport.
"""

import time
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urljoin

import httpx
from pydantic import ValidationError

from mantr.config.constants import API_KEY_PREFIX, USER_AGENT, WALK_PATH
from mantr.logger import client_logger, log_api_call, log_client_error, mask_api_key
from mantr.models.walk import WalkRequest, WalkResponse
from .config import ClientOption, MantrClientConfig
from .exceptions import (
  MantrAPIError,
  MantrAuthenticationError,
  MantrDecodeError,
  MantrFormatError,
  MantrInsufficientCreditsError,
  MantrRateLimitError,
  MantrTimeoutError,
  MantrTransportError,
  MantrValidationError,
)

WalkInput = Union[WalkRequest, Mapping[str, Any]]


class BaseMantrClient:
  """Base class for Mantr API clients with shared functionality."""

  def __init__(
    self,
    api_key: str,
    *options: ClientOption,
    config: Optional[MantrClientConfig] = None,
  ):
    """
    Initialize the client.

    Args:
        api_key: Mantr API key, must start with ``vak_``
        *options: Config overrides applied in order
        config: Starting configuration (defaults to production settings)

    Raises:
        MantrFormatError: If the API key is malformed
    """
    self._validate_api_key(api_key)
    self._api_key = api_key

    config = config or MantrClientConfig()
    for option in options:
      config = option(config)
    self.config = config

    client_logger.debug(
      f"Mantr client configured for {self.config.base_url} "
      f"(key {mask_api_key(api_key)}, timeout {self.config.timeout}s)"
    )

  @staticmethod
  def _validate_api_key(api_key: str) -> None:
    if (
      not isinstance(api_key, str)
      or len(api_key) < len(API_KEY_PREFIX)
      or api_key[: len(API_KEY_PREFIX)] != API_KEY_PREFIX
    ):
      raise MantrFormatError(
        f"invalid API key format, must start with '{API_KEY_PREFIX}'"
      )

  def _build_headers(self) -> Dict[str, str]:
    return {
      "Content-Type": "application/json",
      "Authorization": f"Bearer {self._api_key}",
      "User-Agent": USER_AGENT,
    }

  def _build_url(self, path: str) -> str:
    """Build full URL from base and path."""
    if path.startswith("/"):
      path = path[1:]
    return urljoin(self.config.base_url + "/", path)

  def _prepare_walk(self, request: WalkInput) -> Dict[str, Any]:
    """
    Validate a walk request and build its JSON body.

    The caller's request is not modified; defaults are applied to a copy.

    Raises:
        MantrValidationError: If the request is malformed
    """
    if not isinstance(request, WalkRequest):
      try:
        request = WalkRequest.model_validate(request)
      except ValidationError as e:
        error = MantrValidationError(f"invalid walk request: {e}")
        log_client_error(error, "walk")
        raise error from e

    if not request.phonemes:
      error = MantrValidationError("phonemes cannot be empty")
      log_client_error(error, "walk")
      raise error

    return request.with_defaults().to_payload()

  def _convert_transport_error(self, error: httpx.HTTPError) -> MantrTransportError:
    if isinstance(error, httpx.TimeoutException):
      converted: MantrTransportError = MantrTimeoutError(f"request timeout: {error}")
    else:
      converted = MantrTransportError(f"HTTP request failed: {error}")
    log_client_error(converted, "walk", metadata={"base_url": self.config.base_url})
    return converted

  def _handle_walk_response(
    self, response: httpx.Response, started_at: float
  ) -> WalkResponse:
    """
    Map a walk reply to a result or an exception.

    Status codes are checked in order: 401, 402, 429, any other non-200.

    Raises:
        MantrAPIError: Or one of its subclasses for non-200 replies
        MantrDecodeError: If a 200 body is not a valid walk response
    """
    duration_ms = (time.time() - started_at) * 1000
    status_code = response.status_code

    if status_code != 200:
      log_api_call("POST", WALK_PATH, status_code, duration_ms)
      error = self._handle_response_error(response)
      log_client_error(error, "walk", metadata={"status_code": status_code})
      raise error

    try:
      walk_response = WalkResponse.model_validate(response.json())
    except ValueError as e:
      # Covers JSONDecodeError, UnicodeDecodeError and pydantic ValidationError
      error = MantrDecodeError(f"failed to decode response: {e}", status_code)
      log_client_error(error, "walk")
      raise error from e

    log_api_call(
      "POST",
      WALK_PATH,
      status_code,
      duration_ms,
      credits_used=walk_response.credits_used,
    )
    return walk_response

  def _handle_response_error(self, response: httpx.Response) -> MantrAPIError:
    """
    Convert a non-200 reply to the matching exception.

    Args:
        response: The HTTP reply

    Returns:
        Appropriate MantrAPIError subclass
    """
    status_code = response.status_code
    response_data = self._read_error_body(response)

    if status_code == 401:
      return MantrAuthenticationError(response_data=response_data)
    elif status_code == 402:
      return MantrInsufficientCreditsError(response_data=response_data)
    elif status_code == 429:
      return MantrRateLimitError(
        response_data=response_data,
        retry_after=self._parse_retry_after(response),
      )
    return MantrAPIError(
      f"API error: status {status_code}", status_code, response_data
    )

  @staticmethod
  def _read_error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
      data = response.json()
    except ValueError:
      return {"detail": response.text} if response.text else None
    return data if isinstance(data, dict) else {"detail": data}

  @staticmethod
  def _parse_retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    if value is None:
      return None
    try:
      return float(value)
    except ValueError:
      # HTTP-date form is not interpreted
      return None
