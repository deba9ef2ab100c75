"""
Mantr API Client Exceptions.

Defines the exception hierarchy raised by Mantr client operations. Every
failure reaches the caller as one of these types; nothing is retried.
"""

from typing import Optional, Dict, Any


class MantrError(Exception):
  """Base exception for all Mantr client errors."""

  def __init__(
    self,
    message: str,
    status_code: Optional[int] = None,
    response_data: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.status_code = status_code
    self.response_data = response_data


class MantrFormatError(MantrError):
  """Malformed API key, detected before any I/O."""

  pass


class MantrValidationError(MantrError):
  """Malformed walk request, detected before any I/O."""

  pass


class MantrTransportError(MantrError):
  """
  Network failure reaching the service.

  Examples: DNS failure, connection refused, connection reset
  """

  pass


class MantrTimeoutError(MantrTransportError):
  """Request exceeded the configured transport timeout."""

  pass


class MantrAPIError(MantrError):
  """
  The service answered with a non-success status.

  ``status_code`` always holds the HTTP status of the reply.
  """

  def __init__(
    self,
    message: str,
    status_code: int,
    response_data: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message, status_code, response_data)


class MantrAuthenticationError(MantrAPIError):
  """The service rejected the API key (401)."""

  def __init__(
    self,
    message: str = "authentication failed - invalid API key",
    status_code: int = 401,
    response_data: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message, status_code, response_data)


class MantrInsufficientCreditsError(MantrAPIError):
  """The account has no credits left (402)."""

  def __init__(
    self,
    message: str = "insufficient credits",
    status_code: int = 402,
    response_data: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message, status_code, response_data)


class MantrRateLimitError(MantrAPIError):
  """
  The service is throttling this key (429).

  ``retry_after`` carries the Retry-After header in seconds when the
  service sent one.
  """

  def __init__(
    self,
    message: str = "rate limit exceeded",
    status_code: int = 429,
    response_data: Optional[Dict[str, Any]] = None,
    retry_after: Optional[float] = None,
  ):
    super().__init__(message, status_code, response_data)
    self.retry_after = retry_after


class MantrDecodeError(MantrError):
  """A 200 reply whose body is not a valid walk response."""

  pass
