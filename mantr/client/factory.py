"""
Mantr Client Factory.

Builds clients from the environment: ``MANTR_API_KEY`` for the credential
and ``MANTR_BASE_URL`` / ``MANTR_TIMEOUT`` / ``MANTR_VERIFY_SSL`` for the
connection settings. Explicit arguments and options take precedence.
"""

from typing import Optional

from mantr.config.env import get_str_env
from .async_client import AsyncMantrClient
from .client import MantrClient
from .config import ClientOption, MantrClientConfig


def _resolve_api_key(api_key: Optional[str]) -> str:
  return api_key if api_key is not None else get_str_env("MANTR_API_KEY")


def get_mantr_client(
  api_key: Optional[str] = None, *options: ClientOption
) -> MantrClient:
  """
  Create a blocking client configured from the environment.

  Raises:
      MantrFormatError: If no valid API key is given or set
  """
  return MantrClient(
    _resolve_api_key(api_key), *options, config=MantrClientConfig.from_env()
  )


def get_async_mantr_client(
  api_key: Optional[str] = None, *options: ClientOption
) -> AsyncMantrClient:
  """Create an async client configured from the environment."""
  return AsyncMantrClient(
    _resolve_api_key(api_key), *options, config=MantrClientConfig.from_env()
  )
