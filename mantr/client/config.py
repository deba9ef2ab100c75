"""
Mantr API Client Configuration.

Configuration is frozen once a client is built. Options are plain callables
that take a config and return a new one with a single field overridden.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable

from mantr.config.constants import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from mantr.config.env import get_bool_env, get_float_env, get_str_env


@dataclass(frozen=True)
class MantrClientConfig:
  """Configuration for Mantr API clients."""

  # Connection settings
  base_url: str = DEFAULT_BASE_URL
  timeout: float = DEFAULT_HTTP_TIMEOUT

  # Request settings
  verify_ssl: bool = True

  def __post_init__(self):
    object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

  @classmethod
  def from_env(cls, prefix: str = "MANTR_") -> "MantrClientConfig":
    """
    Create configuration from environment variables.

    Args:
        prefix: Environment variable prefix

    Returns:
        MantrClientConfig instance
    """
    defaults = cls()
    return cls(
      base_url=get_str_env(prefix + "BASE_URL", defaults.base_url),
      timeout=get_float_env(prefix + "TIMEOUT", defaults.timeout),
      verify_ssl=get_bool_env(prefix + "VERIFY_SSL", defaults.verify_ssl),
    )

  def with_overrides(self, **kwargs: Any) -> "MantrClientConfig":
    """
    Create a new config with overridden values.

    Args:
        **kwargs: Values to override

    Returns:
        New MantrClientConfig instance
    """
    return replace(self, **kwargs)


ClientOption = Callable[[MantrClientConfig], MantrClientConfig]


def with_base_url(url: str) -> ClientOption:
  """Point the client at a different endpoint."""

  def option(config: MantrClientConfig) -> MantrClientConfig:
    return config.with_overrides(base_url=url)

  return option


def with_timeout(seconds: float) -> ClientOption:
  """Override the per-call transport timeout."""

  def option(config: MantrClientConfig) -> MantrClientConfig:
    return config.with_overrides(timeout=seconds)

  return option


def with_verify_ssl(verify: bool) -> ClientOption:
  """Enable or disable TLS certificate verification."""

  def option(config: MantrClientConfig) -> MantrClientConfig:
    return config.with_overrides(verify_ssl=verify)

  return option
