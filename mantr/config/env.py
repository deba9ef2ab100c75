"""
Centralized environment variable configuration.

This module provides a single source of truth for the environment variables
read by the Mantr client, with type conversions and default values.

Nothing here is consulted by ``MantrClient`` itself; the factory functions,
``MantrClientConfig.from_env`` and the logging setup are the only readers.
"""

import os
from typing import Optional


# ==========================================================================
# HELPER FUNCTIONS FOR TYPE-SAFE ENVIRONMENT VARIABLE ACCESS
# ==========================================================================


def get_float_env(key: str, default: float) -> float:
  """
  Get a float environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Float value from environment or default
  """
  try:
    return float(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    # Use print instead of logger to avoid circular import
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_bool_env(key: str, default: bool = False) -> bool:
  """
  Get a boolean environment variable.

  Args:
      key: Environment variable name
      default: Default value if not set

  Returns:
      Boolean value from environment or default
  """
  value = os.getenv(key, str(default)).lower()
  return value in ("true", "1", "yes", "on")


def get_str_env(key: str, default: str = "") -> str:
  """Get a string environment variable."""
  return os.getenv(key, default)


# ==========================================================================
# MAIN CONFIGURATION CLASS
# ==========================================================================


class EnvConfig:
  """
  Environment variable configuration for the Mantr client.

  Class attributes are resolved once at import time. Client settings are
  read at call time through the helper functions instead.
  """

  # Environment and logging
  ENVIRONMENT = get_str_env("MANTR_ENVIRONMENT", "prod")
  LOG_LEVEL = get_str_env("MANTR_LOG_LEVEL")

  @classmethod
  def _environment(cls, environment: Optional[str]) -> str:
    return (environment or cls.ENVIRONMENT).lower()

  @classmethod
  def is_production(cls, environment: Optional[str] = None) -> bool:
    """Check if running in production environment."""
    return cls._environment(environment) in ["prod", "production"]

  @classmethod
  def is_staging(cls, environment: Optional[str] = None) -> bool:
    """Check if running in staging environment."""
    return cls._environment(environment) in ["staging", "stage"]

  @classmethod
  def is_development(cls, environment: Optional[str] = None) -> bool:
    """Check if running in development environment."""
    return cls._environment(environment) in ["dev", "development", "local"]

  @classmethod
  def is_test(cls, environment: Optional[str] = None) -> bool:
    """Check if running in test environment."""
    return cls._environment(environment) in ["test", "testing"]
