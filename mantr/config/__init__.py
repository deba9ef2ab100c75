"""
Configuration package for the Mantr client.

Constants fixed by the API contract, environment access helpers and the
structured logging setup.
"""

from .constants import (
  API_KEY_PREFIX,
  DEFAULT_BASE_URL,
  DEFAULT_HTTP_TIMEOUT,
  DEFAULT_WALK_DEPTH,
  DEFAULT_WALK_LIMIT,
  USER_AGENT,
  WALK_PATH,
)
from .env import EnvConfig

__all__ = [
  "API_KEY_PREFIX",
  "DEFAULT_BASE_URL",
  "DEFAULT_HTTP_TIMEOUT",
  "DEFAULT_WALK_DEPTH",
  "DEFAULT_WALK_LIMIT",
  "USER_AGENT",
  "WALK_PATH",
  "EnvConfig",
]
