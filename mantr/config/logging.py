"""
Structured Logging Configuration for the Mantr client.

Produces one JSON object per log record so that request outcomes can be
searched by status code, duration or credit usage. Nothing is configured
on import: ``setup_logging`` is opt-in and only touches the ``mantr`` logger
namespace, leaving the root logger and third-party loggers alone.

Levels by environment:
- prod (also "production" and unrecognised names): INFO, structured output
- staging: INFO, structured output plus debug records
- test: WARNING, minimal output for clean test runs
- dev: MANTR_LOG_LEVEL or DEBUG, plain console output
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from mantr.config.env import EnvConfig

APP_LOGGERS = ["mantr", "mantr.client"]


class StructuredFormatter(logging.Formatter):
  """
  JSON formatter for searchable client logs.

  Output format:
  - Timestamp in ISO format
  - Consistent field names for filtering
  - Component/action structure
  - Metadata preserved as searchable fields
  """

  OPTIONAL_FIELDS = (
    "action",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "credits_used",
    "metadata",
  )

  def format(self, record: logging.LogRecord) -> str:
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
      .isoformat()
      .replace("+00:00", "Z"),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    for field_name in self.OPTIONAL_FIELDS:
      if hasattr(record, field_name):
        log_entry[field_name] = getattr(record, field_name)

    # Error details for ERROR/CRITICAL logs
    if record.levelno >= logging.ERROR and record.exc_info:
      log_entry["error"] = {
        "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
        "message": str(record.exc_info[1]) if record.exc_info[1] else "",
        "traceback": traceback.format_exception(*record.exc_info),
      }

    if hasattr(record, "error_category"):
      log_entry["error_category"] = record.error_category

    return json.dumps(log_entry, default=str, separators=(",", ":"))


class TieredLogFilter:
  """
  Filter logs by tier.

  Tier 1 (critical): ERROR, CRITICAL
  Tier 2 (operational): INFO, WARNING
  Tier 3 (debug): DEBUG
  """

  def __init__(self, tier: str):
    self.tier = tier

  def filter(self, record: logging.LogRecord) -> bool:
    if self.tier == "critical":
      return record.levelno >= logging.ERROR
    elif self.tier == "operational":
      return logging.INFO <= record.levelno < logging.ERROR
    elif self.tier == "debug":
      return record.levelno == logging.DEBUG
    return True


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """Generate logging configuration based on environment."""
  is_dev = EnvConfig.is_development(environment)

  if EnvConfig.is_staging(environment):
    default_level = "INFO"
    enable_debug = True
  elif EnvConfig.is_test(environment):
    default_level = "WARNING"
    enable_debug = False
  elif is_dev:
    default_level = (EnvConfig.LOG_LEVEL or "DEBUG").upper()
    enable_debug = default_level == "DEBUG"
  else:  # prod, and any unrecognised name
    default_level = "INFO"
    enable_debug = False

  app_handlers = ["console"] if is_dev else ["critical", "operational"]

  config: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {
        "()": StructuredFormatter,
      },
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "filters": {
      "critical_filter": {"()": TieredLogFilter, "tier": "critical"},
      "operational_filter": {"()": TieredLogFilter, "tier": "operational"},
      "debug_filter": {"()": TieredLogFilter, "tier": "debug"},
    },
    "handlers": {
      "critical": {
        "class": "logging.StreamHandler",
        "level": "ERROR",
        "formatter": "structured",
        "filters": ["critical_filter"],
        "stream": "ext://sys.stderr",
      },
      "operational": {
        "class": "logging.StreamHandler",
        "level": "INFO",
        "formatter": "structured",
        "filters": ["operational_filter"],
        "stream": "ext://sys.stdout",
      },
      "console": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "simple" if is_dev else "structured",
        "stream": "ext://sys.stdout",
      },
    },
    "loggers": {
      name: {
        "level": default_level,
        "handlers": list(app_handlers),
        "propagate": False,
      }
      for name in APP_LOGGERS
    },
  }

  if enable_debug:
    config["handlers"]["debug"] = {
      "class": "logging.StreamHandler",
      "level": "DEBUG",
      "formatter": "structured",
      "filters": ["debug_filter"],
      "stream": "ext://sys.stdout",
    }
    if not is_dev:
      for logger_name in APP_LOGGERS:
        config["loggers"][logger_name]["handlers"].append("debug")

  return config


def setup_logging(environment: str | None = None) -> None:
  """Initialize structured logging configuration."""
  logging.config.dictConfig(get_logging_config(environment))


def get_logger(name: str) -> logging.Logger:
  """Get a logger with structured logging capabilities."""
  return logging.getLogger(name)


def log_api_request(
  logger: logging.Logger,
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  credits_used: int | None = None,
  slow_threshold_ms: float | None = None,
) -> None:
  """Log a completed API call with structured data."""
  extra: dict[str, Any] = {
    "component": "client",
    "action": "request_completed",
    "method": method,
    "path": path,
    "status_code": status_code,
    "duration_ms": duration_ms,
  }
  if credits_used is not None:
    extra["credits_used"] = credits_used

  message = f"{method} {path} - {status_code} ({duration_ms:.2f}ms)"
  if slow_threshold_ms is not None and duration_ms > slow_threshold_ms:
    logger.warning(f"Slow request: {message}", extra=extra)
  else:
    logger.info(message, extra=extra)


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "client",
  metadata: dict[str, Any] | None = None,
) -> None:
  """Log an error that is about to be raised to the caller."""
  logger.warning(
    f"Error in {component}.{action}: {error!s}",
    extra={
      "component": component,
      "action": action,
      "error_category": error_category,
      "metadata": metadata or {},
    },
  )
