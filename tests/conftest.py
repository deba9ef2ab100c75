import os

import httpx
import pytest

# Quiet structured logging for test runs; must be set before mantr is imported
os.environ.setdefault("MANTR_ENVIRONMENT", "test")

VALID_API_KEY = "vak_test0123456789abcdef"
WALK_URL = "https://api.mantr.net/v1/walk"

SAMPLE_WALK_BODY = {
  "paths": [{"nodes": ["a", "b"], "score": 0.9, "depth": 2}],
  "latency_us": 1500,
  "credits_used": 3,
}


def build_response(
  status_code: int,
  json_body=None,
  content: bytes = b"",
  headers=None,
) -> httpx.Response:
  """Build a real httpx response as returned by the transport."""
  request = httpx.Request("POST", WALK_URL)
  if json_body is not None:
    return httpx.Response(
      status_code, json=json_body, headers=headers, request=request
    )
  return httpx.Response(status_code, content=content, headers=headers, request=request)


@pytest.fixture
def api_key():
  """A well-formed API key."""
  return VALID_API_KEY


@pytest.fixture
def make_response():
  """Factory for httpx responses."""
  return build_response


@pytest.fixture
def sample_walk_body():
  """A successful walk reply body."""
  return {
    "paths": [dict(path) for path in SAMPLE_WALK_BODY["paths"]],
    "latency_us": SAMPLE_WALK_BODY["latency_us"],
    "credits_used": SAMPLE_WALK_BODY["credits_used"],
  }
