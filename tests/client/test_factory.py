"""Tests for environment-driven client construction."""

import pytest

from mantr import (
  AsyncMantrClient,
  MantrClient,
  MantrFormatError,
  get_async_mantr_client,
  get_mantr_client,
  with_timeout,
)


@pytest.fixture
def clean_env(monkeypatch):
  for name in ("MANTR_API_KEY", "MANTR_BASE_URL", "MANTR_TIMEOUT", "MANTR_VERIFY_SSL"):
    monkeypatch.delenv(name, raising=False)
  return monkeypatch


def test_get_mantr_client_reads_environment(clean_env, api_key):
  clean_env.setenv("MANTR_API_KEY", api_key)
  clean_env.setenv("MANTR_BASE_URL", "http://localhost:8080")

  with get_mantr_client() as client:
    assert isinstance(client, MantrClient)
    assert client.config.base_url == "http://localhost:8080"
    assert client.client.headers["Authorization"] == f"Bearer {api_key}"


def test_explicit_key_and_options_take_precedence(clean_env):
  clean_env.setenv("MANTR_API_KEY", "vak_from_env")
  clean_env.setenv("MANTR_TIMEOUT", "10")

  with get_mantr_client("vak_explicit", with_timeout(2)) as client:
    assert client.client.headers["Authorization"] == "Bearer vak_explicit"
    assert client.config.timeout == 2


def test_missing_key_is_format_error(clean_env):
  with pytest.raises(MantrFormatError):
    get_mantr_client()


@pytest.mark.asyncio
async def test_get_async_mantr_client(clean_env, api_key):
  clean_env.setenv("MANTR_API_KEY", api_key)

  client = get_async_mantr_client()
  try:
    assert isinstance(client, AsyncMantrClient)
    assert client.config.base_url == "https://api.mantr.net"
  finally:
    await client.close()


def test_invalid_timeout_falls_back_to_default(clean_env, api_key):
  clean_env.setenv("MANTR_TIMEOUT", "thirty")

  with get_mantr_client(api_key) as client:
    assert client.config.timeout == 30
