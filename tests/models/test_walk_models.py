"""Tests for walk request/response models."""

import pytest
from pydantic import ValidationError

from mantr.models import PathResult, WalkRequest, WalkResponse


class TestWalkRequest:
  """Test cases for WalkRequest."""

  def test_defaults(self):
    """Test the unset values of a request."""
    request = WalkRequest(phonemes=["om"])

    assert request.pod is None
    assert request.depth == 0
    assert request.limit == 0

  def test_with_defaults_fills_zero_values(self):
    """Test that zero depth and limit become 3 and 100."""
    request = WalkRequest(phonemes=["om"])
    effective = request.with_defaults()

    assert effective.depth == 3
    assert effective.limit == 100
    assert effective.phonemes == ["om"]
    assert request.depth == 0
    assert request.limit == 0

  def test_with_defaults_keeps_explicit_values(self):
    """Test that explicit values are not overridden."""
    effective = WalkRequest(phonemes=["om"], depth=5, limit=10).with_defaults()

    assert effective.depth == 5
    assert effective.limit == 10

  def test_payload_omits_empty_fields(self):
    """Test that empty pod and zero depth/limit are left out."""
    payload = WalkRequest(phonemes=["a", "b"]).to_payload()

    assert payload == {"phonemes": ["a", "b"]}

  def test_payload_preserves_phoneme_order(self):
    """Test that phonemes are serialized in the given order."""
    payload = WalkRequest(
      phonemes=["z", "a", "m"], pod="vedic", depth=2, limit=20
    ).to_payload()

    assert payload == {"phonemes": ["z", "a", "m"], "pod": "vedic", "depth": 2, "limit": 20}

  def test_empty_pod_omitted(self):
    """Test that an empty string pod is treated as unset."""
    assert "pod" not in WalkRequest(phonemes=["a"], pod="").to_payload()

  def test_request_is_frozen(self):
    """Test that requests cannot be reassigned."""
    request = WalkRequest(phonemes=["a"])

    with pytest.raises(ValidationError):
      request.depth = 9

  def test_unknown_fields_rejected(self):
    """Test that unknown fields fail validation."""
    with pytest.raises(ValidationError):
      WalkRequest(phonemes=["a"], hops=2)


class TestWalkResponse:
  """Test cases for WalkResponse and PathResult."""

  def test_decode_full_body(self):
    """Test decoding a complete reply."""
    response = WalkResponse.model_validate(
      {
        "paths": [
          {"nodes": ["a", "b"], "score": 0.9, "depth": 2},
          {"nodes": ["a", "c", "d"], "score": 0.4, "depth": 3},
        ],
        "latency_us": 1500,
        "credits_used": 3,
      }
    )

    assert [p.nodes for p in response.paths] == [["a", "b"], ["a", "c", "d"]]
    assert response.paths[1] == PathResult(nodes=["a", "c", "d"], score=0.4, depth=3)
    assert response.latency_us == 1500
    assert response.credits_used == 3

  def test_null_lists_decode_as_empty(self):
    """Test that null lists decode as empty lists."""
    response = WalkResponse.model_validate(
      {"paths": [{"nodes": None, "score": 1, "depth": 0}]}
    )

    assert response.paths[0].nodes == []
    assert response.paths[0].score == 1.0

  def test_unknown_fields_ignored(self):
    """Test that new server fields do not break decoding."""
    response = WalkResponse.model_validate({"paths": [], "request_id": "r-1"})

    assert response.paths == []

  def test_response_is_frozen(self):
    """Test that decoded responses are immutable."""
    response = WalkResponse()

    with pytest.raises(ValidationError):
      response.credits_used = 10

  @pytest.mark.parametrize(
    "body",
    [
      {"latency_us": "1500"},
      {"credits_used": "3"},
      {"latency_us": 1.5},
      {"paths": [{"nodes": ["a"], "score": "0.9"}]},
      {"paths": [{"nodes": ["a"], "depth": "2"}]},
    ],
  )
  def test_quoted_numbers_rejected(self, body):
    """Test that numeric fields do not accept strings or fractional ints."""
    with pytest.raises(ValidationError):
      WalkResponse.model_validate(body)

  def test_integer_score_accepted(self):
    """Test that a whole-number score still decodes as a float."""
    response = WalkResponse.model_validate({"paths": [{"nodes": ["a"], "score": 1}]})

    assert response.paths[0].score == 1.0
    assert isinstance(response.paths[0].score, float)
