"""
Walk Pydantic models for request/response handling.

``WalkRequest`` is built by callers; ``WalkResponse`` and ``PathResult`` are
decoded from the service reply. Missing response fields decode to their zero
value; numeric fields are strict, so quoted numbers are rejected.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mantr.config.constants import DEFAULT_WALK_DEPTH, DEFAULT_WALK_LIMIT


class WalkRequest(BaseModel):
  """Request for a traversal of the semantic graph."""

  model_config = ConfigDict(frozen=True, extra="forbid")

  phonemes: List[str] = Field(
    default_factory=list, description="Ordered traversal seeds (must be nonempty)"
  )
  pod: Optional[str] = Field(
    default=None, description="Optional scoping identifier for the traversal"
  )
  depth: int = Field(default=0, description="Maximum walk depth (0 means default)")
  limit: int = Field(
    default=0, description="Maximum number of paths (0 means default)"
  )

  def with_defaults(self) -> "WalkRequest":
    """
    Return the effective request sent on the wire.

    Unset (zero) depth and limit are replaced with the service defaults.
    The receiver is left untouched.
    """
    return self.model_copy(
      update={
        "depth": self.depth or DEFAULT_WALK_DEPTH,
        "limit": self.limit or DEFAULT_WALK_LIMIT,
      }
    )

  def to_payload(self) -> Dict[str, Any]:
    """Serialize to the JSON body, omitting empty optional fields."""
    payload: Dict[str, Any] = {"phonemes": list(self.phonemes)}
    if self.pod:
      payload["pod"] = self.pod
    if self.depth:
      payload["depth"] = self.depth
    if self.limit:
      payload["limit"] = self.limit
    return payload


class PathResult(BaseModel):
  """A single path returned by a walk."""

  model_config = ConfigDict(frozen=True)

  nodes: List[str] = Field(default_factory=list, description="Node identifiers")
  score: float = Field(default=0.0, strict=True, description="Path score")
  depth: int = Field(default=0, strict=True, description="Path depth")

  @field_validator("nodes", mode="before")
  @classmethod
  def normalize_nodes(cls, v):
    """Treat a null node list as empty."""
    return [] if v is None else v


class WalkResponse(BaseModel):
  """Decoded reply of the walk endpoint."""

  model_config = ConfigDict(frozen=True)

  paths: List[PathResult] = Field(default_factory=list, description="Ranked paths")
  latency_us: int = Field(
    default=0, strict=True, description="Server latency in microseconds"
  )
  credits_used: int = Field(
    default=0, strict=True, description="Credits consumed by the call"
  )

  @field_validator("paths", mode="before")
  @classmethod
  def normalize_paths(cls, v):
    """Treat a null path list as empty."""
    return [] if v is None else v
