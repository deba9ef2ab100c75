"""
Mantr Pydantic models for request/response validation.
"""

from .walk import PathResult, WalkRequest, WalkResponse

__all__ = [
  "PathResult",
  "WalkRequest",
  "WalkResponse",
]
