"""Process runtime helpers."""

from .boundary import fatal_boundary

__all__ = ["fatal_boundary"]
