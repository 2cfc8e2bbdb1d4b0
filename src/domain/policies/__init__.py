"""Domain policies package."""

from .direction import DEFAULT_DIRECTION, is_known_kind, resolve_direction

__all__ = ["DEFAULT_DIRECTION", "is_known_kind", "resolve_direction"]
