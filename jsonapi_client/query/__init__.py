"""Query building for JSON:API requests."""

from .builder import SORT_DIRECTIONS, Query

__all__ = ["Query", "SORT_DIRECTIONS"]
