"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- tags: tag table validation, alias indexing, and label resolution
"""

from domain.tags import TagEntry, TagLabel, TagResolver

__all__ = [
    "TagResolver",
    "TagEntry",
    "TagLabel",
]
