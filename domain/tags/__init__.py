"""
Tag management: validation, indexing, and resolution.

Resolves free-form tag strings to canonical keys and localized labels.
All functions in this module are pure (no file or network I/O); tables
are obtained through a `TableSource` supplied by the infrastructure layer.
"""

from domain.tags.index import TagIndex, build_indexes, fold_tag_key
from domain.tags.resolver import TableSource, TagResolver
from domain.tags.schemas import Lang, TagEntry, TagLabel, resolve_lang
from domain.tags.validation import validate_tag_table

__all__ = [
    "TagResolver",
    "TableSource",
    "TagEntry",
    "TagLabel",
    "TagIndex",
    "Lang",
    "build_indexes",
    "fold_tag_key",
    "resolve_lang",
    "validate_tag_table",
]
