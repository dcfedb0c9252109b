"""Shallow shape check for tag tables read from external sources."""

import logging
from typing import Any

from pydantic import ValidationError

from domain.tags.schemas import TagEntry

logger = logging.getLogger(__name__)


def validate_tag_table(data: Any) -> dict[str, TagEntry] | None:
    """
    Validate a raw tag table and return it as parsed entries.

    The table is rejected (None) when:
    - the root value is not a key -> object mapping,
    - it has no keys,
    - any entry is not an object or lacks string `en` / `zh` fields.

    Aliases are not checked here; bad alias values are skipped during indexing.

    Args:
        data: Value decoded from JSON (any type)

    Returns:
        Mapping of canonical key -> TagEntry in source order, or None if rejected
    """
    if not isinstance(data, dict):
        logger.debug("Tag table rejected: root is %s, expected an object", type(data).__name__)
        return None
    if not data:
        logger.debug("Tag table rejected: no entries")
        return None

    table: dict[str, TagEntry] = {}
    for key, entry in data.items():
        if not isinstance(key, str) or not isinstance(entry, dict):
            logger.debug("Tag table rejected: entry %r is not an object", key)
            return None
        try:
            table[key] = TagEntry.model_validate(entry)
        except ValidationError as e:
            logger.debug("Tag table rejected: entry %r (%d errors)", key, e.error_count())
            return None
    return table
