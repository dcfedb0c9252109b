"""Tag resolution: canonical keys, aliases, and localized labels."""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from domain.tags.index import TagIndex, build_indexes, fold_tag_key
from domain.tags.schemas import TagEntry, TagLabel, resolve_lang
from domain.tags.validation import validate_tag_table

logger = logging.getLogger(__name__)


class TableSource(Protocol):
    """Anything that can obtain a raw tag table and hand it to `install`."""

    def request(self, install: Callable[[Any], bool]) -> None: ...


class TagResolver:
    """
    Resolve free-form tag strings to canonical keys and display labels.

    The table is loaded lazily on the first query and installed at most once;
    until then (or if loading fails) every query falls back to returning its
    input unchanged (or an empty list for `get_all_tags`). No query raises.
    """

    def __init__(self, source: TableSource | None = None) -> None:
        self._source = source
        self._table: dict[str, TagEntry] | None = None
        self._index: TagIndex | None = None
        self._warned_rejected = False

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    def set_tag_table(self, data: Any) -> bool:
        """Validate and install a raw table. Returns True if it was accepted."""
        if self._table is not None:
            return False
        table = validate_tag_table(data)
        if table is None:
            # Sources retry on every query until a table installs; warn once
            log = logger.debug if self._warned_rejected else logger.warning
            log("Tag table rejected by shape check; queries fall back to their input")
            self._warned_rejected = True
            return False
        self._table = table
        self._index = build_indexes(table)
        logger.info("Tag table installed (%d entries)", len(table))
        return True

    def ensure_loaded(self) -> None:
        """Ask the source for a table unless one is already installed."""
        if self._table is not None or self._source is None:
            return
        self._source.request(self.set_tag_table)

    def normalize_tag(self, tag: object) -> str:
        """
        Map a tag (canonical key, alias, or unknown text) to its canonical key.

        Examples:
            >>> resolver.normalize_tag("CAT_A")
            'cat-a'
            >>> resolver.normalize_tag("  Cat-A ")
            'cat-a'
            >>> resolver.normalize_tag("unknown-tag")
            'unknown-tag'

        Returns:
            The canonical key if found, otherwise the original string;
            "" for non-string, empty, or (once loaded) whitespace-only input
        """
        if not isinstance(tag, str) or not tag:
            return ""
        self.ensure_loaded()

        if self._index is None:
            return tag

        folded = fold_tag_key(tag)
        if not folded:
            return ""
        return self._index.lookup(folded) or tag

    def translate_tag(self, tag: object, lang: object = "en") -> str:
        """Translate a tag to `lang` ("zh", anything else means "en"); unknown tags come back as-is."""
        if not isinstance(tag, str) or not tag:
            return ""
        self.ensure_loaded()

        if self._table is None:
            return tag

        canonical = self.normalize_tag(tag)
        entry = self._table.get(canonical) if canonical else None
        if entry is None:
            return tag

        translated = entry.label(lang)
        return translated if translated else tag

    def get_all_tags(self, lang: object = "en") -> list[TagLabel]:
        """
        All canonical keys in table order with their labels in `lang` (no fallback).

        Items are `TagLabel` models, not dicts; use `model_dump()` for the
        plain `{"key": ..., "label": ...}` form.

        Examples:
            >>> [t.model_dump() for t in resolver.get_all_tags("en")]
            [{'key': 'cat-a', 'label': 'Cat A'}]

        Returns:
            One TagLabel per canonical key; [] when no table is loaded
        """
        self.ensure_loaded()
        if self._table is None:
            return []

        field_name = resolve_lang(lang)
        return [TagLabel(key=key, label=getattr(entry, field_name)) for key, entry in self._table.items()]
