"""Lookup indexes derived from a loaded tag table."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from domain.tags.schemas import TagEntry


def fold_tag_key(tag: str) -> str:
    """Fold a tag for case/whitespace-insensitive matching: trim + lowercase."""
    return tag.strip().lower()


@dataclass(frozen=True)
class TagIndex:
    """Folded alias -> canonical and folded canonical -> canonical lookups."""

    alias_to_canonical: dict[str, str] = field(default_factory=dict)
    folded_canonical_to_canonical: dict[str, str] = field(default_factory=dict)

    def lookup(self, folded: str) -> str | None:
        """Resolve a folded tag; aliases take priority over canonical keys."""
        canonical = self.alias_to_canonical.get(folded)
        if canonical is None:
            canonical = self.folded_canonical_to_canonical.get(folded)
        return canonical


def build_indexes(table: Mapping[str, TagEntry]) -> TagIndex:
    """
    Build both lookup indexes for a tag table.

    Non-string aliases and aliases that fold to "" are skipped. When two
    aliases fold to the same key (even under different canonical keys), the
    first one seen in table order wins.
    """
    alias_map: dict[str, str] = {}
    canonical_map: dict[str, str] = {}

    for canonical, entry in table.items():
        canonical_map[fold_tag_key(canonical)] = canonical

        aliases = entry.aliases if isinstance(entry.aliases, (list, tuple)) else []
        for alias in aliases:
            if not isinstance(alias, str):
                continue
            key = fold_tag_key(alias)
            if not key:
                continue
            # Collisions: keep the first mapping
            alias_map.setdefault(key, canonical)

    return TagIndex(alias_to_canonical=alias_map, folded_canonical_to_canonical=canonical_map)
