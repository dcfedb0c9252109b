"""Pydantic models for tag table entries and display labels."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

Lang = Literal["en", "zh"]


def resolve_lang(lang: object) -> Lang:
    """Map any requested language to a supported label field ("zh" or "en")."""
    return "zh" if lang == "zh" else "en"


class TagEntry(BaseModel):
    """Localized label pair plus optional aliases for one canonical key."""

    model_config = ConfigDict(extra="allow", frozen=True)

    en: StrictStr = Field(..., description="English display label.")
    zh: StrictStr = Field(..., description="Chinese display label.")
    # Kept raw: malformed aliases are skipped one by one during indexing.
    aliases: Any = None

    def label(self, lang: object = "en") -> str:
        return getattr(self, resolve_lang(lang))


class TagLabel(BaseModel):
    """Canonical key with its display label in one language."""

    key: str
    label: str
