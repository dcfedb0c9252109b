"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from infrastructure.constants import TAGS_FILE


class LoaderKind(str, Enum):
    """Supported tag table loading strategies."""

    AUTO = "auto"
    LOCAL = "local"
    HTTP = "http"


class TagI18nConfig(BaseModel):
    """
    Tag table source configuration.
    - Loaded from tag_i18n.yaml (or defaults)
    - Consumed by the loader factory
    """

    tags_file: Path = Field(
        default_factory=lambda: TAGS_FILE,
        description="Local JSON tag table read by the synchronous loader.",
    )
    loader: LoaderKind = Field(
        default=LoaderKind.AUTO,
        description="Loading strategy. 'auto' probes the environment.",
    )
    script_url: str | None = Field(
        default=None,
        description="URL of the hosting script; the table URL is derived relative to it.",
    )
    base_url: str | None = Field(
        default=None,
        description="Base URL for the fallback table path when script_url is unusable.",
    )
    timeout_s: float = Field(default=10.0, gt=0)

    @field_validator("script_url", "base_url", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v
