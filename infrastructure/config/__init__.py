"""
Configuration management: models, loading, and validation.

Handles:
- TagI18nConfig: tag table source settings
- LoaderKind: loading strategy selection

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_tag_i18n_config
from infrastructure.config.models import LoaderKind, TagI18nConfig

__all__ = [
    "TagI18nConfig",
    "LoaderKind",
    "load_tag_i18n_config",
]
