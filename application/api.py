"""
Process-wide tag API.

One `TagResolver` backs every access style: the module-level functions
imported by callers, and the free-standing bindings placed into a shared
namespace by `install_globals`.

Importing this module does not touch any global namespace. Hosts that want
the free-standing bindings (`normalizeTag`, `translateTag`, `getAllTags` and
their snake_case forms) call `install_globals()` once at startup, e.g. in a
test harness `conftest.py` or before rendering templates.
"""

import builtins
import logging
from collections.abc import MutableMapping
from typing import Any

from domain.tags import TagLabel, TagResolver
from infrastructure.config import TagI18nConfig
from infrastructure.loaders import make_loader

logger = logging.getLogger(__name__)

_resolver: TagResolver | None = None
_config: TagI18nConfig | None = None


def configure(cfg: TagI18nConfig) -> None:
    """Set the configuration used when the default resolver is first created."""
    global _config
    if _resolver is not None:
        logger.warning("Tag resolver already created; new configuration ignored")
        return
    _config = cfg


def get_default_resolver() -> TagResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _resolver
    if _resolver is None:
        cfg = _config if _config is not None else TagI18nConfig()
        _resolver = TagResolver(make_loader(cfg))
    return _resolver


def reset_default_resolver() -> None:
    """Drop the process-wide resolver and configuration (test isolation)."""
    global _resolver, _config
    _resolver = None
    _config = None


def normalize_tag(tag: object) -> str:
    """Map an arbitrary tag string (including aliases) to a canonical key."""
    return get_default_resolver().normalize_tag(tag)


def translate_tag(tag: object, lang: object = "en") -> str:
    """Translate a tag to "en" or "zh"; unknown tags return the original string."""
    return get_default_resolver().translate_tag(tag, lang)


def get_all_tags(lang: object = "en") -> list[TagLabel]:
    """All canonical tags with their display labels."""
    return get_default_resolver().get_all_tags(lang)


# Names used by page scripts
normalizeTag = normalize_tag
translateTag = translate_tag
getAllTags = get_all_tags

GLOBAL_BINDINGS: dict[str, Any] = {
    "normalize_tag": normalize_tag,
    "translate_tag": translate_tag,
    "get_all_tags": get_all_tags,
    "normalizeTag": normalizeTag,
    "translateTag": translateTag,
    "getAllTags": getAllTags,
}


def install_globals(namespace: MutableMapping[str, Any] | None = None) -> None:
    """
    Bind the query functions into a shared namespace.

    Args:
        namespace: Target mapping (e.g. template globals); defaults to builtins
    """
    target = namespace if namespace is not None else vars(builtins)
    target.update(GLOBAL_BINDINGS)
