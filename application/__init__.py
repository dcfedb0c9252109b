"""
Application layer: public entry points.

Exposes the process-wide tag functions; the same resolver serves named
imports and the globals installed by `install_globals`.
"""

from application.api import (
    configure,
    get_all_tags,
    get_default_resolver,
    getAllTags,
    install_globals,
    normalize_tag,
    normalizeTag,
    reset_default_resolver,
    translate_tag,
    translateTag,
)

__all__ = [
    # Queries
    "normalize_tag",
    "translate_tag",
    "get_all_tags",
    "normalizeTag",
    "translateTag",
    "getAllTags",
    # Setup
    "configure",
    "install_globals",
    "get_default_resolver",
    "reset_default_resolver",
]
