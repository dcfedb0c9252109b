"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Tag table loaders (local file, HTTP fetch)
- Configuration loading (YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import LoaderKind, TagI18nConfig, load_tag_i18n_config
from infrastructure.loaders import TableLoader, make_loader

__all__ = [
    # Loaders (most commonly used)
    "make_loader",
    "TableLoader",
    # Configuration
    "load_tag_i18n_config",
    "TagI18nConfig",
    "LoaderKind",
]
