import logging

from infrastructure.config.models import LoaderKind

from .base import TableLoader

logger = logging.getLogger(__name__)

# Loader kind -> loader class
_LOADER_REGISTRY: dict[LoaderKind, type[TableLoader]] = {}


def register_loader(kind: LoaderKind, loader_cls: type[TableLoader], *, override: bool = False) -> None:
    """Register a loader class for a loader kind.

    This is the plugin hook: loader modules call this at import time.
    """
    if (kind in _LOADER_REGISTRY) and not override:
        existing = _LOADER_REGISTRY[kind]
        raise RuntimeError(
            f"Loader already registered for kind={kind.value}: {existing.__name__}. Use override=True to replace."
        )
    _LOADER_REGISTRY[kind] = loader_cls
    logger.debug("Registered loader for kind=%s: %s", kind.value, loader_cls.__name__)


def get_loader_class(kind: LoaderKind) -> type[TableLoader] | None:
    """Return the registered loader class (or None if not registered yet)."""
    return _LOADER_REGISTRY.get(kind)
