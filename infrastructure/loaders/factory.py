"""Factory for creating tag table loaders."""

import asyncio
import importlib
import logging
from typing import Any

from infrastructure.config.models import LoaderKind, TagI18nConfig

from .base import TableLoader
from .registry import get_loader_class

logger = logging.getLogger(__name__)


def _ensure_loader_imported(kind: LoaderKind) -> None:
    """
    Lazy-import the loader module to trigger `register_loader(...)`.

    Convention:
      - LoaderKind value MUST match module filename under infrastructure/loaders/
        e.g., LoaderKind.HTTP.value == "http" -> infrastructure/loaders/http.py
    """
    module_name = f"{__package__}.{kind.value}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No loader module found for kind='{kind.value}'. "
                f"Expected file: infrastructure/loaders/{kind.value}.py"
            ) from e
        raise


def _has_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def select_loader_kind(cfg: TagI18nConfig) -> LoaderKind:
    """
    Pick a concrete loading strategy.

    'auto' prefers a synchronous read when the table file is present, then an
    async fetch when running inside an event loop with a URL configured, and
    otherwise falls back to the (possibly empty) local read.
    """
    if cfg.loader is not LoaderKind.AUTO:
        return cfg.loader
    if cfg.tags_file.is_file():
        return LoaderKind.LOCAL
    if _has_running_loop() and (cfg.script_url or cfg.base_url):
        return LoaderKind.HTTP
    return LoaderKind.LOCAL


def make_loader(cfg: TagI18nConfig, **loader_kwargs: Any) -> TableLoader:
    """
    Factory function to create the loader for a configuration.
    Args:
        cfg: Tag table source configuration
        loader_kwargs: Extra keyword arguments for the loader constructor
            (e.g. `transport=` for the HTTP loader)
    Returns:
        An instance of TableLoader for the selected kind.
    Raises:
        RuntimeError: If the loader kind has no implementation.
    """
    kind = select_loader_kind(cfg)

    # 1) Try registry first (maybe already imported elsewhere)
    loader_cls = get_loader_class(kind)

    # 2) If not registered yet, import the loader module by convention, then retry
    if loader_cls is None:
        _ensure_loader_imported(kind)
        loader_cls = get_loader_class(kind)

    if loader_cls is None:
        raise RuntimeError(
            f"Loader '{kind.value}' did not register a class. Make sure {kind.value}.py calls register_loader(...)."
        )

    logger.debug("Selected %s loader for %s", kind.value, cfg.tags_file if kind is LoaderKind.LOCAL else "fetch")
    return loader_cls(cfg=cfg, **loader_kwargs)
