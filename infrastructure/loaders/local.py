"""Synchronous loader reading the tag table from the local filesystem."""

import logging
from collections.abc import Callable
from typing import Any

from infrastructure.config.models import LoaderKind, TagI18nConfig
from infrastructure.io import read_json
from infrastructure.loaders.base import TableLoader
from infrastructure.loaders.registry import register_loader
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


class LocalFileLoader(TableLoader):
    """
    Blocking read of `cfg.tags_file`.

    Used in server/test contexts: the table is installed (or found missing)
    before the triggering query returns, so results are deterministic.
    """

    kind = LoaderKind.LOCAL

    def __init__(self, *, cfg: TagI18nConfig) -> None:
        super().__init__(cfg=cfg)
        self._warned = False

    @property
    def source(self) -> str:
        return str(self.cfg.tags_file)

    def request(self, install: Callable[[Any], bool]) -> None:
        set_log_context(loader=self.kind.value, source=self.source)
        try:
            data = read_json(self.cfg.tags_file)
        except FileNotFoundError:
            logger.debug("Tag table not found at %s", self.source)
            return
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError; retried per query, so warn once
            log = logger.debug if self._warned else logger.warning
            log("Tag table unreadable at %s: %s", self.source, e)
            self._warned = True
            return

        install(data)


register_loader(LoaderKind.LOCAL, LocalFileLoader)
