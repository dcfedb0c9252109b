"""Base loader interface for tag table sources."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from infrastructure.config.models import LoaderKind, TagI18nConfig

logger = logging.getLogger(__name__)


class TableLoader(ABC):
    """
    Abstract base class for tag table loaders.

    All concrete loaders must implement:
    - source: where the table is read from (for logging)
    - request(): obtain the raw table and pass it to `install`

    Loaders never raise from `request`; an unavailable table is logged and
    the resolver stays unloaded.
    """

    kind: LoaderKind
    cfg: TagI18nConfig

    def __init__(self, *, cfg: TagI18nConfig) -> None:
        self.cfg = cfg

    @property
    @abstractmethod
    def source(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def request(self, install: Callable[[Any], bool]) -> None:
        """
        Obtain the raw table and hand it to `install`.

        Args:
            install: Validates and installs a decoded table; returns False if rejected
        """
        raise NotImplementedError
