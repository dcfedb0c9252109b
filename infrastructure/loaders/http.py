"""Asynchronous best-effort loader fetching the tag table over HTTP."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import httpx

from infrastructure.config.models import LoaderKind, TagI18nConfig
from infrastructure.constants import DEFAULT_TAGS_URL, TAGS_URL_FROM_SCRIPT
from infrastructure.loaders.base import TableLoader
from infrastructure.loaders.registry import register_loader
from infrastructure.observability import set_log_context

logger = logging.getLogger(__name__)


def resolve_tags_url(cfg: TagI18nConfig) -> str:
    """
    Derive the tag table URL.

    `.../js/tag-i18n.js` -> `.../i18n/tags.json` when the hosting script URL is
    known; otherwise `i18n/tags.json` under `base_url` (or as-is).
    """
    if cfg.script_url:
        try:
            return str(httpx.URL(cfg.script_url).join(TAGS_URL_FROM_SCRIPT))
        except httpx.InvalidURL:
            logger.debug("Unusable script_url %r; falling back to %s", cfg.script_url, DEFAULT_TAGS_URL)
    if cfg.base_url:
        try:
            return str(httpx.URL(cfg.base_url.rstrip("/") + "/").join(DEFAULT_TAGS_URL))
        except httpx.InvalidURL:
            logger.debug("Unusable base_url %r; falling back to %s", cfg.base_url, DEFAULT_TAGS_URL)
    return DEFAULT_TAGS_URL


class HttpFetchLoader(TableLoader):
    """
    Non-blocking fetch scheduled on the running asyncio loop.

    - Queries issued while the fetch is in flight do not wait; they see an unloaded table
    - At most one fetch is outstanding; concurrent requests share it
    - A finished fetch (successful or not) clears the pending slot
    """

    kind = LoaderKind.HTTP

    def __init__(
        self,
        *,
        cfg: TagI18nConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(cfg=cfg)
        self.url = resolve_tags_url(cfg)
        self.transport = transport
        self._pending: asyncio.Task[None] | None = None

    @property
    def source(self) -> str:
        return self.url

    @property
    def pending(self) -> asyncio.Task[None] | None:
        return self._pending

    def request(self, install: Callable[[Any], bool]) -> None:
        if self._pending is not None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; tag table fetch skipped")
            return

        task = loop.create_task(self._fetch(install))
        task.add_done_callback(self._clear_pending)
        self._pending = task

    async def wait(self) -> None:
        """Await the in-flight fetch, if any."""
        task = self._pending
        if task is not None:
            await task

    def _clear_pending(self, task: asyncio.Task[None]) -> None:
        if self._pending is task:
            self._pending = None

    async def _fetch(self, install: Callable[[Any], bool]) -> None:
        set_log_context(loader=self.kind.value, source=self.url)
        try:
            async with httpx.AsyncClient(timeout=self.cfg.timeout_s, transport=self.transport) as client:
                resp = await client.get(self.url)
            if not resp.is_success:
                logger.warning("Tag table fetch returned HTTP %d from %s", resp.status_code, self.url)
                return
            data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Tag table fetch failed from %s: %s", self.url, e)
            return

        if data:
            install(data)


register_loader(LoaderKind.HTTP, HttpFetchLoader)
