"""Running searches in a browser session."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Iterable
from typing import Protocol

from webparse.cites import Cites, Tab
from webparse.engines import SearchParams
from webparse.errors import FailedGetResults


class Session(Protocol):
    """A browser session that can open tabs."""

    async def open(self, url: str) -> Tab:
        """Open a new tab at a URL."""

    async def close(self) -> None:
        """End the session."""


class SearchEngine:
    """Searches one engine through a browser tab."""

    def __init__(self, params: SearchParams, session: Session, tab: Tab) -> None:
        self.params = params
        self._session: Session | None = session
        self._tab = tab
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, params: SearchParams, session: Session) -> SearchEngine:
        """Open the engine's start page in a new tab of the session."""
        tab = await session.open(params.url())
        return cls(params, session, tab)

    async def search(self, query: str, black_list: Iterable[str] = (), sleep: int = 0) -> Cites:
        """Submit a query and collect result links.

        `sleep` is an extra wait in milliseconds before the results are read.
        Raises FailedGetResults if the query could not be submitted.
        """
        async with self._lock:
            await self._tab.open(self.params.url())
            cleaned = query.strip().replace('"', "'")
            status = await self._tab.inject(self.params.search(cleaned))
            if not status:
                with contextlib.suppress(Exception):
                    await self._tab.close()
                raise FailedGetResults()
            await asyncio.sleep((100 + sleep) / 1000)
            results = await self._tab.inject(self.params.parse())
        return Cites(self._tab, results, black_list, lock=self._lock)

    async def stop(self) -> None:
        """Close the browser session; later calls do nothing."""
        session, self._session = self._session, None
        if session is not None:
            await session.close()

    async def __aenter__(self) -> SearchEngine:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()