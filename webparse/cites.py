"""Search results: lists of found pages that can be downloaded and read."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from webparse.document import Document
from webparse.user import User

_OUTER_HTML_SCRIPT = 'return document.querySelector("html").outerHTML;'


class Tab(Protocol):
    """A browser tab that can load pages and run scripts in them."""

    async def open(self, url: str) -> None:
        """Navigate the tab to a URL."""

    async def inject(self, script: str) -> Any:
        """Run a script in the page and return its result."""

    async def close(self) -> None:
        """Close the tab."""


@dataclass
class Content:
    """The text of a downloaded page."""

    url: str
    text: str


def in_black_list(url: str, black_list: Iterable[str]) -> bool:
    """Tell whether the URL contains any of the black-listed fragments."""
    return any(black in url for black in black_list)


@dataclass
class Cite:
    """A single found page."""

    tab: Tab = field(repr=False)
    url: str
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    async def read(self) -> Document:
        """Download the page directly over HTTP."""
        return await Document.read(self.url, User.random())

    async def open_and_read(self) -> Document:
        """Load the page in the browser tab and parse its rendered HTML."""
        async with self.lock:
            await self.tab.open(self.url)
            html = await self.tab.inject(_OUTER_HTML_SCRIPT)
        return Document.parse(html)


class Cites:
    """The found pages of one search, with black-listed URLs left out."""

    def __init__(
        self,
        tab: Tab,
        urls: Iterable[str],
        black_list: Iterable[str] = (),
        lock: asyncio.Lock | None = None,
    ) -> None:
        shared = lock if lock is not None else asyncio.Lock()
        blocked = tuple(black_list)
        self.cites = [Cite(tab, url, shared) for url in urls if not in_black_list(url, blocked)]

    def __repr__(self) -> str:
        return f"Cites({[cite.url for cite in self.cites]!r})"

    def __iter__(self) -> Iterator[Cite]:
        return iter(self.cites)

    def __len__(self) -> int:
        return len(self.cites)

    async def read(self, count: int, black_list: Iterable[str] = ()) -> list[Content]:
        """Download the first `count` pages concurrently, skipping black-listed tags."""
        blocked = tuple(black_list)
        return list(await asyncio.gather(*(_read_content(cite, blocked) for cite in self.cites[:count])))

    async def read_all(self, black_list: Iterable[str] = ()) -> list[Content]:
        """Download every page concurrently, skipping black-listed tags."""
        return await self.read(len(self.cites), black_list)


async def _read_content(cite: Cite, black_list: tuple[str, ...]) -> Content:
    document = await cite.read()
    root = document.select("body") or document.select("html")
    text = root.filter_text(black_list) if root is not None else ""
    return Content(url=cite.url, text=text)