"""HTML documents fetched from the web or parsed from text."""

from __future__ import annotations

import json as _json
from collections.abc import Iterator
from typing import Any

import httpx
from bs4 import BeautifulSoup

from webparse.node import Node, _select_every, _select_first
from webparse.user import User


async def _fetch(url: str, user: User) -> str:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        response = await client.get(url, headers={"User-Agent": str(user)})
        return response.text


class Document:
    """A parsed HTML document."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)

    @classmethod
    def parse(cls, html: str) -> Document:
        """Parse an HTML document from text."""
        return cls(html)

    @classmethod
    async def read(cls, url: str, user: User) -> Document:
        """Fetch a page and parse it as HTML."""
        return cls.parse(await _fetch(url, user))

    @classmethod
    async def text(cls, url: str, user: User) -> str:
        """Fetch a page and return its body as text."""
        return await _fetch(url, user)

    @classmethod
    async def json(cls, url: str, user: User) -> Any:
        """Fetch a page and decode its body as JSON; raises ValueError if it is not JSON."""
        return _json.loads(await _fetch(url, user))

    def select(self, selector: str) -> Node | None:
        """Return the first element matching the CSS selector, if any."""
        return _select_first(self._soup, selector)

    def select_all(self, selector: str) -> Iterator[Node] | None:
        """Return an iterator over matching elements, or None if none match."""
        return _select_every(self._soup, selector)