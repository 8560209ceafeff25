"""HTML element wrapper with CSS selection and text extraction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from webparse.errors import SelectorError


def _compile(scope: Tag, selector: str):
    try:
        return scope.css.compile(selector)
    except Exception as exc:
        raise SelectorError(f"invalid CSS selector {selector!r}: {exc}") from exc


def _is_text(item: object) -> bool:
    return isinstance(item, NavigableString) and not isinstance(item, PreformattedString)


def _select_first(scope: Tag, selector: str) -> Node | None:
    found = _compile(scope, selector).select_one(scope)
    return Node(found) if found is not None else None


def _select_every(scope: Tag, selector: str) -> Iterator[Node] | None:
    nodes = [Node(tag) for tag in _compile(scope, selector).select(scope)]
    return iter(nodes) if nodes else None


class Node:
    """A single HTML element."""

    def __init__(self, element: Tag) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"Node(<{self._element.name}>)"

    def select(self, selector: str) -> Node | None:
        """Return the first descendant matching the CSS selector, if any."""
        return _select_first(self._element, selector)

    def select_all(self, selector: str) -> Iterator[Node] | None:
        """Return an iterator over matching descendants, or None if none match."""
        return _select_every(self._element, selector)

    def parent(self) -> Node | None:
        """Return the parent element, or None at the top of the document."""
        parent = self._element.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return Node(parent)

    def attr(self, name: str) -> str | None:
        """Return the value of an attribute, or None if it is absent."""
        value = self._element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self) -> str:
        """Return all text contained in the element, concatenated."""
        return "".join(str(item) for item in self._element.descendants if _is_text(item))

    def html(self) -> str:
        """Return the element's outer HTML."""
        return str(self._element)

    def filter_text(self, black_list: Iterable[str]) -> str:
        """Return whitespace-normalised text, skipping elements whose tag is black-listed."""
        blocked = frozenset(black_list)
        return " ".join(_collect_text(self._element, blocked).split())


def _collect_text(element: Tag, blocked: frozenset[str]) -> str:
    if element.name in blocked:
        return ""
    parts = []
    for child in element.children:
        if _is_text(child):
            parts.append(" " + str(child))
        elif isinstance(child, Tag):
            parts.append(" " + _collect_text(child, blocked))
    return "".join(parts)