"""Exceptions raised by the package."""

from __future__ import annotations


class WebParserError(Exception):
    """Base class for every error the package raises."""


class SelectorError(WebParserError):
    """A CSS selector could not be parsed."""


class FailedGetResults(WebParserError):
    """The search engine page did not accept the search query."""

    default_message = "Failed to get a search results."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class SessionBroken(WebParserError):
    """The browser session is no longer usable."""

    default_message = "Chromedriver session is broken!"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)