"""Asynchronous web page fetching, CSS-selector extraction and search result collection."""

__version__ = "0.1.2"

__all__ = ["cites", "document", "engine", "engines", "errors", "node", "user"]