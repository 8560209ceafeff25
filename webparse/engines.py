"""Search engine descriptions: start page and the scripts run inside it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

_INDENT = "    "


def _submit_script(setup: Sequence[str], query: str, submit: Sequence[str]) -> str:
    """Build a script that fills the search input with a query and submits it."""
    body = [
        *setup,
        "input.focus();",
        f'input.value = "{query}";',
        "",
        "input.dispatchEvent(new Event('input', { bubbles: true }));",
        "input.dispatchEvent(new Event('change', { bubbles: true }));",
        "",
        *submit,
        "",
        "return true;",
    ]
    lines = ["try {", *(_INDENT + line if line else "" for line in body), "} catch {", _INDENT + "return false;", "}"]
    return "\n".join(lines) + "\n"


_FORM_SUBMIT = ("form.submit();",)

_CITE_TEXT_PARSE = r"""try {
    let links = [];

    document.querySelectorAll('%s').forEach(elem => {
        let href = elem.textContent
            .replaceAll("&nbsp;", " ")
            .replaceAll(/\s+›\s+/g, "/")
            .trim();

        if (href && href.startsWith("https://")) {
            links.push(href);
        }
    });

    return links;
} catch {
    return [];
}
"""

_HREF_PARSE = r"""try {
    let links = [];

    document.querySelectorAll('%s').forEach(elem => {
        let href = elem.getAttribute("href");

        if (href && href.startsWith("https://")) {
            links.push(href);
        }
    });

    return links;
} catch {
    return [];
}
"""


class SearchParams(ABC):
    """What a search engine needs: its start page and two page scripts."""

    @abstractmethod
    def url(self) -> str:
        """Return the URL of the engine's search page."""

    @abstractmethod
    def search(self, query: str) -> str:
        """Return a script that submits the query; it returns true on success."""

    @abstractmethod
    def parse(self) -> str:
        """Return a script that collects result links as a list of URLs."""


class Google(SearchParams):
    """The Google search engine."""

    def url(self) -> str:
        return "https://www.google.com/"

    def search(self, query: str) -> str:
        return _submit_script(
            ("let input = document.querySelector('textarea');", ""),
            query,
            (
                "input.dispatchEvent(new KeyboardEvent('keydown', {",
                "    bubbles: true,",
                "    cancelable: true,",
                "    key: 'Enter',",
                "    code: 'Enter',",
                "    charCode: 13,",
                "    keyCode: 13",
                "}));",
            ),
        )

    def parse(self) -> str:
        return _HREF_PARSE % "#main *[data-rpos] a[href]"


class Bing(SearchParams):
    """The Bing search engine."""

    def url(self) -> str:
        return "https://www.bing.com/"

    def search(self, query: str) -> str:
        return _submit_script(
            (
                "let form = document.querySelector('form[action=\"/search\"]');",
                "let input = form.querySelector('input[type=\"search\"]');",
                "",
            ),
            query,
            _FORM_SUBMIT,
        )

    def parse(self) -> str:
        return _CITE_TEXT_PARSE % "main a[href] cite"


class Duck(SearchParams):
    """The DuckDuckGo search engine."""

    def url(self) -> str:
        return "https://duckduckgo.com/"

    def search(self, query: str) -> str:
        return _submit_script(
            (
                "let form = document.querySelector('main form#searchbox_homepage');",
                "let input = form.querySelector('input[aria-autocomplete]');",
                "",
            ),
            query,
            _FORM_SUBMIT,
        )

    def parse(self) -> str:
        return _CITE_TEXT_PARSE % "body a[href] p"


class Ecosia(SearchParams):
    """The Ecosia search engine."""

    def url(self) -> str:
        return "https://www.ecosia.org/"

    def search(self, query: str) -> str:
        return _submit_script(
            (
                "let form = document.querySelector('form[action=\"/search\"]');",
                "let input = form.querySelector('input[data-test-id=\"search-form-input\"]');",
                "",
            ),
            query,
            _FORM_SUBMIT,
        )

    def parse(self) -> str:
        return """let links = [];

document.querySelectorAll('main a[href][data-test-id="result-link"]').forEach(elem => {
    let href = elem.getAttribute("href");

    if (href && href.startsWith("https://")) {
        links.push(href);
    }
});

return links;
"""


class Yahoo(SearchParams):
    """The Yahoo search engine."""

    def url(self) -> str:
        return "https://www.yahoo.com/"

    def search(self, query: str) -> str:
        return _submit_script(
            (
                "let form = document.querySelector('header form[role=\"search\"]');",
                "let input = form.querySelector('input[autofocus]');",
                "",
                "form.removeAttribute('target');",
                "",
            ),
            query,
            _FORM_SUBMIT,
        )

    def parse(self) -> str:
        return _HREF_PARSE % '#main #web a[href][referrerpolicy="origin"]'


class Wiki(SearchParams):
    """Wikipedia's own search."""

    def url(self) -> str:
        return "https://wikipedia.org/w/index.php?search="

    def search(self, query: str) -> str:
        return _submit_script(
            (
                "let form = document.querySelector('body form#search');",
                "let input = form.querySelector('input[name=\"search\"]');",
                "",
            ),
            query,
            _FORM_SUBMIT,
        )

    def parse(self) -> str:
        return """try {
    let links = [];

    document.querySelectorAll('.mw-search-results a[href]').forEach(elem => {
        let href = elem.getAttribute("href");

        if (href && !href.startsWith("https://")) {
            links.push('https://wikipedia.org' + href);
        }
    });

    return links;
} catch {
    return [];
}
"""