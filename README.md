# webparse

Fetch web pages asynchronously and pull data out of them with CSS selectors. The package can also run a search on a search engine through a browser session that you supply. It then reads the pages the search found.

## Installation

```
pip install webparse
```

## Reading a page

```python
import asyncio

from webparse.document import Document
from webparse.user import User


async def main():
    doc = await Document.read("https://example.com/", User.random())

    html = doc.select("html")
    lang = html.attr("lang") if html else None
    print("Language:", lang or "en")

    title = doc.select("h1")
    if title is not None:
        print("Title:", title.text())

    for paragraph in doc.select_all("p") or []:
        print("Paragraph:", paragraph.text())


asyncio.run(main())
```

`Document.read` fetches the page with `httpx`, following redirects, and sends the given User-Agent.

`select` returns the first matching `Node`, or `None` if nothing matches. `select_all` returns an iterator of nodes, or `None` if nothing matches. An invalid CSS selector raises `webparse.errors.SelectorError`.

A `Node` (from `webparse.node`) offers:

- `node.select(selector)` and `node.select_all(selector)` search inside the node.
- `node.parent()` returns the enclosing element. It returns `None` at the top of the document.
- `node.attr(name)` returns an attribute value, or `None` if the attribute is absent.
- `node.text()` returns all text inside the element, joined together.
- `node.html()` returns the element's outer HTML.
- `node.filter_text(["script", "style"])` returns the text with whitespace collapsed to single spaces. Elements with the listed tag names are left out.

HTML you already have can be parsed directly:

```python
doc = Document.parse("<html><body><h1>Hello</h1></body></html>")
print(doc.select("h1").text())  # Hello
```

## Reading raw text or JSON

```python
text = await Document.text("https://example.com/", User.random())
data = await Document.json("https://example.com/data.json", User.random())
```

`Document.json` raises `ValueError` if the body is not valid JSON.

## User agents

`webparse.user.User` holds common desktop and mobile browser User-Agent strings as class attributes. Examples are `User.CHROME_WINDOWS`, `User.FIREFOX_LINUX` and `User.SAFARI_IOS`.

- `User.random()` picks one of the desktop agents at random.
- `User.custom("my-agent/1.0")` wraps any string you give it.
- `str(user)` returns the header value.

## Searching

`webparse.engines` provides search engine profiles: `Google`, `Bing`, `Duck`, `Ecosia`, `Yahoo` and `Wiki`. Each profile is a `SearchParams` with three methods:

- `url()` returns the start page.
- `search(query)` returns a script that submits the query.
- `parse()` returns a script that collects result links.

`webparse.engine.SearchEngine` runs these scripts in a browser tab. You supply an object that follows the `Session` protocol: async `open(url)`, which returns a `Tab`, and async `close()`. A `Tab` (from `webparse.cites`) has async `open(url)`, `inject(script)` and `close()`.

```python
from webparse.engine import SearchEngine
from webparse.engines import Duck


async def search(session):
    async with await SearchEngine.open(Duck(), session) as engine:
        cites = await engine.search(
            "Python (programming language)",
            ["support.google.com", "youtube.com"],  # skip URLs containing these
            1000,                                   # extra wait in milliseconds
        )
        contents = await cites.read(5, ["header", "footer", "script", "style"])
        for content in contents:
            print(content.url, content.text[:200])
```

How `engine.search` works:

- It strips the query and replaces double quotes with single quotes.
- If the page does not accept the query, it closes the tab and raises `webparse.errors.FailedGetResults`.
- After submitting, it waits 100 ms plus `sleep` before it reads the results.

Leaving the `async with` block calls `engine.stop()`, which closes the session. Calling it again does nothing.

The result is a `Cites` list of `Cite` objects. URLs that contain any black-listed fragment are left out. `Cites` supports `len()` and iteration.

- `cites.read(count, black_list)` downloads the first `count` pages concurrently over HTTP. It returns `Content(url, text)` items.
- `cites.read_all(black_list)` does the same for every page. The text comes from the page's `<body>`, with black-listed tags left out.
- `cite.read()` downloads one page as a `Document`.
- `cite.open_and_read()` loads the page in the browser tab and parses the rendered HTML.

`webparse.cites.in_black_list(url, black_list)` reports whether a URL contains any black-listed fragment.

## What this package does not do

- It does not start or control a browser itself. There is no WebDriver client included. Searching needs a `Session` implementation of your own.
- It has no command-line program. It is used as a library only.