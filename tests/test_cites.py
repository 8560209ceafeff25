import httpx
import pytest
import respx

from webparse.cites import Cite, Cites, Content, in_black_list


class FakeTab:
    def __init__(self, responses=()):
        self.opened = []
        self.injected = []
        self.responses = list(responses)
        self.closed = False

    async def open(self, url):
        self.opened.append(url)

    async def inject(self, script):
        self.injected.append(script)
        return self.responses.pop(0)

    async def close(self):
        self.closed = True


PAGE_A = "<html><body><p>Hello</p><script>var x = 1;</script><p>world</p></body></html>"
PAGE_B = "<html><body><div>Second <b>page</b></div></body></html>"


def test_in_black_list_matches_fragment():
    assert in_black_list("https://www.youtube.com/watch", ["support.google.com", "youtube.com"])


def test_in_black_list_no_match():
    assert not in_black_list("https://a.example.com/", ["youtube.com"])
    assert not in_black_list("https://a.example.com/", [])


def test_cites_filters_black_list():
    cites = Cites(
        FakeTab(),
        ["https://a.example.com/", "https://youtube.com/x", "https://b.example.com/"],
        ["youtube.com"],
    )
    assert [cite.url for cite in cites] == ["https://a.example.com/", "https://b.example.com/"]
    assert len(cites) == 2


def test_cites_share_lock():
    cites = Cites(FakeTab(), ["https://a.example.com/", "https://b.example.com/"])
    first, second = cites.cites
    assert first.lock is second.lock


@pytest.mark.asyncio
async def test_read_limits_count_and_filters_tags():
    with respx.mock() as router:
        router.get("https://a.example.com/").mock(return_value=httpx.Response(200, text=PAGE_A))
        router.get("https://b.example.com/").mock(return_value=httpx.Response(200, text=PAGE_B))
        cites = Cites(FakeTab(), ["https://a.example.com/", "https://b.example.com/"])
        contents = await cites.read(1, ["script"])
    assert contents == [Content(url="https://a.example.com/", text="Hello world")]


@pytest.mark.asyncio
async def test_read_all_keeps_order():
    with respx.mock() as router:
        router.get("https://a.example.com/").mock(return_value=httpx.Response(200, text=PAGE_A))
        router.get("https://b.example.com/").mock(return_value=httpx.Response(200, text=PAGE_B))
        cites = Cites(FakeTab(), ["https://a.example.com/", "https://b.example.com/"])
        contents = await cites.read_all(["script"])
    assert [content.url for content in contents] == ["https://a.example.com/", "https://b.example.com/"]
    assert contents[1].text == "Second page"


@pytest.mark.asyncio
async def test_read_count_larger_than_list():
    with respx.mock() as router:
        router.get("https://b.example.com/").mock(return_value=httpx.Response(200, text=PAGE_B))
        cites = Cites(FakeTab(), ["https://b.example.com/"])
        contents = await cites.read(10)
    assert len(contents) == 1


@pytest.mark.asyncio
async def test_cite_read_sends_user_agent():
    with respx.mock() as router:
        route = router.get("https://a.example.com/").mock(return_value=httpx.Response(200, text=PAGE_A))
        document = await Cite(FakeTab(), "https://a.example.com/").read()
        agent = route.calls.last.request.headers["User-Agent"]
    assert agent.startswith("Mozilla/5.0")
    assert document.select("p").text() == "Hello"


@pytest.mark.asyncio
async def test_read_propagates_errors():
    with respx.mock() as router:
        router.get("https://a.example.com/").mock(side_effect=httpx.ConnectError("refused"))
        cites = Cites(FakeTab(), ["https://a.example.com/"])
        with pytest.raises(httpx.ConnectError):
            await cites.read_all()


@pytest.mark.asyncio
async def test_open_and_read_uses_tab():
    tab = FakeTab(["<html><body><h1>Title</h1></body></html>"])
    document = await Cite(tab, "https://a.example.com/").open_and_read()
    assert tab.opened == ["https://a.example.com/"]
    assert "outerHTML" in tab.injected[0]
    assert document.select("h1").text() == "Title"