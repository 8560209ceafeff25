import pytest

from webparse.engine import SearchEngine
from webparse.engines import Duck, Google
from webparse.errors import FailedGetResults


class FakeTab:
    def __init__(self, responses=()):
        self.opened = []
        self.injected = []
        self.responses = list(responses)
        self.closed = False
        self.fail_close = False

    async def open(self, url):
        self.opened.append(url)

    async def inject(self, script):
        self.injected.append(script)
        return self.responses.pop(0)

    async def close(self):
        self.closed = True
        if self.fail_close:
            raise RuntimeError("tab already gone")


class FakeSession:
    def __init__(self, tab):
        self.tab = tab
        self.opened = []
        self.close_count = 0

    async def open(self, url):
        self.opened.append(url)
        return self.tab

    async def close(self):
        self.close_count += 1


@pytest.mark.asyncio
async def test_open_loads_start_page():
    session = FakeSession(FakeTab())
    await SearchEngine.open(Duck(), session)
    assert session.opened == [Duck().url()]


@pytest.mark.asyncio
async def test_search_collects_filtered_results():
    urls = ["https://a.example.com/", "https://youtube.com/watch", "https://b.example.com/"]
    tab = FakeTab([True, urls])
    engine = await SearchEngine.open(Google(), FakeSession(tab))
    cites = await engine.search('  rust "lang"  ', ["youtube.com"], 0)
    assert [cite.url for cite in cites] == ["https://a.example.com/", "https://b.example.com/"]
    assert tab.opened == [Google().url()]
    assert tab.injected == [Google().search("rust 'lang'"), Google().parse()]


@pytest.mark.asyncio
async def test_search_failure_closes_tab():
    tab = FakeTab([False])
    engine = await SearchEngine.open(Google(), FakeSession(tab))
    with pytest.raises(FailedGetResults):
        await engine.search("query")
    assert tab.closed
    assert len(tab.injected) == 1


@pytest.mark.asyncio
async def test_search_failure_ignores_close_errors():
    tab = FakeTab([False])
    tab.fail_close = True
    engine = await SearchEngine.open(Google(), FakeSession(tab))
    with pytest.raises(FailedGetResults):
        await engine.search("query")


@pytest.mark.asyncio
async def test_results_open_in_same_tab():
    tab = FakeTab([True, ["https://a.example.com/"], "<html><body><h1>Found</h1></body></html>"])
    engine = await SearchEngine.open(Google(), FakeSession(tab))
    cites = await engine.search("query")
    document = await cites.cites[0].open_and_read()
    assert tab.opened[-1] == "https://a.example.com/"
    assert document.select("h1").text() == "Found"


@pytest.mark.asyncio
async def test_stop_closes_session_once():
    session = FakeSession(FakeTab())
    engine = await SearchEngine.open(Google(), session)
    await engine.stop()
    await engine.stop()
    assert session.close_count == 1


@pytest.mark.asyncio
async def test_context_manager_stops():
    session = FakeSession(FakeTab())
    async with await SearchEngine.open(Google(), session) as engine:
        assert engine.params.url() == Google().url()
    assert session.close_count == 1