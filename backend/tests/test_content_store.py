"""Client content store: API first, then cache, mirror and defaults."""

import asyncio
import json

import httpx
import pytest

from gireach.client import ContentSaveError, ContentStore, MemoryStorage
from gireach.client.content_store import CONTENT_UPDATED, GLOBAL_CONTENT_UPDATE
from gireach.schemas.content import PageContent

pytestmark = pytest.mark.anyio

STORAGE_KEY = "gireach-content"


def _page(page_id, title):
    return PageContent.model_validate(
        {
            "id": page_id,
            "name": page_id.title(),
            "sections": [{"id": f"{page_id}-hero", "type": "hero", "title": title, "content": ""}],
        }
    )


def _record(page_id, title):
    page = _page(page_id, title)
    return {
        "id": f"row-{page_id}",
        "pageId": page_id,
        "pageName": page.name,
        "sections": [s.model_dump(mode="json", by_alias=True, exclude_none=True) for s in page.sections],
    }


DEFAULTS = {"home": _page("home", "Default home"), "about": _page("about", "Default about")}


class FakeApi:
    """Scriptable stand-in for the content API that records every request."""

    def __init__(self, listing=None, listing_status=200, save_status=201):
        self.listing = listing if listing is not None else []
        self.listing_status = listing_status
        self.save_status = save_status
        self.pages = {}
        self.page_status = None
        self.requests = []
        self.save_gate = None
        self.unreachable = set()

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        path = request.url.path
        if path in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "POST" and path == "/api/admin/content":
            if self.save_gate is not None:
                await self.save_gate.wait()
            return httpx.Response(self.save_status, json={})
        if path == "/api/content":
            return httpx.Response(self.listing_status, json=self.listing)
        page_id = path.rsplit("/", 1)[-1]
        if self.page_status is not None:
            return httpx.Response(self.page_status, json={"detail": "boom"})
        if page_id in self.pages:
            return httpx.Response(200, json=self.pages[page_id])
        return httpx.Response(404, json={"detail": "Page content not found"})

    def count(self, method, path):
        return sum(1 for m, p in self.requests if m == method and p == path)

    def saved_ids(self):
        return [p for m, p in self.requests if m == "POST"]


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def mirror():
    return MemoryStorage()


@pytest.fixture
def make_store(api, mirror):
    def factory(defaults=DEFAULTS, delay=0.0):
        http = httpx.AsyncClient(transport=httpx.MockTransport(api), base_url="http://testserver")
        return ContentStore(http, mirror, defaults=defaults, storage_key=STORAGE_KEY, global_event_delay=delay)

    return factory


async def test_initialize_merges_api_pages_and_persists_missing_defaults(api, make_store):
    api.listing = [_record("about", "About from API")]
    store = make_store()

    result = await store.initialize()

    assert result.source == "api"
    assert result.failures == []
    assert set(result.pages) == {"home", "about"}
    assert result.pages["about"].sections[0].title == "About from API"
    assert result.pages["home"].sections[0].title == "Default home"
    assert api.count("POST", "/api/admin/content") == 1
    assert store.is_initialized


async def test_concurrent_initialize_runs_once(api, make_store):
    store = make_store()
    first, second = await asyncio.gather(store.initialize(), store.initialize())
    await store.initialize()

    assert first is second
    assert api.count("GET", "/api/content") == 1


async def test_initialize_falls_back_to_defaults_when_api_fails(api, make_store, mirror):
    api.listing_status = 500
    api.save_status = 500
    store = make_store()

    result = await store.initialize()

    assert result.source == "defaults"
    assert {f.page_id for f in result.failures} == {"home", "about"}
    page = await store.get_page_content("home")
    assert page.sections[0].title == "Default home"
    assert api.count("GET", "/api/content/home") == 0
    assert set(json.loads(mirror.get_item(STORAGE_KEY))) == {"home", "about"}


async def test_unreachable_api_initializes_with_defaults(api, make_store):
    api.unreachable.add("/api/content")
    store = make_store()

    result = await store.initialize()

    assert result.source == "defaults"
    assert result.failures == []
    assert result.pages["home"].sections[0].title == "Default home"
    assert api.count("POST", "/api/admin/content") == 2


async def test_unreadable_record_keeps_the_other_listed_pages(api, make_store, mirror):
    broken_home = _record("home", "Home from API")
    broken_home["sections"].append({"id": "numbers", "type": "stats", "data": {"stats": [{"label": "Mentees"}]}})
    api.listing = [_record("about", "About from API"), broken_home]
    store = make_store()

    result = await store.initialize()

    assert result.source == "api"
    assert result.pages["about"].sections[0].title == "About from API"
    assert result.pages["home"].sections[0].title == "Default home"
    assert api.saved_ids() == []
    assert json.loads(mirror.get_item(STORAGE_KEY))["about"]["sections"][0]["title"] == "About from API"


async def test_unknown_page_without_default_is_none(api, make_store):
    store = make_store(defaults={})
    assert await store.get_page_content("publications") is None


async def test_page_fetched_from_api_is_cached(api, make_store, mirror):
    store = make_store(defaults={})
    await store.initialize()
    api.pages["resources"] = _record("resources", "Reading list")

    page = await store.get_page_content("resources")
    again = await store.get_page_content("resources")

    assert page.sections[0].title == "Reading list"
    assert again == page
    assert api.count("GET", "/api/content/resources") == 1
    assert "resources" in json.loads(mirror.get_item(STORAGE_KEY))


async def test_missing_page_with_default_is_saved_and_cached(api, make_store, mirror):
    store = make_store(defaults={"contact": _page("contact", "Default contact")})
    api.listing = [_record("contact", "Listed")]
    await store.initialize()
    store.invalidate_cache("contact")

    page = await store.get_page_content("contact")
    again = await store.get_page_content("contact")

    assert page.sections[0].title == "Default contact"
    assert again == page
    assert api.count("GET", "/api/content/contact") == 1
    assert api.count("POST", "/api/admin/content") == 1
    assert json.loads(mirror.get_item(STORAGE_KEY))["contact"]["sections"][0]["title"] == "Default contact"


async def test_unreachable_page_returns_default_without_caching(api, make_store):
    store = make_store(defaults={"contact": _page("contact", "Default contact")})
    api.listing = [_record("contact", "Listed")]
    await store.initialize()
    store.invalidate_cache("contact")
    api.unreachable.add("/api/content/contact")

    page = await store.get_page_content("contact")
    await store.get_page_content("contact")

    assert page.sections[0].title == "Default contact"
    assert api.count("GET", "/api/content/contact") == 2
    assert api.saved_ids() == []


async def test_server_error_returns_default_without_caching(api, make_store):
    store = make_store(defaults={"contact": _page("contact", "Default contact")})
    api.listing = [_record("contact", "Listed")]
    await store.initialize()
    store.invalidate_cache("contact")
    api.page_status = 503

    page = await store.get_page_content("contact")
    await store.get_page_content("contact")

    assert page.sections[0].title == "Default contact"
    assert api.count("GET", "/api/content/contact") == 2


async def test_save_then_read_needs_no_fetch(api, make_store):
    store = make_store()
    await store.initialize()
    edited = _page("about", "Edited about")

    await store.save_page_content("about", edited)
    page = await store.get_page_content("about")

    assert page.sections[0].title == "Edited about"
    assert api.count("GET", "/api/content/about") == 0


async def test_returned_pages_are_copies(api, make_store):
    store = make_store()
    await store.initialize()

    page = await store.get_page_content("home")
    page.sections[0].title = "Mutated by caller"
    assert (await store.get_page_content("home")).sections[0].title == "Default home"


async def test_failed_save_raises_and_keeps_cache(api, make_store):
    store = make_store()
    await store.initialize()
    api.save_status = 500

    with pytest.raises(ContentSaveError) as exc_info:
        await store.save_page_content("about", _page("about", "Rejected"))

    assert exc_info.value.status_code == 500
    assert exc_info.value.page_id == "about"
    assert store.get_page_content_sync("about").sections[0].title == "Default about"


async def test_duplicate_save_is_skipped_while_in_flight(api, make_store):
    store = make_store()
    await store.initialize()
    api.save_gate = asyncio.Event()
    before = len(api.saved_ids())

    first = asyncio.ensure_future(store.save_page_content("about", _page("about", "First")))
    await asyncio.sleep(0)
    await store.save_page_content("about", _page("about", "Second"))
    api.save_gate.set()
    await first

    assert len(api.saved_ids()) == before + 1
    assert store.get_page_content_sync("about").sections[0].title == "First"


async def test_save_emits_local_then_global_event(api, make_store):
    store = make_store(delay=0.0)
    await store.initialize()
    seen = []
    store.events.on(CONTENT_UPDATED, lambda detail: seen.append((CONTENT_UPDATED, detail["page_id"])))
    store.events.on(GLOBAL_CONTENT_UPDATE, lambda detail: seen.append((GLOBAL_CONTENT_UPDATE, detail["type"])))

    await store.save_page_content("home", _page("home", "New home"))
    assert seen == [(CONTENT_UPDATED, "home")]

    await asyncio.sleep(0.01)
    assert seen == [(CONTENT_UPDATED, "home"), (GLOBAL_CONTENT_UPDATE, "home")]


async def test_reset_to_default_restores_every_page(api, make_store):
    store = make_store()
    await store.initialize()
    await store.save_page_content("home", _page("home", "Custom"))

    failures = await store.reset_to_default()

    assert failures == []
    assert store.get_page_content_sync("home").sections[0].title == "Default home"
    assert store.get_page_content_sync("about").sections[0].title == "Default about"


async def test_reset_to_default_shows_defaults_when_every_save_fails(api, make_store, mirror):
    api.listing = [_record("home", "Live home"), _record("about", "Live about")]
    store = make_store()
    await store.initialize()
    api.save_status = 500

    failures = await store.reset_to_default()

    assert [f.page_id for f in failures] == ["home", "about"]
    assert all("HTTP 500" in f.error for f in failures)
    assert store.get_page_content_sync("home").sections[0].title == "Default home"
    assert store.get_page_content_sync("about").sections[0].title == "Default about"
    assert set(json.loads(mirror.get_item(STORAGE_KEY))) == {"home", "about"}


async def test_get_all_pages_falls_back_to_mirror_then_defaults(api, make_store, mirror):
    api.listing_status = 500
    store = make_store()

    pages = await store.get_all_pages()
    assert sorted(p.id for p in pages) == ["about", "home"]

    mirror.set_item(STORAGE_KEY, json.dumps({"join": _page("join", "Mirrored").model_dump(mode="json", by_alias=True)}))
    pages = await store.get_all_pages()
    assert [p.id for p in pages] == ["join"]


def test_sync_read_prefers_mirror(api, make_store, mirror):
    mirror.set_item(STORAGE_KEY, json.dumps({"home": _page("home", "Offline copy").model_dump(mode="json")}))
    store = make_store()

    assert store.get_page_content_sync("home").sections[0].title == "Offline copy"
    assert store.get_page_content_sync("about").sections[0].title == "Default about"
    assert store.get_page_content_sync("nowhere") is None
    assert api.requests == []


def test_sync_read_tolerates_corrupt_mirror(api, make_store, mirror):
    mirror.set_item(STORAGE_KEY, "{not json")
    store = make_store()

    assert store.get_page_content_sync("home").sections[0].title == "Default home"


async def test_invalidate_cache_drops_mirror_entry(api, make_store, mirror):
    store = make_store()
    await store.initialize()

    store.invalidate_cache("home")
    assert "home" not in json.loads(mirror.get_item(STORAGE_KEY))

    store.invalidate_cache()
    assert mirror.get_item(STORAGE_KEY) is None
