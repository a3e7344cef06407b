import asyncio

import httpx
import pytest

from gireach.client import EventBus, SettingsSaveError, SettingsStore, create_stores
from gireach.client.settings_store import GLOBAL_SETTINGS_UPDATE, SETTING_UPDATED, SETTINGS_INITIALIZED
from gireach.config import settings

pytestmark = pytest.mark.anyio


class FakeSettingsApi:
    def __init__(self):
        self.settings = {"logo": {"primaryText": "GI REACH"}, "theme": {"primary": "blue"}}
        self.listing_status = 200
        self.save_status = 201
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        path = request.url.path
        if request.method == "POST":
            return httpx.Response(self.save_status, json={})
        if path == "/api/admin/settings":
            listing = [{"settingKey": k, "settingValue": v} for k, v in self.settings.items()]
            return httpx.Response(self.listing_status, json=listing)
        key = path.rsplit("/", 1)[-1]
        if key in self.settings:
            return httpx.Response(200, json={"settingKey": key, "settingValue": self.settings[key]})
        return httpx.Response(404, json={"detail": "Settings not found"})


@pytest.fixture
def api():
    return FakeSettingsApi()


@pytest.fixture
def store(api):
    http = httpx.AsyncClient(transport=httpx.MockTransport(api), base_url="http://testserver")
    return SettingsStore(http, EventBus(), global_event_delay=0.0)


async def test_initialize_loads_listing_once(api, store):
    seen = []
    store.events.on(SETTINGS_INITIALIZED, lambda detail: seen.append(detail["settings"]))

    await asyncio.gather(store.initialize(), store.initialize())

    assert store.is_ready()
    assert await store.get_setting("logo") == {"primaryText": "GI REACH"}
    assert api.requests.count(("GET", "/api/admin/settings")) == 1
    assert seen == [{"logo": {"primaryText": "GI REACH"}, "theme": {"primary": "blue"}}]


async def test_failed_listing_still_marks_ready(api, store):
    api.listing_status = 500
    await store.initialize()

    assert store.is_ready()
    assert await store.get_all_settings() == {}


async def test_uncached_key_fetched_individually(api, store):
    await store.initialize()
    api.settings["footer"] = {"text": "2026"}

    assert await store.get_setting("footer") == {"text": "2026"}
    assert await store.get_setting("footer") == {"text": "2026"}
    assert api.requests.count(("GET", "/api/admin/settings/footer")) == 1
    assert await store.get_setting("navigation") is None


async def test_save_updates_cache_and_emits(store):
    seen = []
    store.events.on(SETTING_UPDATED, lambda detail: seen.append(("local", detail["key"], detail["value"])))
    store.events.on(GLOBAL_SETTINGS_UPDATE, lambda detail: seen.append(("global", detail["type"], detail["settings"])))

    await store.save_setting("theme", {"primary": "green"})
    assert seen == [("local", "theme", {"primary": "green"})]
    await asyncio.sleep(0.01)

    assert seen[-1] == ("global", "theme", {"primary": "green"})
    assert await store.get_setting("theme") == {"primary": "green"}


async def test_failed_save_raises_without_touching_cache(api, store):
    await store.initialize()
    api.save_status = 403

    with pytest.raises(SettingsSaveError) as exc_info:
        await store.save_setting("theme", {"primary": "red"})

    assert exc_info.value.setting_key == "theme"
    assert exc_info.value.status_code == 403
    assert await store.get_setting("theme") == {"primary": "blue"}


async def test_values_are_copies(store):
    value = await store.get_setting("logo")
    value["primaryText"] = "changed"
    assert (await store.get_all_settings())["logo"] == {"primaryText": "GI REACH"}


async def test_refresh_reloads(api, store):
    await store.initialize()
    api.settings["theme"] = {"primary": "purple"}

    await store.refresh()

    assert await store.get_setting("theme") == {"primary": "purple"}
    assert api.requests.count(("GET", "/api/admin/settings")) == 2


def test_create_stores_share_client_and_bus(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "CONTENT_MIRROR_FILE", str(tmp_path / "mirror.json"))
    content_store, settings_store = create_stores(token="abc", base_url="http://api.test")

    assert content_store.http is settings_store.http
    assert content_store.events is settings_store.events
    assert content_store.http.headers["Authorization"] == "Bearer abc"
    assert content_store.http.base_url.host == "api.test"
