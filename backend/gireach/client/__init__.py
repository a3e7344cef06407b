"""Client-side stores that keep page content and site settings in sync with the API."""

from typing import Optional

import httpx

from gireach.client.content_store import ContentStore, InitializationResult, PersistFailure
from gireach.client.errors import ClientStoreError, ContentSaveError, SettingsSaveError
from gireach.client.events import EventBus
from gireach.client.local_storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from gireach.client.settings_store import SettingsStore
from gireach.config import settings


def create_stores(token: Optional[str] = None, base_url: Optional[str] = None) -> tuple[ContentStore, SettingsStore]:
    """Build the application's store pair sharing one HTTP client and one event bus."""
    headers = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    http = httpx.AsyncClient(base_url=base_url or settings.CONTENT_API_BASE_URL, headers=headers, timeout=10.0)
    events = EventBus()
    content = ContentStore(http, JsonFileStorage(settings.CONTENT_MIRROR_FILE), events)
    return content, SettingsStore(http, events)


__all__ = [
    "ContentStore", "InitializationResult", "PersistFailure",
    "SettingsStore",
    "ClientStoreError", "ContentSaveError", "SettingsSaveError",
    "EventBus",
    "KeyValueStorage", "MemoryStorage", "JsonFileStorage",
    "create_stores",
]
