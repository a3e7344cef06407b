"""Client-side page content store.

Reconciles four sources, fastest first: the in-memory cache, the content API,
a persistent key-value mirror and the built-in defaults. Reads fall back to
staler sources when the API misbehaves. Writes go to the API first and only
touch the cache and mirror once the API has accepted them.

Initialization runs once per store: concurrent callers await the same task.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

import httpx

from gireach.client.defaults import default_pages
from gireach.client.errors import ContentSaveError
from gireach.client.events import EventBus
from gireach.client.local_storage import KeyValueStorage
from gireach.config import settings
from gireach.schemas.content import PageContent, PageContentRecord, dump_sections

logger = logging.getLogger(__name__)

CONTENT_PATH = "/api/content"
ADMIN_CONTENT_PATH = "/api/admin/content"

CONTENT_UPDATED = "contentUpdated"
GLOBAL_CONTENT_UPDATE = "globalContentUpdate"


@dataclass
class PersistFailure:
    page_id: str
    error: str


@dataclass
class InitializationResult:
    pages: Dict[str, PageContent]
    source: str  # "api" or "defaults"
    failures: List[PersistFailure] = field(default_factory=list)


def _page_from_api(record: Dict[str, Any]) -> PageContent:
    return PageContentRecord.model_validate(record).to_page()


class ContentStore:
    def __init__(
        self,
        http: httpx.AsyncClient,
        storage: KeyValueStorage,
        events: Optional[EventBus] = None,
        defaults: Optional[Dict[str, PageContent]] = None,
        storage_key: str = settings.CONTENT_STORAGE_KEY,
        global_event_delay: float = settings.GLOBAL_EVENT_DELAY_SECONDS,
    ):
        self.http = http
        self.storage = storage
        self.events = events if events is not None else EventBus()
        self.defaults = defaults if defaults is not None else default_pages()
        self.storage_key = storage_key
        self.global_event_delay = global_event_delay
        self._cache: Dict[str, PageContent] = {}
        self._saving: Set[str] = set()
        self._init_task: Optional[asyncio.Task] = None
        self._init_result: Optional[InitializationResult] = None

    @property
    def is_initialized(self) -> bool:
        return self._init_result is not None

    def _default_copy(self, page_id: str) -> Optional[PageContent]:
        page = self.defaults.get(page_id)
        return page.model_copy(deep=True) if page is not None else None

    def _snapshot(self) -> Dict[str, PageContent]:
        return {page_id: page.model_copy(deep=True) for page_id, page in self._cache.items()}

    # Initialization
    async def initialize(self) -> InitializationResult:
        if self._init_result is not None:
            return self._init_result
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._do_initialize())
        try:
            # Shielded so one cancelled awaiter does not cancel the shared task.
            return await asyncio.shield(self._init_task)
        except Exception:
            self._init_task = None
            raise

    async def _do_initialize(self) -> InitializationResult:
        logger.info("[content-store] initializing content from api")
        try:
            response = await self.http.get(CONTENT_PATH)
        except httpx.HTTPError as exc:
            logger.error("[content-store] error initializing from api: %s", exc)
            return await self._initialize_with_defaults()

        if not response.is_success:
            logger.warning("[content-store] failed to load content: status %s", response.status_code)
            return await self._initialize_with_defaults()

        try:
            records = response.json()
        except ValueError as exc:
            logger.warning("[content-store] unreadable content listing: %s", exc)
            return await self._initialize_with_defaults()
        if not isinstance(records, list):
            logger.warning("[content-store] content listing is not a list")
            return await self._initialize_with_defaults()

        pages = {}
        listed = set()
        for record in records:
            page_id = record.get("pageId") if isinstance(record, dict) else None
            if page_id:
                listed.add(page_id)
            try:
                page = _page_from_api(record)
            except ValueError as exc:
                # Listed but unreadable: shown as the default locally, never pushed over the server copy.
                logger.warning("[content-store] skipping unreadable record %s: %s", page_id, exc)
                continue
            pages[page.id] = page
        logger.info("[content-store] loaded pages from api: %s", sorted(pages))

        failures = []
        for page_id in self.defaults:
            if page_id in pages:
                continue
            if page_id in listed:
                pages[page_id] = self._default_copy(page_id)
                continue
            logger.info("[content-store] initializing missing page: %s", page_id)
            page = self._default_copy(page_id)
            pages[page_id] = page
            failure = await self._try_persist(page_id, page)
            if failure:
                failures.append(failure)

        # A save that finished while the listing was in flight is newer.
        for page_id, page in pages.items():
            self._cache.setdefault(page_id, page)
        self._write_mirror(self._cache, replace=True)

        self._init_result = InitializationResult(pages=self._snapshot(), source="api", failures=failures)
        logger.info("[content-store] initialization complete")
        return self._init_result

    async def _initialize_with_defaults(self) -> InitializationResult:
        logger.info("[content-store] initializing with default content")
        for page_id in self.defaults:
            self._cache.setdefault(page_id, self._default_copy(page_id))

        failures = []
        for page_id in self.defaults:
            failure = await self._try_persist(page_id, self._default_copy(page_id))
            if failure:
                failures.append(failure)

        self._write_mirror(self._cache, replace=True)
        self._init_result = InitializationResult(pages=self._snapshot(), source="defaults", failures=failures)
        return self._init_result

    # Remote writes
    async def _save_to_api(self, page_id: str, page: PageContent) -> None:
        payload = {"pageId": page_id, "pageName": page.name, "sections": dump_sections(page.sections)}
        try:
            response = await self.http.post(ADMIN_CONTENT_PATH, json=payload)
        except httpx.HTTPError as exc:
            raise ContentSaveError(page_id, f"Failed to save {page_id}: {exc}") from exc
        if not response.is_success:
            raise ContentSaveError(
                page_id, f"Failed to save {page_id}: HTTP {response.status_code}", response.status_code
            )

    async def _try_persist(self, page_id: str, page: PageContent) -> Optional[PersistFailure]:
        try:
            await self._save_to_api(page_id, page)
        except ContentSaveError as exc:
            logger.warning("[content-store] failed to save default %s: %s", page_id, exc)
            return PersistFailure(page_id=page_id, error=str(exc))
        logger.info("[content-store] saved default %s to api", page_id)
        return None

    # Persistent mirror
    def _read_mirror(self) -> Dict[str, Any]:
        raw = self.storage.get_item(self.storage_key)
        if not raw:
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("mirror does not hold an object")
        return data

    def _write_mirror(self, pages: Dict[str, PageContent], replace: bool = False) -> None:
        try:
            data = {} if replace else self._read_mirror()
            for page_id, page in pages.items():
                data[page_id] = page.model_dump(mode="json", by_alias=True, exclude_none=True)
            self.storage.set_item(self.storage_key, json.dumps(data))
        except (OSError, ValueError) as exc:
            logger.warning("[content-store] failed to write local mirror: %s", exc)

    # Reads
    async def get_page_content(self, page_id: str) -> Optional[PageContent]:
        await self.initialize()

        cached = self._cache.get(page_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        try:
            response = await self.http.get(f"{CONTENT_PATH}/{page_id}")
        except httpx.HTTPError as exc:
            logger.warning("[content-store] error fetching %s: %s", page_id, exc)
            return self._default_copy(page_id)

        if response.is_success:
            try:
                page = _page_from_api(response.json())
            except (ValueError, TypeError) as exc:
                logger.warning("[content-store] unreadable content for %s: %s", page_id, exc)
                return self._default_copy(page_id)
            self._cache[page_id] = page
            self._write_mirror({page_id: page})
            return page.model_copy(deep=True)

        if response.status_code == 404:
            page = self._default_copy(page_id)
            if page is None:
                logger.info("[content-store] no content found for %s", page_id)
                return None
            logger.info("[content-store] %s not found in api, initializing with default", page_id)
            await self._try_persist(page_id, page)
            self._cache[page_id] = page
            self._write_mirror({page_id: page})
            return page.model_copy(deep=True)

        logger.warning("[content-store] api returned status %s for %s", response.status_code, page_id)
        return self._default_copy(page_id)

    def get_page_content_sync(self, page_id: str) -> Optional[PageContent]:
        """Cache, then persistent mirror, then defaults. Never touches the network and never raises."""
        cached = self._cache.get(page_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        try:
            stored = self._read_mirror().get(page_id)
            if stored and stored.get("sections") is not None:
                page = PageContent.model_validate(stored)
                self._cache[page_id] = page
                return page.model_copy(deep=True)
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("[content-store] error reading local mirror: %s", exc)

        page = self._default_copy(page_id)
        if page is None:
            return None
        self._cache[page_id] = page
        return page.model_copy(deep=True)

    async def get_all_pages(self) -> List[PageContent]:
        try:
            response = await self.http.get(CONTENT_PATH)
            if response.is_success:
                pages = []
                for record in response.json():
                    try:
                        pages.append(_page_from_api(record))
                    except ValueError as exc:
                        logger.warning("[content-store] skipping unreadable record: %s", exc)
                return pages
            logger.warning("[content-store] listing returned status %s", response.status_code)
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("[content-store] failed to fetch all pages, using local mirror: %s", exc)

        try:
            stored = self._read_mirror()
            if stored:
                return [PageContent.model_validate(page) for page in stored.values()]
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("[content-store] error loading local mirror: %s", exc)
        return [self._default_copy(page_id) for page_id in self.defaults]

    # Writes
    async def save_page_content(self, page_id: str, content: PageContent) -> None:
        if page_id in self._saving:
            logger.warning("[content-store] already saving %s, skipping duplicate call", page_id)
            return

        self._saving.add(page_id)
        try:
            logger.info("[content-store] saving %s", page_id)
            await self._save_to_api(page_id, content)

            self.invalidate_cache(page_id)
            page = content.model_copy(deep=True)
            self._cache[page_id] = page
            self._write_mirror({page_id: page})
            self._notify_content_update(page_id, page)
        except ContentSaveError as exc:
            logger.error("[content-store] error saving %s: %s", page_id, exc)
            raise
        finally:
            self._saving.discard(page_id)

    def _notify_content_update(self, page_id: str, page: PageContent) -> None:
        self.events.emit(CONTENT_UPDATED, {"page_id": page_id, "content": page.model_copy(deep=True)})
        self.events.emit_later(
            GLOBAL_CONTENT_UPDATE,
            {"type": page_id, "content": page.model_copy(deep=True)},
            self.global_event_delay,
        )

    def invalidate_cache(self, page_id: Optional[str] = None) -> None:
        if page_id is not None:
            self._cache.pop(page_id, None)
            logger.info("[content-store] invalidated cache for %s", page_id)
        else:
            self._cache.clear()
            logger.info("[content-store] invalidated all cache")

        try:
            if page_id is not None:
                data = self._read_mirror()
                if page_id in data:
                    del data[page_id]
                    self.storage.set_item(self.storage_key, json.dumps(data))
            else:
                self.storage.remove_item(self.storage_key)
        except (OSError, ValueError) as exc:
            logger.warning("[content-store] failed to clear local mirror: %s", exc)

    async def reset_to_default(self) -> List[PersistFailure]:
        """Push every default page to the API, then show the defaults locally whatever the API said."""
        failures = []
        for page_id in self.defaults:
            failure = await self._try_persist(page_id, self._default_copy(page_id))
            if failure:
                failures.append(failure)

        self._cache = {page_id: self._default_copy(page_id) for page_id in self.defaults}
        self._write_mirror(self.defaults, replace=True)
        return failures
