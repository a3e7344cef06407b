"""Client-side cache of website settings (logo, theme, navigation, footer, ...)."""

import asyncio
import copy
import logging
from typing import Any, Dict, Optional

import httpx

from gireach.client.errors import SettingsSaveError
from gireach.client.events import EventBus
from gireach.config import settings

logger = logging.getLogger(__name__)

SETTINGS_PATH = "/api/admin/settings"

SETTING_UPDATED = "settingUpdated"
GLOBAL_SETTINGS_UPDATE = "globalSettingsUpdate"
SETTINGS_INITIALIZED = "settingsInitialized"


class SettingsStore:
    def __init__(
        self,
        http: httpx.AsyncClient,
        events: Optional[EventBus] = None,
        global_event_delay: float = settings.GLOBAL_EVENT_DELAY_SECONDS,
    ):
        self.http = http
        self.events = events if events is not None else EventBus()
        self.global_event_delay = global_event_delay
        self._cache: Dict[str, Any] = {}
        self._initialized = False
        self._init_task: Optional[asyncio.Task] = None

    def is_ready(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        if self._initialized:
            return
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._do_initialize())
        try:
            await asyncio.shield(self._init_task)
        except Exception:
            self._init_task = None
            raise

    async def _do_initialize(self) -> None:
        logger.info("[settings-store] initializing settings from api")
        try:
            response = await self.http.get(SETTINGS_PATH)
            if response.is_success:
                for record in response.json():
                    self._cache.setdefault(record["settingKey"], record.get("settingValue"))
                self._initialized = True
                logger.info("[settings-store] loaded %d settings", len(self._cache))
                self.events.emit(SETTINGS_INITIALIZED, {"settings": copy.deepcopy(self._cache)})
                return
            logger.warning("[settings-store] failed to load settings: status %s", response.status_code)
        except (httpx.HTTPError, ValueError, TypeError, KeyError) as exc:
            logger.error("[settings-store] error initializing settings: %s", exc)
        # Empty cache; callers fall back to their own defaults.
        self._initialized = True

    async def get_setting(self, key: str) -> Any:
        await self.initialize()
        if key in self._cache:
            return copy.deepcopy(self._cache[key])

        try:
            response = await self.http.get(f"{SETTINGS_PATH}/{key}")
            if response.is_success:
                value = response.json().get("settingValue")
                self._cache[key] = value
                return copy.deepcopy(value)
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            logger.warning("[settings-store] error fetching setting %s: %s", key, exc)
        return None

    async def save_setting(self, key: str, value: Any) -> None:
        logger.info("[settings-store] saving setting %s", key)
        try:
            response = await self.http.post(SETTINGS_PATH, json={"settingKey": key, "settingValue": value})
        except httpx.HTTPError as exc:
            logger.error("[settings-store] error saving setting %s: %s", key, exc)
            raise SettingsSaveError(key, f"Failed to save setting {key}: {exc}") from exc
        if not response.is_success:
            logger.error("[settings-store] error saving setting %s: status %s", key, response.status_code)
            raise SettingsSaveError(
                key, f"Failed to save setting {key}: {response.status_code} {response.text}", response.status_code
            )

        self._cache[key] = copy.deepcopy(value)
        self.events.emit(SETTING_UPDATED, {"key": key, "value": copy.deepcopy(value)})
        self.events.emit_later(
            GLOBAL_SETTINGS_UPDATE, {"type": key, "settings": copy.deepcopy(value)}, self.global_event_delay
        )

    async def get_all_settings(self) -> Dict[str, Any]:
        await self.initialize()
        return copy.deepcopy(self._cache)

    async def refresh(self) -> None:
        self._cache.clear()
        self._initialized = False
        self._init_task = None
        await self.initialize()
