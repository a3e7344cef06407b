from pathlib import Path
from types import SimpleNamespace

import pytest

from gireach.storage import (
    DatabaseBackend,
    DatabaseStorage,
    FileBackend,
    FileStorage,
    HybridStorage,
    resolve_backend,
)
from gireach.schemas.settings import WebsiteSettingsUpsert


def test_resolve_backend_prefers_database_url():
    backend = resolve_backend(SimpleNamespace(DATABASE_URL="sqlite:///x.db", DATA_DIR="data"))
    assert backend == DatabaseBackend(url="sqlite:///x.db")


def test_resolve_backend_falls_back_to_files():
    backend = resolve_backend(SimpleNamespace(DATABASE_URL="", DATA_DIR="some/dir"))
    assert backend == FileBackend(path=Path("some/dir"))


def test_file_backend_delegate(tmp_path):
    storage = HybridStorage(FileBackend(path=tmp_path))
    assert isinstance(storage.delegate, FileStorage)
    assert storage.uses_database is False

    storage.save_website_settings(WebsiteSettingsUpsert(setting_key="theme", setting_value={"mode": "light"}))
    assert storage.delegate.get_website_settings("theme").setting_value == {"mode": "light"}


def test_database_backend_delegate(tmp_path):
    storage = HybridStorage(DatabaseBackend(url=f"sqlite:///{tmp_path / 'hybrid.db'}"))
    assert isinstance(storage.delegate, DatabaseStorage)
    assert storage.uses_database is True

    storage.delegate.create_tables()
    storage.save_website_settings(WebsiteSettingsUpsert(setting_key="theme", setting_value={"mode": "dark"}))
    assert storage.get_website_settings("theme").setting_value == {"mode": "dark"}
    storage.delegate.engine.dispose()


def test_backend_choice_is_fixed(tmp_path):
    storage = HybridStorage(FileBackend(path=tmp_path))
    delegate = storage.delegate
    storage.get_all_page_contents()
    storage.get_media_library()
    assert storage.delegate is delegate


def test_unknown_backend_rejected():
    with pytest.raises(TypeError):
        HybridStorage("postgres")


def test_every_call_reaches_the_delegate(tmp_path):
    storage = HybridStorage(FileBackend(path=tmp_path))
    storage.save_website_settings(WebsiteSettingsUpsert(setting_key="logo", setting_value={"text": "GI"}))

    updated = storage.update_website_settings("logo", {"text": "GI REACH"}, updated_by_id="admin-1")

    assert updated.setting_value == {"text": "GI REACH"}
    assert storage.delegate.get_website_settings("logo").updated_by_id == "admin-1"
    assert storage.update_website_settings("missing", {}) is None
    assert storage.get_feedback_responses() == []
    assert not HybridStorage.__abstractmethods__
