from gireach.services.settings_service import DEFAULT_LOGO_SETTINGS
from tests.conftest import auth_headers


def test_logo_initialized_on_first_read(client, storage):
    resp = client.get("/api/admin/settings/logo")
    assert resp.status_code == 200
    body = resp.json()
    assert body["settingKey"] == "logo"
    assert body["settingValue"]["primaryText"] == "GI REACH"
    assert body["settingValue"] == DEFAULT_LOGO_SETTINGS

    stored = storage.get_website_settings("logo")
    assert stored is not None
    assert stored.updated_by_id is None


def test_logo_init_records_reader(client, storage, seed_users):
    headers = auth_headers(client, "mentee@gireach.pk")
    client.get("/api/admin/settings/logo", headers=headers)
    assert storage.get_website_settings("logo").updated_by_id == seed_users["mentee"].id


def test_other_missing_setting_is_404(client):
    resp = client.get("/api/admin/settings/theme")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Settings not found"


def test_save_and_update_setting(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = client.post(
        "/api/admin/settings",
        json={"settingKey": "footer", "settingValue": {"text": "GI REACH 2025"}},
        headers=headers,
    )
    assert resp.status_code == 201
    assert resp.json()["updatedById"] == seed_users["admin"].id

    resp = client.put(
        "/api/admin/settings/footer",
        json={"settingValue": {"text": "GI REACH 2026"}},
        headers=headers,
    )
    assert resp.status_code == 200
    assert client.get("/api/admin/settings/footer").json()["settingValue"] == {"text": "GI REACH 2026"}

    keys = [s["settingKey"] for s in client.get("/api/admin/settings").json()]
    assert keys == ["footer"]


def test_update_missing_setting_is_404(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = client.put("/api/admin/settings/nope", json={"settingValue": 1}, headers=headers)
    assert resp.status_code == 404


def test_settings_writes_require_admin(client, seed_users):
    payload = {"settingKey": "theme", "settingValue": {"primary": "red"}}
    assert client.post("/api/admin/settings", json=payload).status_code == 401

    headers = auth_headers(client, "mentor@gireach.pk")
    assert client.post("/api/admin/settings", json=payload, headers=headers).status_code == 403
    assert client.put("/api/admin/settings/theme", json={"settingValue": 1}, headers=headers).status_code == 403
