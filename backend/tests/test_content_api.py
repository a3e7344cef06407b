"""Page content endpoints: public reads and admin-only writes."""

from tests.conftest import auth_headers

ABOUT_PAGE = {
    "pageId": "about",
    "pageName": "About Us",
    "sections": [
        {"id": "about-hero", "type": "hero", "title": "About GI REACH", "content": "Who we are"},
        {
            "id": "about-stats",
            "type": "stats",
            "title": "Impact",
            "content": "",
            "data": {"stats": [{"label": "Mentees", "value": "120"}]},
        },
    ],
}


def test_save_and_read_page(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = client.post("/api/admin/content", json=ABOUT_PAGE, headers=headers)
    assert resp.status_code == 201
    saved = resp.json()
    assert saved["pageId"] == "about"
    assert saved["updatedById"] == seed_users["admin"].id

    resp = client.get("/api/content/about")
    assert resp.status_code == 200
    page = resp.json()
    assert [s["id"] for s in page["sections"]] == ["about-hero", "about-stats"]
    assert page["sections"][1]["data"]["stats"][0]["value"] == "120"


def test_missing_page_is_404(client):
    resp = client.get("/api/content/publications")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Page content not found"


def test_list_pages(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    client.post("/api/admin/content", json=ABOUT_PAGE, headers=headers)
    client.post(
        "/api/admin/content",
        json={"pageId": "contact", "pageName": "Contact", "sections": []},
        headers=headers,
    )
    resp = client.get("/api/content")
    assert resp.status_code == 200
    assert {p["pageId"] for p in resp.json()} == {"about", "contact"}


def test_write_requires_admin(client, seed_users):
    assert client.post("/api/admin/content", json=ABOUT_PAGE).status_code == 401

    headers = auth_headers(client, "mentor@gireach.pk")
    resp = client.post("/api/admin/content", json=ABOUT_PAGE, headers=headers)
    assert resp.status_code == 403


def test_upsert_replaces_sections(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    client.post("/api/admin/content", json=ABOUT_PAGE, headers=headers)
    replacement = {
        "pageId": "about",
        "pageName": "About",
        "sections": [{"id": "only", "type": "text", "title": "One", "content": "Single section"}],
    }
    client.post("/api/admin/content", json=replacement, headers=headers)

    page = client.get("/api/content/about").json()
    assert page["pageName"] == "About"
    assert [s["id"] for s in page["sections"]] == ["only"]


def test_unknown_section_type_rejected(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    payload = {
        "pageId": "about",
        "pageName": "About",
        "sections": [{"id": "x", "type": "carousel", "title": "", "content": ""}],
    }
    resp = client.post("/api/admin/content", json=payload, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Validation error"


def test_duplicate_section_ids_rejected(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    payload = {
        "pageId": "about",
        "pageName": "About",
        "sections": [
            {"id": "dup", "type": "text", "title": "", "content": ""},
            {"id": "dup", "type": "hero", "title": "", "content": ""},
        ],
    }
    resp = client.post("/api/admin/content", json=payload, headers=headers)
    assert resp.status_code == 400


def test_update_unpublish_and_delete(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    client.post("/api/admin/content", json=ABOUT_PAGE, headers=headers)

    resp = client.put("/api/admin/content/about", json={"pageName": "About the Network"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["pageName"] == "About the Network"
    assert len(resp.json()["sections"]) == 2

    client.put("/api/admin/content/about", json={"isPublished": False}, headers=headers)
    assert client.get("/api/content/about").status_code == 404

    resp = client.delete("/api/admin/content/about", headers=headers)
    assert resp.status_code == 200
    assert client.delete("/api/admin/content/about", headers=headers).status_code == 404


def test_update_missing_page_is_404(client, seed_users):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = client.put("/api/admin/content/nope", json={"pageName": "X"}, headers=headers)
    assert resp.status_code == 404
