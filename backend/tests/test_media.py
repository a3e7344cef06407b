"""Media library upload, metadata edits and deletion."""

from pathlib import Path

import pytest

from gireach.config import settings
from tests.conftest import auth_headers

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


def _upload(client, headers, name="logo.png", content=PNG_BYTES, mime="image/png"):
    return client.post(
        "/api/admin/media",
        headers=headers,
        files={"file": (name, content, mime)},
        data={"alt_text": "Site logo", "description": "Header logo"},
    )


def test_upload_requires_admin(client, seed_users, upload_dir):
    files = {"file": ("logo.png", PNG_BYTES, "image/png")}
    assert client.post("/api/admin/media", files=files).status_code == 401

    headers = auth_headers(client, "mentee@gireach.pk")
    assert client.post("/api/admin/media", files=files, headers=headers).status_code == 403


def test_upload_and_list(client, seed_users, upload_dir):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = _upload(client, headers)
    assert resp.status_code == 201
    media = resp.json()
    assert media["originalName"] == "logo.png"
    assert media["altText"] == "Site logo"
    assert media["fileSize"] == len(PNG_BYTES)
    assert media["fileUrl"].startswith("/uploads/media/")
    assert media["uploadedById"] == seed_users["admin"].id
    assert (upload_dir / "media" / media["fileName"]).exists()

    listed = client.get("/api/admin/media", headers=headers).json()
    assert [m["id"] for m in listed] == [media["id"]]


def test_upload_rejects_non_image(client, seed_users, upload_dir):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = _upload(client, headers, name="paper.pdf", content=b"%PDF-1.4", mime="application/pdf")
    assert resp.status_code == 400


def test_upload_rejects_empty_file(client, seed_users, upload_dir):
    headers = auth_headers(client, "admin@gireach.pk")
    resp = _upload(client, headers, content=b"")
    assert resp.status_code == 400


def test_update_metadata(client, seed_users, upload_dir):
    headers = auth_headers(client, "admin@gireach.pk")
    media_id = _upload(client, headers).json()["id"]

    resp = client.put(f"/api/admin/media/{media_id}", json={"altText": "New alt"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["altText"] == "New alt"
    assert resp.json()["description"] == "Header logo"


def test_delete_removes_file(client, seed_users, upload_dir):
    headers = auth_headers(client, "admin@gireach.pk")
    media = _upload(client, headers).json()
    path = Path(upload_dir) / "media" / media["fileName"]
    assert path.exists()

    resp = client.delete(f"/api/admin/media/{media['id']}", headers=headers)
    assert resp.status_code == 200
    assert not path.exists()
    assert client.get(f"/api/admin/media/{media['id']}", headers=headers).status_code == 404
    assert client.delete(f"/api/admin/media/{media['id']}", headers=headers).status_code == 404
