"""Feedback form management and public response submission."""

import pytest

from tests.conftest import auth_headers

WORKSHOP_FORM = {
    "title": "Systematic review workshop",
    "description": "Tell us how it went",
    "questions": [
        {"id": "overall", "type": "rating", "question": "Overall rating", "required": True},
        {"id": "track", "type": "radio", "question": "Track", "options": ["Beginner", "Advanced"]},
        {"id": "topics", "type": "checkbox", "question": "Useful topics", "options": ["PICO", "PRISMA", "RoB"]},
        {"id": "comments", "type": "textarea", "question": "Comments"},
    ],
}


@pytest.fixture
def admin_headers(client, seed_users):
    return auth_headers(client, "admin@gireach.pk")


@pytest.fixture
def form_id(client, admin_headers):
    resp = client.post("/api/admin/feedback-forms", json=WORKSHOP_FORM, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def test_create_form_sets_creator(client, seed_users, admin_headers):
    resp = client.post("/api/admin/feedback-forms", json=WORKSHOP_FORM, headers=admin_headers)
    body = resp.json()
    assert body["isActive"] is True
    assert body["createdById"] == seed_users["admin"].id
    assert [q["id"] for q in body["questions"]] == ["overall", "track", "topics", "comments"]
    assert body["questions"][0]["options"] is None


def test_choice_question_without_options_rejected(client, admin_headers):
    payload = {"title": "Bad", "questions": [{"id": "q1", "type": "select", "question": "Pick"}]}
    resp = client.post("/api/admin/feedback-forms", json=payload, headers=admin_headers)
    assert resp.status_code == 400


def test_form_management_requires_admin(client, seed_users):
    headers = auth_headers(client, "mentor@gireach.pk")
    assert client.post("/api/admin/feedback-forms", json=WORKSHOP_FORM, headers=headers).status_code == 403
    assert client.get("/api/admin/feedback-forms", headers=headers).status_code == 403
    assert client.get("/api/admin/feedback-responses").status_code == 401


def test_submit_and_list_responses(client, admin_headers, form_id):
    resp = client.post(
        "/api/feedback-responses",
        json={"formId": form_id, "responses": {"overall": 5, "track": "Advanced", "topics": ["PICO", "RoB"]}},
    )
    assert resp.status_code == 201
    assert resp.json()["message"] == "Feedback response submitted successfully"
    response_id = resp.json()["id"]

    forms = client.get("/api/admin/feedback-forms", headers=admin_headers).json()
    assert forms[0]["responseCount"] == 1

    by_path = client.get(f"/api/admin/feedback-responses/{form_id}", headers=admin_headers).json()
    by_query = client.get("/api/admin/feedback-responses", params={"form_id": form_id}, headers=admin_headers).json()
    assert [r["id"] for r in by_path] == [response_id]
    assert by_query == by_path

    assert client.delete(f"/api/admin/feedback-responses/{response_id}", headers=admin_headers).status_code == 200
    assert client.get("/api/admin/feedback-responses", headers=admin_headers).json() == []


@pytest.mark.parametrize(
    "answers, detail",
    [
        ({"track": "Beginner"}, "Question 'overall' is required"),
        ({"overall": 9}, "Rating for question 'overall' must be between 1 and 5"),
        ({"overall": 3, "track": "Expert"}, "Invalid option for question 'track'"),
        ({"overall": 3, "topics": ["PICO", "GRADE"]}, "Invalid option for question 'topics'"),
        ({"overall": 3, "extra": "x"}, "Unknown question ids: extra"),
    ],
)
def test_invalid_answers_rejected(client, form_id, answers, detail):
    resp = client.post("/api/feedback-responses", json={"formId": form_id, "responses": answers})
    assert resp.status_code == 400
    assert resp.json()["detail"] == detail


def test_submit_to_unknown_form_is_404(client):
    resp = client.post("/api/feedback-responses", json={"formId": "missing", "responses": {}})
    assert resp.status_code == 404


def test_inactive_form_hidden_and_closed(client, admin_headers, form_id):
    assert [f["id"] for f in client.get("/api/feedback-forms/active").json()] == [form_id]

    resp = client.put(f"/api/admin/feedback-forms/{form_id}/toggle", json={"isActive": False}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["isActive"] is False
    assert client.get("/api/feedback-forms/active").json() == []

    resp = client.post("/api/feedback-responses", json={"formId": form_id, "responses": {"overall": 4}})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Feedback form is not accepting responses"


def test_delete_form_removes_responses(client, admin_headers, form_id):
    client.post("/api/feedback-responses", json={"formId": form_id, "responses": {"overall": 4}})

    assert client.delete(f"/api/admin/feedback-forms/{form_id}", headers=admin_headers).status_code == 200
    assert client.get("/api/admin/feedback-responses", headers=admin_headers).json() == []
    assert client.delete(f"/api/admin/feedback-forms/{form_id}", headers=admin_headers).status_code == 404
