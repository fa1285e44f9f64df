from __future__ import annotations

import uuid
from datetime import date, timedelta

LEAF = "mains-gs1-art-visual"


def _headers() -> dict:
    return {"x-user-id": f"learner-{uuid.uuid4().hex[:12]}"}


def test_health(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json().get("status") == "ok"
    assert "x-request-id" in health.headers


def test_missing_user_header_returns_validation_envelope(client):
    response = client.get("/syllabus")
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "validation_error"


def test_invalid_user_id_is_rejected(client):
    response = client.get("/syllabus", headers={"x-user-id": "../etc"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "http_error"


def test_fresh_syllabus_is_untouched(client):
    response = client.get("/syllabus", headers=_headers())
    assert response.status_code == 200
    data = response.json()
    assert [root["id"] for root in data["syllabus"]] == ["prelims", "mains"]
    assert data["summary"]["overall"] == 0
    assert data["optional_subject"]["id"] is None
    assert data["error"] is None


def test_tracking_and_revision_flow(client):
    headers = _headers()
    start_date = date.today() - timedelta(days=1)

    blocked = client.post(f"/syllabus/topics/{LEAF}/toggle", headers=headers)
    assert blocked.status_code == 200
    assert blocked.json()["accepted"] is False
    assert blocked.json()["code"] == "start_date_required"

    started = client.post(f"/syllabus/topics/{LEAF}/start", json={"start_date": start_date.isoformat()}, headers=headers)
    assert started.status_code == 200
    started_data = started.json()
    assert started_data["accepted"] is True
    assert started_data["status"] == "in-progress"
    assert {"mains-gs1-art", "mains-gs1", "mains"} <= set(started_data["changed_parent_ids"])

    detail = client.get(f"/syllabus/topics/{LEAF}", headers=headers).json()
    assert detail["is_leaf"] is True
    assert [p["id"] for p in detail["path"]] == ["mains", "mains-gs1", "mains-gs1-art"]
    assert detail["paper_label"] == "Mains GS Paper-I"
    checkpoints = {c["checkpoint"]: c for c in detail["checkpoints"]}
    assert checkpoints["d1"]["status"] == "due"
    assert checkpoints["d3"]["status"] == "pending"

    due = client.get("/revisions/due", headers=headers).json()
    assert due["count"] == 1
    assert due["items"][0]["leaf_id"] == LEAF

    early = client.post(f"/revisions/{LEAF}/d3/confirm", headers=headers).json()
    assert early["accepted"] is False
    assert early["notice"] == f"Revision pending. Due: {(start_date + timedelta(days=3)).isoformat()}"

    confirmed = client.post(f"/revisions/{LEAF}/d1/confirm", headers=headers).json()
    assert confirmed["accepted"] is True
    assert confirmed["notice"] == "Revision D1 confirmed!"
    assert client.get("/revisions/due", headers=headers).json()["count"] == 0


def test_parent_status_cascade(client):
    headers = _headers()
    response = client.put("/syllabus/topics/mains-essay/status", json={"status": "completed"}, headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is True
    assert len(data["changed_leaf_ids"]) == 5
    assert data["summary"]["mainsEssay"] == 100
    assert client.get("/syllabus/summary", headers=headers).json()["mainsEssay"] == 100


def test_unknown_topic_returns_404(client):
    response = client.post("/syllabus/topics/no-such-topic/toggle", headers=_headers())
    assert response.status_code == 404
    body = response.json()
    assert body["error"]["code"] == "topic_not_found"
    assert body["error"]["details"] == {"topic_id": "no-such-topic"}


def test_invalid_status_value_is_validation_error(client):
    response = client.put(f"/syllabus/topics/{LEAF}/status", json={"status": "done"}, headers=_headers())
    assert response.status_code == 422


def test_optional_subject_selection(client):
    headers = _headers()
    listing = client.get("/optional-subjects", headers=headers).json()
    assert listing["selected"] is None
    assert any(item["id"] == "sociology" and item["detailed"] for item in listing["items"])

    selected = client.put("/optional-subjects/selection", json={"subject_id": "sociology"}, headers=headers)
    assert selected.status_code == 200
    assert selected.json()["optional_subject"]["id"] == "sociology"
    syllabus = client.get("/syllabus", headers=headers).json()
    mains = syllabus["syllabus"][1]
    assert mains["children"][-1]["name"] == "Optional (SOCIOLOGY) P-II"

    rejected = client.put("/optional-subjects/selection", json={"subject_id": "astrology"}, headers=headers)
    assert rejected.status_code == 400


def test_daily_reminder_once_per_day(client):
    headers = _headers()
    start_date = (date.today() - timedelta(days=3)).isoformat()
    client.post(f"/syllabus/topics/{LEAF}/start", json={"start_date": start_date}, headers=headers)

    first = client.get("/revisions/reminder", headers=headers).json()
    assert first["show"] is True
    assert first["count"] == 2
    second = client.get("/revisions/reminder", headers=headers).json()
    assert second["show"] is False


def test_notifications_are_scoped_to_user(client):
    headers = _headers()
    client.post(f"/syllabus/topics/{LEAF}/toggle", headers=headers)
    items = client.get("/notifications", headers=headers).json()["items"]
    assert items
    assert all(item["user_id"] in (None, headers["x-user-id"]) for item in items)


def test_progress_store_status(client):
    status = client.get("/progress-store/status").json()
    assert status["active_mode"] == "file"
