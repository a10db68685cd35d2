# /tests/test_classes_api.py

import pytest
from sqlalchemy import text


def create_class(client, headers, name, target_days=None):
    response = client.post("/api/classes", json={"name": name, "target_days": target_days}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_new_class_starts_at_zero(client, auth_headers):
    created = create_class(client, auth_headers, "Algebra", 10)

    assert created["name"] == "Algebra"
    assert created["target_days"] == 10
    assert created["attendance_count"] == 0
    assert created["target_reached"] is False


def test_classes_are_listed_newest_first(client, auth_headers):
    for name in ("First", "Second", "Third"):
        create_class(client, auth_headers, name)

    names = [c["name"] for c in client.get("/api/classes", headers=auth_headers).json()]
    assert names == ["Third", "Second", "First"]


def test_blank_name_creates_nothing(client, auth_headers):
    response = client.post("/api/classes", json={"name": "   ", "target_days": 5}, headers=auth_headers)
    assert response.status_code == 422
    assert client.get("/api/classes", headers=auth_headers).json() == []


def test_target_days_parsing(client, auth_headers):
    assert create_class(client, auth_headers, "Blank target", "")["target_days"] is None
    assert create_class(client, auth_headers, "Text target", "12")["target_days"] == 12

    for bad in ("abc", 0, -3):
        response = client.post("/api/classes", json={"name": "Bad", "target_days": bad}, headers=auth_headers)
        assert response.status_code == 422, bad


def test_edit_class(client, auth_headers):
    created = create_class(client, auth_headers, "Algebra", 10)

    response = client.put(
        f"/api/classes/{created['id']}",
        json={"name": " Algebra II ", "target_days": ""},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Algebra II"
    assert response.json()["target_days"] is None

    listed = client.get("/api/classes", headers=auth_headers).json()
    assert listed[0]["name"] == "Algebra II"


def test_edit_rejects_blank_name_and_bad_target(client, auth_headers):
    created = create_class(client, auth_headers, "Algebra", 10)
    url = f"/api/classes/{created['id']}"

    assert client.put(url, json={"name": "  ", "target_days": 3}, headers=auth_headers).status_code == 422
    assert client.put(url, json={"name": "Algebra", "target_days": "ten"}, headers=auth_headers).status_code == 422

    listed = client.get("/api/classes", headers=auth_headers).json()
    assert listed[0]["name"] == "Algebra" and listed[0]["target_days"] == 10


@pytest.mark.parametrize("bad_target", [True, 3.5, 3.0])
def test_create_and_edit_reject_the_same_non_integer_targets(client, auth_headers, bad_target):
    """
    GIVEN: An existing class with target 10.
    WHEN: A boolean or float target is sent to the create form and to the edit dialog.
    THEN: Both answer 422 and the stored class is unchanged.
    """
    created = create_class(client, auth_headers, "Algebra", 10)

    response = client.post("/api/classes", json={"name": "B", "target_days": bad_target}, headers=auth_headers)
    assert response.status_code == 422

    response = client.put(
        f"/api/classes/{created['id']}", json={"name": "A", "target_days": bad_target}, headers=auth_headers
    )
    assert response.status_code == 422

    listed = client.get("/api/classes", headers=auth_headers).json()
    assert [(c["name"], c["target_days"]) for c in listed] == [("Algebra", 10)]


def test_edit_unknown_class_is_404(client, auth_headers):
    response = client.put("/api/classes/cls_missing", json={"name": "X"}, headers=auth_headers)
    assert response.status_code == 404


def test_concurrent_edit_of_same_class_conflicts(client, auth_headers):
    from attendance_app.services.class_helpers.edit_form import class_save_guard

    created = create_class(client, auth_headers, "Algebra", 10)
    with class_save_guard.hold(created["id"]):
        response = client.put(f"/api/classes/{created['id']}", json={"name": "Other"}, headers=auth_headers)
    assert response.status_code == 409


def test_delete_requires_confirmation(client, auth_headers):
    created = create_class(client, auth_headers, "Algebra")

    assert client.delete(f"/api/classes/{created['id']}", headers=auth_headers).status_code == 400
    assert len(client.get("/api/classes", headers=auth_headers).json()) == 1


def test_delete_cascades_to_attendance(client, auth_headers, engine):
    created = create_class(client, auth_headers, "Algebra")
    client.post(
        f"/api/classes/{created['id']}/attendance/batch",
        json={"dates": ["2026-03-01", "2026-03-02"]},
        headers=auth_headers,
    )

    response = client.delete(f"/api/classes/{created['id']}?confirm=true", headers=auth_headers)
    assert response.status_code == 204

    assert client.get("/api/classes", headers=auth_headers).json() == []
    with engine.connect() as conn:
        remaining = conn.execute(
            text("SELECT COUNT(*) FROM attendance WHERE class_id = :cid"), {"cid": created["id"]}
        ).scalar()
    assert remaining == 0
    assert client.delete(f"/api/classes/{created['id']}?confirm=true", headers=auth_headers).status_code == 404


def test_users_only_see_their_own_classes(client, login_as):
    alice = login_as("alice")
    bob = login_as("bob")
    created = create_class(client, alice, "Private")

    assert client.get("/api/classes", headers=bob).json() == []
    assert client.get(f"/api/classes/{created['id']}", headers=bob).status_code == 404
    assert client.put(f"/api/classes/{created['id']}", json={"name": "Mine"}, headers=bob).status_code == 404
    assert client.delete(f"/api/classes/{created['id']}?confirm=true", headers=bob).status_code == 404
    assert client.post(f"/api/classes/{created['id']}/attendance/today", headers=bob).status_code == 404


def test_dashboard_summary(client, auth_headers):
    reached = create_class(client, auth_headers, "Short", 1)
    create_class(client, auth_headers, "Open-ended")
    client.post(f"/api/classes/{reached['id']}/attendance/today", headers=auth_headers)

    summary = client.get("/api/dashboard/summary", headers=auth_headers).json()
    assert summary == {"classCount": 2, "attendanceCount": 1, "targetsReached": 1}
