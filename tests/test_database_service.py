# /tests/test_database_service.py

from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from attendance_app.services.database_service import DatabaseService


@pytest.fixture
def db_service(db_session):
    """
    A DatabaseService bound to a fresh in-memory database that already holds
    two users.
    """
    service = DatabaseService(db_session=db_session)
    for user_id in ("usr_a", "usr_b"):
        service.add_user({"id": user_id, "username": user_id, "hashed_password": "x", "is_active": True})
    return service


def add_class(service, class_id, user_id="usr_a", **extra):
    return service.add_class({"id": class_id, "name": class_id.title(), "user_id": user_id, **extra})


def add_dates(service, class_id, *days, user_id="usr_a"):
    return service.add_attendance_records([
        {"id": f"att_{class_id}_{d.isoformat()}", "class_id": class_id, "user_id": user_id, "date": d}
        for d in days
    ])


def test_add_and_get_class(db_service):
    add_class(db_service, "cls_1", target_days=5)

    retrieved = db_service.get_class_by_id("cls_1", user_id="usr_a")
    assert retrieved is not None
    assert retrieved.target_days == 5
    assert retrieved.created_at is not None


def test_class_of_another_user_is_invisible(db_service):
    add_class(db_service, "cls_1")

    assert db_service.get_class_by_id("cls_1", user_id="usr_b") is None
    assert db_service.update_class("cls_1", "usr_b", {"name": "Stolen"}) is None
    assert db_service.delete_class("cls_1", "usr_b") is False
    assert db_service.get_attendance_by_class_id("cls_1", user_id="usr_b") == []


def test_counts_come_from_the_store(db_service):
    add_class(db_service, "cls_1")
    add_class(db_service, "cls_2")
    add_class(db_service, "cls_other", user_id="usr_b")
    add_dates(db_service, "cls_1", date(2026, 3, 1), date(2026, 3, 2), date(2026, 3, 3))

    rows = db_service.get_classes_with_attendance_counts(user_id="usr_a")

    counts = {cls.id: count for cls, count in rows}
    assert counts == {"cls_1": 3, "cls_2": 0}
    # Newest class first.
    assert [cls.id for cls, _ in rows] == ["cls_2", "cls_1"]
    assert db_service.count_attendance_for_user("usr_a") == 3
    assert db_service.count_attendance_for_user("usr_b") == 0


def test_records_are_ordered_newest_date_first(db_service):
    add_class(db_service, "cls_1")
    add_dates(db_service, "cls_1", date(2026, 3, 2), date(2026, 3, 9), date(2026, 3, 5))

    records = db_service.get_attendance_by_class_id("cls_1", user_id="usr_a")
    assert [r.date for r in records] == [date(2026, 3, 9), date(2026, 3, 5), date(2026, 3, 2)]


def test_store_rejects_duplicate_class_date(db_service):
    add_class(db_service, "cls_1")
    add_dates(db_service, "cls_1", date(2026, 3, 2))

    with pytest.raises(IntegrityError):
        db_service.add_attendance_records([
            {"id": "att_new_1", "class_id": "cls_1", "user_id": "usr_a", "date": date(2026, 3, 3)},
            {"id": "att_new_2", "class_id": "cls_1", "user_id": "usr_a", "date": date(2026, 3, 2)},
        ])

    # The whole batch was rolled back.
    records = db_service.get_attendance_by_class_id("cls_1", user_id="usr_a")
    assert [r.date for r in records] == [date(2026, 3, 2)]


def test_deleting_a_class_removes_its_records(db_service):
    add_class(db_service, "cls_1")
    add_dates(db_service, "cls_1", date(2026, 3, 2), date(2026, 3, 3))

    assert db_service.delete_class("cls_1", "usr_a") is True
    assert db_service.get_class_by_id("cls_1", "usr_a") is None
    assert db_service.count_attendance_for_user("usr_a") == 0


def test_delete_record_checks_class_and_owner(db_service):
    add_class(db_service, "cls_1")
    add_class(db_service, "cls_2")
    add_dates(db_service, "cls_1", date(2026, 3, 2))
    record_id = "att_cls_1_2026-03-02"

    assert db_service.delete_attendance_record(record_id, class_id="cls_2", user_id="usr_a") is False
    assert db_service.delete_attendance_record(record_id, class_id="cls_1", user_id="usr_b") is False
    assert db_service.delete_attendance_record(record_id, class_id="cls_1", user_id="usr_a") is True


def test_sessions_can_be_opened_and_ended(db_service):
    expires = datetime.now(timezone.utc) + timedelta(hours=1)
    db_service.add_session({"id": "ses_1", "user_id": "usr_a", "expires_at": expires})

    assert db_service.get_session("ses_1", user_id="usr_a") is not None
    assert db_service.get_session("ses_1", user_id="usr_b") is None
    assert db_service.delete_session("ses_1", user_id="usr_a") is True
    assert db_service.get_session("ses_1", user_id="usr_a") is None


def test_expired_sessions_are_purged_per_user(db_service):
    now = datetime.now(timezone.utc)
    db_service.add_session({"id": "ses_old", "user_id": "usr_a", "expires_at": now - timedelta(minutes=5)})
    db_service.add_session({"id": "ses_live", "user_id": "usr_a", "expires_at": now + timedelta(hours=1)})
    db_service.add_session({"id": "ses_other", "user_id": "usr_b", "expires_at": now - timedelta(minutes=5)})

    assert db_service.delete_expired_sessions(user_id="usr_a", now=now) == 1

    assert db_service.get_session("ses_old", user_id="usr_a") is None
    assert db_service.get_session("ses_live", user_id="usr_a") is not None
    assert db_service.get_session("ses_other", user_id="usr_b") is not None
