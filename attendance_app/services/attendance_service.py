# /attendance_app/services/attendance_service.py

"""
Business logic for the class detail page: the attendance history of one
class, marking today, marking several past dates picked in the calendar, and
cancelling a record.

Every mutation is followed by a fresh read of the class and its records, and
that reloaded state is what gets returned. Nothing is patched incrementally.
"""

import logging
import uuid
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd
from sqlalchemy.exc import IntegrityError

from ..common import datetime_utils
from ..core.exceptions import DateAlreadyRecordedError
from ..models import attendance_model, class_model
from .attendance_helpers.calendar_view import build_calendar_month
from .attendance_helpers.date_selection import DateSelection
from .class_service import is_target_reached
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ['Date', 'Weekday', 'Class Name']


# --- Read Side ---

def get_class_details(class_id: str, user_id: str, db: DatabaseService) -> Optional[attendance_model.ClassDetails]:
    """
    Loads one class with its attendance history (newest first) and the values
    derived from it. Returns None if the class does not exist or is not owned
    by the user.
    """
    class_info = db.get_class_by_id(class_id=class_id, user_id=user_id)
    if not class_info:
        return None

    records = db.get_attendance_by_class_id(class_id=class_id, user_id=user_id)
    today = datetime_utils.today_utc()
    attendance_count = len(records)

    return attendance_model.ClassDetails(
        class_info=class_model.Class.model_validate(class_info),
        records=[attendance_model.AttendanceRecord.model_validate(r) for r in records],
        attendance_count=attendance_count,
        target_reached=is_target_reached(attendance_count, class_info.target_days),
        is_marked_today=any(r.date == today for r in records),
        today=today,
    )


def _selection_for(class_id: str, user_id: str, db: DatabaseService) -> Optional[DateSelection]:
    if not db.get_class_by_id(class_id=class_id, user_id=user_id):
        return None
    records = db.get_attendance_by_class_id(class_id=class_id, user_id=user_id)
    return DateSelection(recorded_dates=[r.date for r in records], today=datetime_utils.today_utc())


def get_calendar(
    class_id: str,
    user_id: str,
    db: DatabaseService,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> Optional[attendance_model.CalendarMonth]:
    selection = _selection_for(class_id, user_id, db)
    if selection is None:
        return None
    year = year or selection.today.year
    month = month or selection.today.month
    return build_calendar_month(year, month, selection)


# --- Write Side ---

def _insert_dates(class_id: str, user_id: str, dates: List[date], db: DatabaseService) -> None:
    records = [
        {"id": f"att_{uuid.uuid4().hex[:12]}", "class_id": class_id, "user_id": user_id, "date": day}
        for day in dates
    ]
    try:
        db.add_attendance_records(records)
    except IntegrityError:
        # Another session recorded one of these dates first.
        logger.warning("Duplicate attendance rejected by the store for class %s", class_id)
        raise DateAlreadyRecordedError()


def mark_today(class_id: str, user_id: str, db: DatabaseService) -> Optional[attendance_model.ClassDetails]:
    """
    Records today's attendance. Raises DateAlreadyRecordedError (and inserts
    nothing) if today is already recorded.
    """
    details = get_class_details(class_id=class_id, user_id=user_id, db=db)
    if details is None:
        return None
    if details.is_marked_today:
        raise DateAlreadyRecordedError(details.today)

    _insert_dates(class_id, user_id, [details.today], db)
    logger.info("Marked %s for class %s", details.today.isoformat(), class_id)
    return get_class_details(class_id=class_id, user_id=user_id, db=db)


def mark_dates(
    class_id: str,
    dates: Iterable[date],
    user_id: str,
    db: DatabaseService,
) -> Optional[attendance_model.ClassDetails]:
    """
    Records every picked date with ONE batched insert.

    An empty pick is a no-op. Each date is run through a `DateSelection`, so a
    recorded date raises DateAlreadyRecordedError and a future one raises
    DateNotSelectableError before anything is written. Repeated dates in the
    request count once.
    """
    selection = _selection_for(class_id, user_id, db)
    if selection is None:
        return None

    for day in dates:
        selection.add(day)

    if len(selection):
        _insert_dates(class_id, user_id, selection.dates, db)
        logger.info("Marked %d date(s) for class %s", len(selection), class_id)
        selection.clear()

    return get_class_details(class_id=class_id, user_id=user_id, db=db)


def cancel_record(class_id: str, record_id: str, user_id: str, db: DatabaseService) -> bool:
    was_deleted = db.delete_attendance_record(record_id=record_id, class_id=class_id, user_id=user_id)
    if was_deleted:
        logger.info("Cancelled attendance record %s of class %s", record_id, class_id)
    return was_deleted


# --- Export ---

def export_history_as_csv(class_id: str, user_id: str, db: DatabaseService) -> str:
    """
    The attendance history of one class as CSV, newest date first.
    Raises ValueError if the class is not found or not owned by the user.
    """
    class_info = db.get_class_by_id(class_id=class_id, user_id=user_id)
    if not class_info:
        raise ValueError(f"Class with ID {class_id} not found or access denied.")

    records = db.get_attendance_by_class_id(class_id=class_id, user_id=user_id)
    export_data = [
        {
            'Date': r.date.isoformat(),
            'Weekday': r.date.strftime('%A'),
            'Class Name': class_info.name,
        } for r in records
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
