# /attendance_app/common/datetime_utils.py

from datetime import date, datetime, timezone


def today_utc() -> date:
    """The current calendar date in UTC.

    Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc).date()
