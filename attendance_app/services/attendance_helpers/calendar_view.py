# /attendance_app/services/attendance_helpers/calendar_view.py

import calendar
from datetime import date

from ...models.attendance_model import CalendarDay, CalendarMonth
from .date_selection import DateSelection


def build_calendar_month(year: int, month: int, selection: DateSelection) -> CalendarMonth:
    """Every day of the month, flagged the way the date picker disables them."""
    _, days_in_month = calendar.monthrange(year, month)
    days = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        days.append(CalendarDay(
            date=day,
            recorded=selection.is_recorded(day),
            future=selection.is_future(day),
            selectable=selection.is_selectable(day),
        ))
    return CalendarMonth(year=year, month=month, days=days)
