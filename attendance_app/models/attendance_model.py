# /attendance_app/models/attendance_model.py

from datetime import date
from typing import List

from pydantic import BaseModel, Field, ConfigDict

from .class_model import Class


class AttendanceRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    class_id: str
    date: date


class AttendanceBatchCreate(BaseModel):
    """The dates picked in the calendar, sent in one request."""
    dates: List[date] = Field(default_factory=list, description="Calendar dates as YYYY-MM-DD strings.")


class ClassDetails(BaseModel):
    """
    Everything the class detail page shows: the class itself, its attendance
    history (newest first) and the values derived from that history.
    """
    model_config = ConfigDict(from_attributes=True)

    class_info: Class
    records: List[AttendanceRecord]
    attendance_count: int
    target_reached: bool
    is_marked_today: bool
    today: date


class CalendarDay(BaseModel):
    date: date
    recorded: bool
    future: bool
    selectable: bool


class CalendarMonth(BaseModel):
    """One month of the date picker, with the non-selectable days flagged."""
    year: int
    month: int
    days: List[CalendarDay]
