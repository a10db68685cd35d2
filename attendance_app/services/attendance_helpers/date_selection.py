# /attendance_app/services/attendance_helpers/date_selection.py

"""
The pending selection of the multi-date picker on the class detail page.

A `DateSelection` knows which dates already have a record and what "today"
is. Dates that are recorded or in the future can never enter the selection;
everything else toggles in and out on each `select`.
"""

from datetime import date
from typing import Iterable, List, Set

from ...core.exceptions import DateAlreadyRecordedError, DateNotSelectableError


class DateSelection:
    def __init__(self, recorded_dates: Iterable[date], today: date):
        self.recorded_dates: Set[date] = set(recorded_dates)
        self.today = today
        self._selected: Set[date] = set()

    def is_recorded(self, day: date) -> bool:
        return day in self.recorded_dates

    def is_future(self, day: date) -> bool:
        return day > self.today

    def is_selectable(self, day: date) -> bool:
        return not self.is_recorded(day) and not self.is_future(day)

    def select(self, day: date) -> bool:
        """
        Toggles `day` and returns whether it is selected afterwards.

        Raises DateAlreadyRecordedError for a recorded date and
        DateNotSelectableError for a future one; the selection is left
        untouched in both cases.
        """
        if self.is_recorded(day):
            raise DateAlreadyRecordedError(day)
        if self.is_future(day):
            raise DateNotSelectableError(day)
        if day in self._selected:
            self._selected.discard(day)
            return False
        self._selected.add(day)
        return True

    def add(self, day: date) -> None:
        """Like `select`, but a date that is already selected stays selected."""
        if day not in self._selected:
            self.select(day)

    def clear(self) -> None:
        self._selected.clear()

    @property
    def dates(self) -> List[date]:
        return sorted(self._selected)

    def __contains__(self, day: date) -> bool:
        return day in self._selected

    def __len__(self) -> int:
        return len(self._selected)
