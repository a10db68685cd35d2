# /attendance_app/core/exceptions.py

"""
Domain exceptions raised by the service layer.

They subclass the built-in exceptions the routers already translate
(ValueError -> 4xx), so a router can catch the broad type or the specific one.
"""


class DateAlreadyRecordedError(ValueError):
    """Raised when attendance for a (class, date) pair already exists."""

    def __init__(self, day=None):
        self.day = day
        super().__init__("Attendance already recorded for this date")


class DateNotSelectableError(ValueError):
    """Raised when a date lies in the future and cannot be marked yet."""

    def __init__(self, day):
        self.day = day
        super().__init__(f"{day.isoformat()} is in the future and cannot be marked")


class SaveInProgressError(RuntimeError):
    """Raised when a second save is submitted while the first is still running."""
