# /attendance_app/services/class_helpers/edit_form.py

"""
State for editing an existing class.

`ClassEditForm` is the transient edit buffer: it holds the raw text the user
typed and only hands a validated `(name, target_days)` pair to the save
callback. While the callback runs the form reports `is_saving` and refuses a
second submission.

`SaveGuard` gives the same protection across concurrent HTTP requests: only
one save per class can be in flight at a time.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Set, Tuple

from ...common.validators import require_non_empty, parse_target_days
from ...core.exceptions import SaveInProgressError


@dataclass
class ClassEditForm:
    name: str = ""
    target_days_text: str = ""
    is_saving: bool = False

    def parsed(self) -> Tuple[str, Optional[int]]:
        """Raises ValueError for an empty name or a target that is not a positive whole number."""
        return require_non_empty(self.name, "Class name"), parse_target_days(self.target_days_text)

    def submit(self, on_save: Callable[[str, Optional[int]], object]) -> bool:
        """
        Calls `on_save(name, target_days)` if the buffer is valid.

        Returns False (and does not call `on_save`) when the name is blank.
        Invalid target text raises ValueError.
        """
        if self.is_saving:
            raise SaveInProgressError("A save is already in progress.")
        if not self.name or not self.name.strip():
            return False
        name, target_days = self.parsed()

        self.is_saving = True
        try:
            on_save(name, target_days)
        finally:
            self.is_saving = False
        return True


class SaveGuard:
    def __init__(self):
        self._lock = threading.Lock()
        self._in_flight: Set[str] = set()

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._lock:
            if key in self._in_flight:
                raise SaveInProgressError(f"A save for {key} is already in progress.")
            self._in_flight.add(key)
        try:
            yield
        finally:
            with self._lock:
                self._in_flight.discard(key)


# Shared by all requests of this process.
class_save_guard = SaveGuard()
