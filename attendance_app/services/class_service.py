# /attendance_app/services/class_service.py

"""
This service module is the business logic layer behind the dashboard: listing
the user's classes with their progress, and creating, editing and deleting
classes.

It orchestrates the `crud` and `edit_form` helpers and the `DatabaseService`.
Every function requires the `user_id` of the signed-in user so that all
operations are scoped to that user's own classes.
"""

import logging
from typing import List, Optional

from ..models import class_model
from .database_service import DatabaseService
from .class_helpers import crud
from .class_helpers.edit_form import ClassEditForm, class_save_guard

logger = logging.getLogger(__name__)


# --- Derived Values ---

def is_target_reached(attendance_count: int, target_days: Optional[int]) -> bool:
    """A class reaches its target once it has at least `target_days` records. No target, never reached."""
    return target_days is not None and attendance_count >= target_days


def _to_summary(class_obj, attendance_count: int) -> class_model.ClassSummary:
    return class_model.ClassSummary(
        id=class_obj.id,
        name=class_obj.name,
        description=class_obj.description,
        target_days=class_obj.target_days,
        created_at=class_obj.created_at,
        attendance_count=attendance_count,
        target_reached=is_target_reached(attendance_count, class_obj.target_days),
    )


# --- Facade Methods ---

def get_all_classes_with_summary(user_id: str, db: DatabaseService) -> List[class_model.ClassSummary]:
    """
    All classes of the user, newest first, each with its attendance count.
    Store errors are logged and re-raised; the caller's last good list stays valid.
    """
    try:
        rows = db.get_classes_with_attendance_counts(user_id=user_id)
    except Exception:
        logger.exception("Error loading classes for user %s", user_id)
        raise
    return [_to_summary(cls, count) for cls, count in rows]


def create_class(class_data: class_model.ClassCreate, db: DatabaseService, user_id: str) -> class_model.ClassSummary:
    new_class = crud.create_class(class_data=class_data, db=db, user_id=user_id)
    return _to_summary(new_class, 0)


def update_class(
    class_id: str,
    class_update: class_model.ClassUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[class_model.Class]:
    """
    Saves the edit dialog for one class.

    The raw values go through a `ClassEditForm`, so a blank name or a
    non-numeric target raises ValueError before the store is touched. Only one
    save per class may be in flight; a concurrent one raises SaveInProgressError.
    Returns None if the class does not exist or belongs to someone else.
    """
    target = class_update.target_days
    form = ClassEditForm(
        name=class_update.name or "",
        target_days_text="" if target is None else str(target),
    )
    # Blank names are rejected up front, with the same message as the create form.
    form.parsed()

    updated = {}

    def _save(name: str, target_days: Optional[int]) -> None:
        updated["class"] = crud.update_class(
            class_id=class_id, name=name, target_days=target_days, db=db, user_id=user_id
        )

    with class_save_guard.hold(class_id):
        form.submit(_save)

    db_class = updated.get("class")
    return class_model.Class.model_validate(db_class) if db_class else None


def delete_class_by_id(class_id: str, db: DatabaseService, user_id: str) -> bool:
    return crud.delete_class_by_id(class_id=class_id, db=db, user_id=user_id)
