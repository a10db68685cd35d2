# /attendance_app/services/class_helpers/crud.py

import logging
import uuid
from typing import Optional

from ...models import class_model
from ..database_service import DatabaseService
from ...db.models.class_attendance_models import Class

logger = logging.getLogger(__name__)


def create_class(class_data: class_model.ClassCreate, db: DatabaseService, user_id: str) -> Class:
    """
    Creates a new class record owned by `user_id` and returns the SQLAlchemy object.
    The payload has already been validated: the name is trimmed and non-empty.
    """
    new_class_record = class_data.model_dump()
    new_class_record["id"] = f"cls_{uuid.uuid4().hex[:12]}"
    new_class_record["user_id"] = user_id

    new_class_object = db.add_class(new_class_record)
    logger.info("Created class %s for user %s", new_class_object.id, user_id)
    return new_class_object


def update_class(class_id: str, name: str, target_days: Optional[int], db: DatabaseService, user_id: str) -> Optional[Class]:
    # Both fields are always written: clearing the target sets it back to NULL.
    update_data = {"name": name, "target_days": target_days}
    return db.update_class(class_id=class_id, user_id=user_id, class_update_data=update_data)


def delete_class_by_id(class_id: str, db: DatabaseService, user_id: str) -> bool:
    # Attendance rows go with the class through the store's cascade.
    was_deleted = db.delete_class(class_id=class_id, user_id=user_id)
    if was_deleted:
        logger.info("Deleted class %s for user %s", class_id, user_id)
    return was_deleted
