# /attendance_app/services/database_helpers/class_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the `classes` table.

Every method that reads or modifies a class requires the owner's `user_id`,
so a user can never see or change another user's classes: a class that exists
but belongs to someone else looks exactly like a class that does not exist.
"""

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...db.models.class_attendance_models import Class, AttendanceRecord

logger = logging.getLogger(__name__)


class ClassRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_classes_with_attendance_counts(self, user_id: str) -> List[Tuple[Class, int]]:
        """
        All classes owned by the user, newest first, each paired with the
        number of its attendance records. The count is computed by the
        database (outer join + COUNT), so classes without records get 0.
        """
        return (
            self.db.query(Class, func.count(AttendanceRecord.id))
            .outerjoin(AttendanceRecord, AttendanceRecord.class_id == Class.id)
            .filter(Class.user_id == user_id)
            .group_by(Class.id)
            .order_by(Class.created_at.desc(), Class.id.desc())
            .all()
        )

    def get_class_by_id(self, class_id: str, user_id: str) -> Optional[Class]:
        return self.db.query(Class).filter(Class.id == class_id, Class.user_id == user_id).first()

    def add_class(self, record: Dict) -> Class:
        """
        Creates a new Class record.
        This function expects the `user_id` to be present in the `record` dictionary.
        """
        new_class = Class(**record)
        try:
            self.db.add(new_class)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error creating class %r", record.get("name"))
            raise
        self.db.refresh(new_class)
        return new_class

    def update_class(self, class_id: str, user_id: str, data: Dict) -> Optional[Class]:
        db_class = self.get_class_by_id(class_id=class_id, user_id=user_id)
        if db_class:
            for key, value in data.items():
                setattr(db_class, key, value)
            try:
                self.db.commit()
            except SQLAlchemyError:
                self.db.rollback()
                logger.exception("Error updating class %s", class_id)
                raise
            self.db.refresh(db_class)
        return db_class

    def delete_class(self, class_id: str, user_id: str) -> bool:
        db_class = self.get_class_by_id(class_id=class_id, user_id=user_id)
        if not db_class:
            return False
        try:
            # The cascade on Class.attendance removes the attendance rows.
            self.db.delete(db_class)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error deleting class %s", class_id)
            raise
        return True
