# /attendance_app/services/database_helpers/attendance_repository_sql.py

"""
Raw SQLAlchemy queries for the `attendance` table.

Ownership is always checked through the parent class: a record is only
visible to, and deletable by, the owner of the class it belongs to.
"""

import logging
from typing import Dict, List

from sqlalchemy import func, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...db.models.class_attendance_models import Class, AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_records_by_class_id(self, class_id: str, user_id: str) -> List[AttendanceRecord]:
        """The attendance history of one class, newest date first."""
        return (
            self.db.query(AttendanceRecord)
            .join(Class, AttendanceRecord.class_id == Class.id)
            .filter(AttendanceRecord.class_id == class_id, Class.user_id == user_id)
            .order_by(AttendanceRecord.date.desc())
            .all()
        )

    def count_records_for_user(self, user_id: str) -> int:
        return (
            self.db.query(func.count(AttendanceRecord.id))
            .join(Class, AttendanceRecord.class_id == Class.id)
            .filter(Class.user_id == user_id)
            .scalar()
        ) or 0

    def add_records(self, records: List[Dict]) -> int:
        """
        Inserts all records with one batched INSERT statement inside a single
        transaction: either every row is stored or none is.
        """
        if not records:
            return 0
        try:
            self.db.execute(insert(AttendanceRecord), records)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error inserting %d attendance record(s)", len(records))
            raise
        return len(records)

    def delete_record(self, record_id: str, class_id: str, user_id: str) -> bool:
        db_record = (
            self.db.query(AttendanceRecord)
            .join(Class, AttendanceRecord.class_id == Class.id)
            .filter(
                AttendanceRecord.id == record_id,
                AttendanceRecord.class_id == class_id,
                Class.user_id == user_id,
            )
            .first()
        )
        if not db_record:
            return False
        try:
            self.db.delete(db_record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error deleting attendance record %s", record_id)
            raise
        return True
