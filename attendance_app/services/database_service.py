# /attendance_app/services/database_service.py

"""
The single entry point the service layer uses to reach the Data Store.

`DatabaseService` is a thin facade over the SQL repositories. Services never
touch a SQLAlchemy session directly, which keeps them testable with a
`MagicMock` standing in for this class.
"""

from datetime import datetime
from typing import Dict, Generator, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from ..db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.class_repository_sql import ClassRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL

from ..db.models.user_model import User, UserSession
from ..db.models.class_attendance_models import Class, AttendanceRecord


class DatabaseService:
    def __init__(self, db_session: Session):
        self.user_repo = UserRepositorySQL(db_session)
        self.class_repo = ClassRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)

    # --- USER & SESSION METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str) -> Optional[User]: return self.user_repo.get_user_by_id(user_id)
    def get_user_by_username(self, username: str) -> Optional[User]: return self.user_repo.get_user_by_username(username)
    def add_user(self, user_record: Dict) -> User: return self.user_repo.add_user(user_record)
    def add_session(self, session_record: Dict) -> UserSession: return self.user_repo.add_session(session_record)
    def get_session(self, session_id: str, user_id: str) -> Optional[UserSession]: return self.user_repo.get_session(session_id=session_id, user_id=user_id)
    def delete_session(self, session_id: str, user_id: str) -> bool: return self.user_repo.delete_session(session_id=session_id, user_id=user_id)
    def delete_expired_sessions(self, user_id: str, now: datetime) -> int: return self.user_repo.delete_expired_sessions(user_id=user_id, now=now)

    # --- CLASS METHODS (DELEGATED) ---
    def get_classes_with_attendance_counts(self, user_id: str) -> List[Tuple[Class, int]]:
        return self.class_repo.get_classes_with_attendance_counts(user_id=user_id)
    def get_class_by_id(self, class_id: str, user_id: str) -> Optional[Class]: return self.class_repo.get_class_by_id(class_id=class_id, user_id=user_id)
    def add_class(self, class_record: Dict) -> Class: return self.class_repo.add_class(class_record)
    def update_class(self, class_id: str, user_id: str, class_update_data: Dict) -> Optional[Class]:
        return self.class_repo.update_class(class_id=class_id, user_id=user_id, data=class_update_data)
    def delete_class(self, class_id: str, user_id: str) -> bool: return self.class_repo.delete_class(class_id=class_id, user_id=user_id)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def get_attendance_by_class_id(self, class_id: str, user_id: str) -> List[AttendanceRecord]:
        return self.attendance_repo.get_records_by_class_id(class_id=class_id, user_id=user_id)
    def count_attendance_for_user(self, user_id: str) -> int: return self.attendance_repo.count_records_for_user(user_id=user_id)
    def add_attendance_records(self, records: List[Dict]) -> int: return self.attendance_repo.add_records(records)
    def delete_attendance_record(self, record_id: str, class_id: str, user_id: str) -> bool:
        return self.attendance_repo.delete_record(record_id=record_id, class_id=class_id, user_id=user_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the request's session.
    """
    yield DatabaseService(db_session=db)
