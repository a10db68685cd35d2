# /attendance_app/services/database_helpers/user_repository_sql.py

"""
Raw SQLAlchemy queries for the identity tables: `users` and `user_sessions`.
"""

import logging
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...db.models.user_model import User, UserSession

logger = logging.getLogger(__name__)


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- User Methods ---

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def add_user(self, record: Dict) -> User:
        """Creates a new User record in the database."""
        new_user = User(**record)
        try:
            self.db.add(new_user)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error creating user %s", record.get("username"))
            raise
        self.db.refresh(new_user)
        return new_user

    # --- Session Methods ---

    def add_session(self, record: Dict) -> UserSession:
        new_session = UserSession(**record)
        try:
            self.db.add(new_session)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error opening session for user %s", record.get("user_id"))
            raise
        self.db.refresh(new_session)
        return new_session

    def get_session(self, session_id: str, user_id: str) -> Optional[UserSession]:
        return (
            self.db.query(UserSession)
            .filter(UserSession.id == session_id, UserSession.user_id == user_id)
            .first()
        )

    def delete_session(self, session_id: str, user_id: str) -> bool:
        """Ends a session. Tokens carrying this session id stop working immediately."""
        db_session = self.get_session(session_id=session_id, user_id=user_id)
        if not db_session:
            return False
        try:
            self.db.delete(db_session)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error ending session %s", session_id)
            raise
        return True

    def delete_expired_sessions(self, user_id: str, now: datetime) -> int:
        """Removes the user's sessions that expired at or before `now`. Returns how many were removed."""
        try:
            removed = (
                self.db.query(UserSession)
                .filter(UserSession.user_id == user_id, UserSession.expires_at <= now)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error purging expired sessions of user %s", user_id)
            raise
        return removed
