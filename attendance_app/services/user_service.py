# /attendance_app/services/user_service.py

"""
Business logic for accounts and sessions.

This is the only identity mechanism of the application: logging in verifies
the credentials against the store and opens a session row there, and every
protected request is checked against that same row. There is no client-side
"authenticated" flag that could bypass it.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional, Tuple

import jwt

from ..core import security
from ..db.models.user_model import User
from ..models.user_model import UserCreate, Token
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """
    Registers a new account. Raises ValueError if the username is taken.
    """
    if db.get_user_by_username(user.username):
        raise ValueError(f"Username '{user.username}' is already registered.")

    record = {
        "id": f"usr_{uuid.uuid4().hex[:12]}",
        "username": user.username,
        "hashed_password": security.get_password_hash(user.password),
        "is_active": True,
    }
    new_user = db.add_user(record)
    logger.info("Registered user %s", new_user.id)
    return new_user


def authenticate_user(db: DatabaseService, username: str, password: str) -> Optional[User]:
    """Returns the user if the credentials match an active account, otherwise None."""
    username = (username or "").strip()
    if not username or not password:
        return None
    user = db.get_user_by_username(username)
    if not user or not user.is_active:
        return None
    if not security.verify_password(password, user.hashed_password):
        logger.info("Rejected login for %s", username)
        return None
    return user


def open_session(db: DatabaseService, user: User) -> Token:
    """
    Stores a new session for the user and returns the bearer token pointing at it.
    The user's expired sessions are removed first.
    """
    purged = db.delete_expired_sessions(user_id=user.id, now=datetime.now(timezone.utc))
    if purged:
        logger.info("Removed %d expired session(s) of user %s", purged, user.id)
    expires_at = security.access_token_expiry()
    session_record = {
        "id": f"ses_{uuid.uuid4().hex}",
        "user_id": user.id,
        "expires_at": expires_at,
    }
    db.add_session(session_record)
    access_token = security.create_access_token(
        subject=user.id, session_id=session_record["id"], expires_at=expires_at
    )
    return Token(access_token=access_token, token_type="bearer")


def end_session(db: DatabaseService, user_id: str, session_id: str) -> bool:
    ended = db.delete_session(session_id=session_id, user_id=user_id)
    if ended:
        logger.info("Ended session for user %s", user_id)
    return ended


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo.
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def resolve_identity(db: DatabaseService, token: str) -> Optional[Tuple[User, str]]:
    """
    Maps a bearer token to `(user, session_id)`, or None if the token does not
    identify a live session of an active user.
    """
    try:
        claims = security.decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.info("Rejected access token: %s", e)
        return None

    user_id, session_id = claims["sub"], claims["jti"]
    session = db.get_session(session_id=session_id, user_id=user_id)
    if session is None:
        return None
    if _as_utc(session.expires_at) <= datetime.now(timezone.utc):
        return None

    user = db.get_user_by_id(user_id)
    if user is None or not user.is_active:
        return None
    return user, session_id
