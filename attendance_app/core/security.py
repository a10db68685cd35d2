# /attendance_app/core/security.py

"""
Password hashing (bcrypt) and access-token encoding (PyJWT).

An access token carries the user id (`sub`) and the id of the server-side
session it belongs to (`jti`). The token alone is never enough: the session
row must still exist in the store for the token to be accepted.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from . import config


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in the store.
        return False


def access_token_expiry(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(subject: str, session_id: str, expires_at: datetime) -> str:
    payload = {
        "sub": str(subject),
        "jti": session_id,
        "iat": datetime.now(timezone.utc),
        "exp": expires_at,
    }
    return jwt.encode(payload, config.SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Returns the verified claims. Raises `jwt.PyJWTError` for a bad signature,
    an expired token or missing claims.
    """
    return jwt.decode(
        token,
        config.SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["sub", "jti", "exp"]},
    )
