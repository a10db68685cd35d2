# /attendance_app/core/deps.py

"""
The session guard shared by every protected router.

Any failure to establish who is calling (no token, a bad or expired token, a
session that was ended, an unknown or disabled user, or a store error while
checking) produces the same 401 response. Nothing else is loaded.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from ..db.models.user_model import User
from ..services import user_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


@dataclass
class CurrentIdentity:
    user: User
    session_id: str


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(
    token: Optional[str] = Depends(oauth2_scheme),
    db: DatabaseService = Depends(get_db_service),
) -> CurrentIdentity:
    if not token:
        raise _unauthorized()
    try:
        resolved = user_service.resolve_identity(db=db, token=token)
    except Exception:
        # A failed identity check counts as "not logged in".
        logger.exception("Identity check failed")
        raise _unauthorized()
    if resolved is None:
        raise _unauthorized()
    user, session_id = resolved
    return CurrentIdentity(user=user, session_id=session_id)


def get_current_user(identity: CurrentIdentity = Depends(get_current_identity)) -> User:
    return identity.user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_active:
        raise _unauthorized()
    return current_user
