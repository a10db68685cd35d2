# /attendance_app/routers/auth_router.py

"""
This module defines the public-facing API for all authentication-related actions.

It includes endpoints for:
- User registration (`/register`)
- User login and token generation (`/token`)
- Retrieving the current user's profile (`/me`)
- Ending the current session (`/logout`)

Login is always checked against the accounts stored in the database; the
returned token is tied to a session row that logout removes again.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import SQLAlchemyError

# --- Application-specific Imports ---
from ..core.deps import CurrentIdentity, get_current_active_user, get_current_identity
from ..db.models.user_model import User as UserModel
from ..models.user_model import User, UserCreate, Token
from ..services import user_service
from ..services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED, summary="Register a New Account")
def register_user(user_in: UserCreate, db: DatabaseService = Depends(get_db_service)):
    """
    Delegates account creation to the user_service and converts its business
    errors (a taken username) into a 400 response.
    """
    try:
        return user_service.create_user(db=db, user=user_in)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/token", response_model=Token, summary="Log In")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service),
):
    """
    Handles login, compatible with the OAuth2 Password Flow.

    Both fields are required. On success a session is stored and a bearer
    token pointing at it is returned.
    """
    if not form_data.username.strip() or not form_data.password:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Username and password are required.",
        )

    user = user_service.authenticate_user(db, username=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return user_service.open_session(db, user)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while starting the session.",
        )


@router.get("/me", response_model=User, summary="Get the Current User")
def read_current_user(current_user: UserModel = Depends(get_current_active_user)):
    return current_user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="Log Out")
def logout(
    identity: CurrentIdentity = Depends(get_current_identity),
    db: DatabaseService = Depends(get_db_service),
):
    """Ends the session in the store. The token is rejected from now on."""
    try:
        user_service.end_session(db, user_id=identity.user.id, session_id=identity.session_id)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while ending the session.",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
