# /attendance_app/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.exc import SQLAlchemyError
from typing import List

from ..core.deps import get_current_active_user
from ..core.exceptions import SaveInProgressError
from ..db.models.user_model import User
from ..models import class_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.ClassSummary], summary="Get All Classes with Attendance Counts")
def get_all_classes(db: DatabaseService = Depends(get_db_service), current_user: User = Depends(get_current_active_user)):
    try:
        return class_service.get_all_classes_with_summary(user_id=current_user.id, db=db)
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while loading classes.")

@router.post("", response_model=class_model.ClassSummary, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service), current_user: User = Depends(get_current_active_user)):
    try:
        return class_service.create_class(class_data=class_create, db=db, user_id=current_user.id)
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while creating the class.")

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.put("/{class_id}", response_model=class_model.Class, summary="Update a Class")
def update_class_details(class_id: str, class_update: class_model.ClassUpdate, db: DatabaseService = Depends(get_db_service), current_user: User = Depends(get_current_active_user)):
    try:
        updated_class = class_service.update_class(class_id=class_id, class_update=class_update, db=db, user_id=current_user.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except SaveInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while updating the class.")
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class and All of Its Attendance")
def delete_class(class_id: str, confirm: bool = False, db: DatabaseService = Depends(get_db_service), current_user: User = Depends(get_current_active_user)):
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deleting a class removes all of its attendance records. Repeat the request with confirm=true.",
        )
    try:
        was_deleted = class_service.delete_class_by_id(class_id=class_id, db=db, user_id=current_user.id)
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while deleting the class.")
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
