# /attendance_app/routers/attendance_router.py

"""
Endpoints of the class detail page, mounted under /api/classes/{class_id}.

Each mutation answers with the freshly reloaded class detail, so the client
can replace its state wholesale instead of merging changes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import StreamingResponse
from sqlalchemy.exc import SQLAlchemyError

from ..core.deps import get_current_active_user
from ..core.exceptions import DateAlreadyRecordedError, DateNotSelectableError
from ..db.models.user_model import User
from ..models import attendance_model
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _not_found(class_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")


@router.get("/{class_id}", response_model=attendance_model.ClassDetails, summary="Get a Class with Its Attendance History")
def get_class_details(
    class_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    details = attendance_service.get_class_details(class_id=class_id, user_id=current_user.id, db=db)
    if details is None:
        raise _not_found(class_id)
    return details


@router.get("/{class_id}/calendar", response_model=attendance_model.CalendarMonth, summary="Get the Date Picker for One Month")
def get_calendar(
    class_id: str,
    year: Optional[int] = Query(default=None, ge=1, le=9999),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    calendar_month = attendance_service.get_calendar(
        class_id=class_id, user_id=current_user.id, db=db, year=year, month=month
    )
    if calendar_month is None:
        raise _not_found(class_id)
    return calendar_month


@router.post(
    "/{class_id}/attendance/today",
    response_model=attendance_model.ClassDetails,
    status_code=status.HTTP_201_CREATED,
    summary="Mark Today's Attendance",
)
def mark_today(
    class_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    try:
        details = attendance_service.mark_today(class_id=class_id, user_id=current_user.id, db=db)
    except DateAlreadyRecordedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while marking attendance.")
    if details is None:
        raise _not_found(class_id)
    return details


@router.post(
    "/{class_id}/attendance/batch",
    response_model=attendance_model.ClassDetails,
    summary="Mark Several Dates at Once",
)
def mark_multiple_dates(
    class_id: str,
    payload: attendance_model.AttendanceBatchCreate,
    response: Response,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    """
    Stores all picked dates with a single insert. An empty list changes
    nothing and answers 200; a stored batch answers 201.
    """
    try:
        details = attendance_service.mark_dates(
            class_id=class_id, dates=payload.dates, user_id=current_user.id, db=db
        )
    except DateAlreadyRecordedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except DateNotSelectableError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while marking the selected dates.")
    if details is None:
        raise _not_found(class_id)
    if payload.dates:
        response.status_code = status.HTTP_201_CREATED
    return details


@router.delete("/{class_id}/attendance/{record_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Cancel an Attendance Record")
def cancel_attendance(
    class_id: str,
    record_id: str,
    confirm: bool = False,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cancelling an attendance record cannot be undone. Repeat the request with confirm=true.",
        )
    try:
        was_deleted = attendance_service.cancel_record(
            class_id=class_id, record_id=record_id, user_id=current_user.id, db=db
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="An error occurred while cancelling the record.")
    if not was_deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attendance record {record_id} not found in class {class_id}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{class_id}/export", summary="Export Attendance History as CSV", response_class=StreamingResponse)
def export_attendance_csv(
    class_id: str,
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    try:
        csv_string = attendance_service.export_history_as_csv(class_id=class_id, user_id=current_user.id, db=db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    file_name = f"attendance_{class_id}.csv"
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={file_name}"},
    )
