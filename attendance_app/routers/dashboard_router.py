# /attendance_app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_current_active_user
from ..db.models.user_model import User
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.dashboard_model import DashboardSummary

router = APIRouter()


@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Class count, attendance count and reached targets of the signed-in user.",
)
def get_dashboard_summary(
    db: DatabaseService = Depends(get_db_service),
    current_user: User = Depends(get_current_active_user),
):
    # Thin router: delegate straight to the service layer.
    return dashboard_service.get_summary_data(db=db, user_id=current_user.id)
