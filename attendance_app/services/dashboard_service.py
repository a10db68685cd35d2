# /attendance_app/services/dashboard_service.py

# --- Core Imports ---
import logging

from ..models.dashboard_model import DashboardSummary
from .database_service import DatabaseService
from .class_service import get_all_classes_with_summary

logger = logging.getLogger(__name__)

# --- Core Public Function ---

def get_summary_data(db: DatabaseService, user_id: str) -> DashboardSummary:
    """
    Calculates the headline numbers of the user's dashboard.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        user_id: The signed-in user; only their classes are counted.

    Returns:
        A DashboardSummary with the class count, the total number of
        attendance records and how many classes have reached their target.
    """
    try:
        summaries = get_all_classes_with_summary(user_id=user_id, db=db)
        attendance_count = db.count_attendance_for_user(user_id=user_id)
    except Exception:
        logger.exception("Error calculating dashboard summary for user %s", user_id)
        raise

    return DashboardSummary(
        classCount=len(summaries),
        attendanceCount=attendance_count,
        targetsReached=sum(1 for s in summaries if s.target_reached),
    )
