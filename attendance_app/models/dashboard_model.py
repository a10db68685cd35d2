# /attendance_app/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field

# --- Model Definition ---

class DashboardSummary(BaseModel):
    """
    Defines the data contract for the dashboard summary endpoint: the headline
    numbers shown above the signed-in user's list of classes.
    """

    classCount: int = Field(
        ...,
        description="The number of classes owned by the user.",
        json_schema_extra={"example": 4},
    )

    attendanceCount: int = Field(
        ...,
        description="The number of attendance records across all of the user's classes.",
        json_schema_extra={"example": 37},
    )

    targetsReached: int = Field(
        ...,
        description="How many of the user's classes have reached their target days.",
        json_schema_extra={"example": 1},
    )
