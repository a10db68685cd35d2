# /attendance_app/models/class_model.py

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..common.validators import require_non_empty, parse_target_days


class ClassBase(BaseModel):
    """
    Fields shared by the create and edit payloads of a class.
    """
    name: str = Field(..., description="The display name of the class. Trimmed; must not be empty.")
    target_days: Optional[int] = Field(
        default=None,
        description="Optional goal for the number of attended days. Blank means no goal.",
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value):
        if value is not None and not isinstance(value, str):
            return value
        return require_non_empty(value, "Class name")

    @field_validator("target_days", mode="before")
    @classmethod
    def target_days_is_positive_int(cls, value):
        return parse_target_days(value)


class ClassCreate(ClassBase):
    """The payload of the dashboard's create-class form."""
    description: Optional[str] = Field(default=None)


class ClassUpdate(BaseModel):
    """
    The payload of the edit-class dialog: only name and target can change.

    The values arrive as typed and are validated by ClassEditForm before
    anything is written. JSON booleans and floats are refused here, as on
    the create form, before they can be coerced to an int.
    """
    name: str = ""
    target_days: Optional[Union[int, str]] = None

    @field_validator("target_days", mode="before")
    @classmethod
    def target_days_is_whole_number(cls, value):
        if isinstance(value, (bool, float)):
            raise ValueError("Target days must be a whole number.")
        return value


class Class(BaseModel):
    """A class row as stored, without derived values."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    target_days: Optional[int] = None
    user_id: str
    created_at: Optional[datetime] = None


class ClassSummary(BaseModel):
    """
    A class as listed on the dashboard, enriched with its attendance count and
    the derived "target reached" flag.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    target_days: Optional[int] = None
    created_at: Optional[datetime] = None
    attendance_count: int = Field(default=0, description="Number of attendance records of this class.")
    target_reached: bool = Field(default=False, description="True iff target_days is set and has been met.")
