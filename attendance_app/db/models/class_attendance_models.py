# /attendance_app/db/models/class_attendance_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and
`AttendanceRecord` entities: a tracked activity owned by one user, and the
dated occurrences of attending it.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Class(Base):
    """
    SQLAlchemy model representing a tracked class.

    `target_days` is the optional goal; whether it has been reached is always
    derived from the attendance count and never stored.
    """
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
    target_days = Column(Integer, nullable=True)

    # Every class has exactly one owner; lookups by owner are indexed.
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.now(), nullable=False)

    owner = relationship("User", back_populates="classes")

    # Deleting a class deletes its attendance rows, both through the ORM
    # cascade and through the ON DELETE CASCADE on the foreign key.
    attendance = relationship(
        "AttendanceRecord",
        back_populates="class_",
        cascade="all, delete-orphan",
    )


class AttendanceRecord(Base):
    """
    SQLAlchemy model representing one attended date of a Class.
    """
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("class_id", "date", name="uq_attendance_class_date"),
    )

    id = Column(String, primary_key=True, index=True)
    class_id = Column(String, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)

    class_ = relationship("Class", back_populates="attendance")
