# /attendance_app/db/base.py

# Central registry for all our SQLAlchemy models.
# Importing them here guarantees that Base.metadata knows every table before
# create_all() or an Alembic autogenerate scan runs.

from .base_class import Base

from .models.user_model import User, UserSession
from .models.class_attendance_models import Class, AttendanceRecord
