# /attendance_app/core/config.py

"""
Central runtime settings for the attendance backend.

Every value is read once from the environment at import time, with a default
that is suitable for local development. Tests override the database through
FastAPI dependency overrides rather than through these values.
"""

import os
from typing import List

# --- Database ---
# PostgreSQL in production (e.g. "postgresql+psycopg2://..."), SQLite locally.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./attendance.db")

# Create missing tables on startup. Disable when the schema is owned by Alembic.
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true"

# --- Authentication ---
SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- HTTP ---
def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "*"))
