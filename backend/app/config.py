"""
config.py
----------
Backend settings, read from the environment (and an optional .env file).
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./feedback.db")
DATABASE_ECHO = _as_bool(os.getenv("DATABASE_ECHO", "false"))

# Comma-separated list, "*" allows every origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
