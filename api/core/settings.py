"""
Process-wide constants.

The service is deliberately not configured through the environment: the
database file, host and port are fixed here.
"""

from __future__ import annotations

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

DATABASE_PATH = BASE_DIR / "customerData.db"

HOST = "127.0.0.1"
PORT = 3005

CORS_ALLOW_ORIGINS = ["*"]

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
