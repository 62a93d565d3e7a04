"""
Runtime configuration.

Only deployment settings live here. Scoring rules live in app/rules.
"""

import os
from typing import List

DEFAULT_BOOK_CALL_URL = "https://www.soundproofyourstudio.com/Step1"

API_VERSION = "1.0.0"


def get_book_call_url() -> str:
    return os.getenv("BOOK_CALL_URL", DEFAULT_BOOK_CALL_URL)


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_port() -> int:
    return int(os.getenv("PORT", 8000))
