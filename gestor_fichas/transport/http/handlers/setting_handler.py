from __future__ import annotations

import os
from typing import Dict

from fastapi import APIRouter


router = APIRouter()


@router.get("/settings", summary="Current server settings")
def get_settings() -> Dict[str, str]:
    # DATABASE_URL is never exposed here.
    keys = [
        "DOMAIN",
        "PORT",
        "ALLOWED_CORS_ORIGINS",
        "SWAGGER_ENABLED",
        "MAX_FILE_MB",
        "MIN_TEXT_CHARS",
        "LOG_LEVEL",
    ]
    return {k: os.getenv(k, "") for k in keys}
