from __future__ import annotations

from fastapi import APIRouter

from .handlers.process_docx_handler import router as process_docx_router
from .handlers.setting_handler import router as settings_router


api_router = APIRouter()
api_router.include_router(process_docx_router, prefix="/api", tags=["fichas"])
api_router.include_router(settings_router, prefix="/api", tags=["settings"])
