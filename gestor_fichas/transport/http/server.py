from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .router import api_router
from gestor_fichas.domain.errors import DocumentError
from gestor_fichas.lib.logger import get_logger
from gestor_fichas.service.pipeline_service import PipelineService


def _bool_env(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes")


def create_app() -> FastAPI:
    load_dotenv()

    swagger_enabled = _bool_env("SWAGGER_ENABLED", True)
    docs_url = "/docs" if swagger_enabled else None
    redoc_url = "/redoc" if swagger_enabled else None

    app = FastAPI(
        title="Gestor de Fichas API",
        description="Extracts ficha fields from DOCX documents.",
        version="0.1.0",
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url="/openapi.json" if swagger_enabled else None,
    )

    # CORS
    raw_origins = os.getenv("ALLOWED_CORS_ORIGINS", "*")
    origins: List[str] = [o.strip() for o in raw_origins.split(",") if o.strip()] or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(api_router)

    # Unreadable or empty uploads are client errors
    @app.exception_handler(DocumentError)
    async def document_error(request: Request, exc: DocumentError) -> JSONResponse:
        get_logger("http").warning("rejected %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    # Build the pipeline (and its database engine) once at startup.
    app.state.pipeline = PipelineService()
    get_logger("http").info(
        "app ready: max_file_mb=%s, workers=%s",
        os.getenv("MAX_FILE_MB", "10"),
        "sql" if app.state.pipeline.workers is not None else "disabled",
    )

    return app


app = create_app()
