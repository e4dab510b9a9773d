from __future__ import annotations

import os
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Request, UploadFile

from gestor_fichas.domain.errors import DocumentError
from gestor_fichas.domain.schemas.input_data import (
    DocumentPayload,
    InputData,
    ProcessingOptions,
    RequestContext,
)
from gestor_fichas.domain.schemas.result_data import FichaDraft
from gestor_fichas.lib.logger import get_logger
from gestor_fichas.service.pipeline_service import PipelineService


router = APIRouter()


def _int_env(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)


@router.post(
    "/process-docx",
    summary="Extract ficha fields from an uploaded DOCX",
    response_model=FichaDraft,
    response_model_exclude_none=True,
)
async def process_docx(
    request: Request,
    file: Optional[UploadFile] = File(default=None, description="DOCX ficha document"),
) -> FichaDraft:
    logger = get_logger("http")

    if file is None:
        raise HTTPException(status_code=400, detail="No se proporcionó archivo")
    if not (file.filename or "").lower().endswith(".docx"):
        raise HTTPException(status_code=400, detail="El archivo debe ser un DOCX")

    max_mb = _int_env("MAX_FILE_MB", 10)
    max_bytes = max_mb * 1024 * 1024
    too_large = HTTPException(status_code=400, detail=f"El archivo es demasiado grande (máximo {max_mb}MB)")
    # Size known from the multipart parser: reject before buffering.
    if file.size is not None and file.size > max_bytes:
        raise too_large
    content = await file.read()
    if len(content) > max_bytes:
        raise too_large

    payload = DocumentPayload(
        data=content,
        filename=file.filename,
        content_type=file.content_type,
        size_bytes=len(content),
    )
    options = ProcessingOptions(min_text_chars=_int_env("MIN_TEXT_CHARS", 50))
    context = RequestContext(request_id=request.headers.get("x-request-id"))
    input_data = InputData(document=payload, options=options, context=context)

    # Use pre-initialized pipeline from app state when available
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        pipeline = PipelineService()
    try:
        result = pipeline.run(input_data)
    except (HTTPException, DocumentError):
        raise
    except Exception as e:
        # Keep message short for client; details are in server logs
        logger.exception("processing %s failed", file.filename)
        raise HTTPException(status_code=500, detail=f"Error procesando el archivo: {e}") from e

    return result.ficha
