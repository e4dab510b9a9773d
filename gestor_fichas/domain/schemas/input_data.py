from typing import Optional

from pydantic import BaseModel, Field


class DocumentPayload(BaseModel):
    """Raw document payload supplied by the client."""

    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size_bytes: Optional[int] = Field(default=None, ge=0)


class ProcessingOptions(BaseModel):
    """Flags that control how the pipeline should process the document."""

    min_text_chars: int = Field(default=50, ge=0)
    resolve_worker: bool = True


class RequestContext(BaseModel):
    """Request-scoped metadata propagated through the pipeline."""

    request_id: Optional[str] = None


class InputData(BaseModel):
    """Full payload consumed by the pipeline orchestrator."""

    document: DocumentPayload
    options: ProcessingOptions = Field(default_factory=ProcessingOptions)
    context: RequestContext = Field(default_factory=RequestContext)
