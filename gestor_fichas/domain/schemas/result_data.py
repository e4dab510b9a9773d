from typing import Dict, Optional

from pydantic import BaseModel, Field

from .extracted_fields import ExtractedFields, SubmissionModality, TerritorialScope


class FichaDraft(BaseModel):
    """Partial ficha ready to be merged into the creation form."""

    title: Optional[str] = None
    advertising_phrase: Optional[str] = None
    expiry_date: Optional[str] = None
    submission_modality: Optional[SubmissionModality] = None
    territorial_scope: Optional[TerritorialScope] = None
    drafting_date: Optional[str] = None
    worker_id: Optional[str] = None  # resolved from ExtractedFields.drafted_by_raw

    @classmethod
    def from_fields(cls, fields: ExtractedFields, worker_id: Optional[str] = None) -> "FichaDraft":
        data = fields.model_dump(exclude={"drafted_by_raw"})
        return cls(**data, worker_id=worker_id)


class MetaInfo(BaseModel):
    request_id: Optional[str] = None
    text_chars: Optional[int] = None
    timings_ms: Dict[str, int] = Field(default_factory=dict)


class ResultData(BaseModel):
    meta: MetaInfo = Field(default_factory=MetaInfo)
    ficha: FichaDraft = Field(default_factory=FichaDraft)
