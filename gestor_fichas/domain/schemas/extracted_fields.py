from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel


class SubmissionModality(str, Enum):
    ONLINE = "online"
    IN_PERSON = "in_person"
    MIXED = "mixed"


class TerritorialScope(str, Enum):
    EU = "EU"
    STATE = "STATE"
    REGION = "REGION"
    PROVINCE = "PROVINCE"


class ScopeScores(NamedTuple):
    eu: int = 0
    state: int = 0
    region: int = 0
    province: int = 0


class ExtractedFields(BaseModel):
    """Best-effort record recovered from a ficha document.

    Every attribute is optional: a pattern that does not match leaves its
    attribute as None.
    """

    title: Optional[str] = None
    advertising_phrase: Optional[str] = None
    expiry_date: Optional[str] = None  # YYYY-MM-DD
    submission_modality: Optional[SubmissionModality] = None
    territorial_scope: Optional[TerritorialScope] = None
    drafting_date: Optional[str] = None  # YYYY-MM-DD
    drafted_by_raw: Optional[str] = None  # unresolved worker name
