from __future__ import annotations

import re
from typing import Optional

from gestor_fichas.lib.logger import get_logger
from gestor_fichas.domain.ports.Classifier_provider import Modality_classifier, Scope_classifier
from gestor_fichas.domain.ports.Field_extractor_provider import Field_extractor_provider
from gestor_fichas.domain.schemas.extracted_fields import ExtractedFields

from .modality_classifier_service import ModalityClassifierService
from .scope_classifier_service import ScopeClassifierService


class FieldExtractorService(Field_extractor_provider):
    """Rule-based extractor for the text of a ficha DOCX.

    Key points:
    - Labels are matched case-insensitively on the flattened document text;
      runs are glued together, so most values end where the next known
      label starts rather than at a line break.
    - Dates come as D/M/YYYY and are rewritten to zero-padded YYYY-MM-DD.
    - Territorial scope and submission modality are delegated to their
      classifiers.
    - The "otros datos" section ends at the first line break. Multi-line
      blocks are therefore truncated; this is kept as is because the
      drafting date and drafted-by values depend on it.
    """

    TITLE_RE = re.compile(
        r"Nombre de la ayuda:\s*([^\n\r]+?)"
        r"(?=Portales:|FRASE|Organismo|Beneficiarios|Categoría|Tipo|\Z)",
        re.I,
    )
    ADVERTISING_RE = re.compile(
        r"(?:FRASE PARA PUBLICITAR|Texto para su divulgación)[:\s]*([^\n\r]+?)"
        r"(?=\s+Organismo|\s+Beneficiarios|\s+Objeto|\n|\r|\Z)",
        re.I,
    )
    EXPIRY_RE = re.compile(r"Fecha fin:\s*([0-9]{1,2}/[0-9]{1,2}/[0-9]{4})", re.I)
    OTHER_DATA_RE = re.compile(r"otros datos[:\s]*[^\n\r\u2028\u2029]*", re.I)
    USER_RE = re.compile(r"usuario[:\s]*([^\n\r]+?)(?=\s|\Z)", re.I)
    DATE_RE = re.compile(r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{4}")

    def __init__(
        self,
        scope_classifier: Optional[Scope_classifier] = None,
        modality_classifier: Optional[Modality_classifier] = None,
    ) -> None:
        self.scope = scope_classifier or ScopeClassifierService()
        self.modality = modality_classifier or ModalityClassifierService()

    def extract(self, text: str) -> ExtractedFields:
        logger = get_logger("extract")

        drafting_date, drafted_by = self._parse_other_data(text)
        expiry = self._first_group(self.EXPIRY_RE, text)

        result = ExtractedFields(
            title=self._first_group(self.TITLE_RE, text),
            advertising_phrase=self._first_group(self.ADVERTISING_RE, text),
            expiry_date=normalize_date(expiry) if expiry else None,
            territorial_scope=self.scope.classify(text),
            submission_modality=self.modality.classify(text),
            drafting_date=drafting_date,
            drafted_by_raw=drafted_by,
        )

        logger.info(
            "extracted: title=%s; scope=%s; modality=%s",
            result.title,
            result.territorial_scope.value if result.territorial_scope else None,
            result.submission_modality.value if result.submission_modality else None,
        )
        return result

    # ------------------------------------------------------------------
    # Parsing helpers

    def _parse_other_data(self, text: str) -> tuple[Optional[str], Optional[str]]:
        m = self.OTHER_DATA_RE.search(text)
        if not m:
            return None, None
        section = m.group(0)

        dates = self.DATE_RE.findall(section)
        drafting_date = normalize_date(dates[-1]) if dates else None
        drafted_by = self._first_group(self.USER_RE, section)
        return drafting_date, drafted_by

    def _first_group(self, pattern: re.Pattern[str], text: str) -> Optional[str]:
        m = pattern.search(text)
        return m.group(1).strip() if m else None


def normalize_date(value: str) -> str:
    """Rewrite D/M/YYYY as YYYY-MM-DD. The date is not calendar-checked."""
    day, month, year = value.split("/")
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
