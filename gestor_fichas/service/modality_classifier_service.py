from __future__ import annotations

import re
from typing import Optional

from gestor_fichas.domain.ports.Classifier_provider import Modality_classifier
from gestor_fichas.domain.schemas.extracted_fields import SubmissionModality


# Section runs until the next line-initial "Label:" or end of text.
PRESENTATION_RE = re.compile(r"Lugar y forma de presentación[\s\S]*?(?=\n[A-Z][^:]*:|\Z)", re.I)

IN_PERSON_RE = re.compile(r"Presencialmente en:", re.I)
ELECTRONIC_RE = re.compile(r"Electrónicamente en:", re.I)
SARA_RE = re.compile(r"Red SARA", re.I)
SARA_WEB_RE = re.compile(r"sede electrónica|web[^\n\r\u2028\u2029]*\.|https?://", re.I)
WEB_RE = re.compile(r"sede electrónica|https?://|\.cat|\.es|\.com", re.I)


def find_presentation_section(text: str) -> Optional[str]:
    m = PRESENTATION_RE.search(text)
    return m.group(0) if m else None


def classify_section(section: str) -> SubmissionModality:
    """Decide the modality for an already located presentation section.

    Rules are evaluated in order; the first one that applies wins.
    """
    in_person = IN_PERSON_RE.search(section) is not None
    electronic = ELECTRONIC_RE.search(section) is not None
    only_sara = SARA_RE.search(section) is not None and SARA_WEB_RE.search(section) is None
    web = WEB_RE.search(section) is not None

    if electronic and web and not only_sara:
        return SubmissionModality.ONLINE
    if in_person and electronic:
        return SubmissionModality.MIXED
    if in_person and not electronic:
        return SubmissionModality.IN_PERSON
    if electronic or only_sara:
        return SubmissionModality.ONLINE
    return SubmissionModality.MIXED


def classify_modality(text: str) -> Optional[SubmissionModality]:
    section = find_presentation_section(text)
    if section is None:
        return None
    return classify_section(section)


class ModalityClassifierService(Modality_classifier):
    def classify(self, text: str) -> Optional[SubmissionModality]:
        return classify_modality(text)
