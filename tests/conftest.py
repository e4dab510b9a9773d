"""Shared fixtures: in-memory DOCX packages and a stub worker directory."""
from __future__ import annotations

import io
import zipfile
from typing import Callable, Dict, List, Optional

import pytest

from gestor_fichas.domain.ports.Worker_directory_provider import Worker_directory_provider


CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)

SAMPLE_PARAGRAPHS = [
    "Nombre de la ayuda: Ayuda al Alquiler Joven",
    "Beneficiarios: jóvenes menores de 35 años",
    "Fecha fin: 15/6/2025",
    "Organismo: Diputación de Huesca",
    "Lugar y forma de presentación: Presencialmente en: oficinas",
]


def build_docx(paragraphs: List[str], separator: str = " ") -> bytes:
    """Build a minimal DOCX; each paragraph text ends with `separator`."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{p}{separator}</w:t></w:r></w:p>' for p in paragraphs
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        zf.writestr("word/document.xml", document)
    return buf.getvalue()


class StubWorkerDirectory(Worker_directory_provider):
    def __init__(self, workers: Optional[Dict[str, str]] = None, error: Optional[Exception] = None) -> None:
        self.workers = workers or {}
        self.error = error
        self.calls: List[str] = []

    def find_id_by_name(self, name: str) -> Optional[str]:
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        needle = name.strip().lower()
        for worker_name, worker_id in self.workers.items():
            if needle in worker_name.lower():
                return worker_id
        return None


@pytest.fixture(autouse=True)
def _no_database(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
    return build_docx


@pytest.fixture
def sample_docx() -> bytes:
    return build_docx(SAMPLE_PARAGRAPHS)
