from __future__ import annotations

import io
import re
import zipfile
import zlib

from gestor_fichas.domain.errors import DocumentError
from gestor_fichas.domain.ports.Text_extractor_provider import Text_extractor_provider
from gestor_fichas.domain.schemas.input_data import InputData
from gestor_fichas.lib.logger import get_logger


class DocxTextService(Text_extractor_provider):
    """Flatten the main part of a DOCX package to a single line of text.

    Tags are dropped without inserting separators, so adjacent runs and
    paragraphs are glued together ("...JovenBeneficiarios:"). The field
    patterns rely on this shape.
    """

    DOCUMENT_PART = "word/document.xml"

    TAG_RE = re.compile(r"<[^>]*>")
    ENTITY_RE = re.compile(r"&[^;]*;")
    SPACE_RE = re.compile(r"\s+")

    def __init__(self) -> None:
        self.logger = get_logger("docx")

    def get_text(self, input: InputData) -> str:
        return self.extract_text(input.document.data)

    def extract_text(self, data: bytes) -> str:
        xml = self._read_document_part(data)
        text = self.TAG_RE.sub("", xml)
        text = self.ENTITY_RE.sub("", text)
        text = self.SPACE_RE.sub(" ", text)
        return text.strip()

    # ------------- helpers -------------
    def _read_document_part(self, data: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as zf:
                raw = zf.read(self.DOCUMENT_PART)
        except (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, EOFError) as e:
            self.logger.warning("docx: unreadable package: %s", e)
            raise DocumentError("Error procesando el archivo DOCX") from e
        except KeyError as e:
            self.logger.warning("docx: missing %s", self.DOCUMENT_PART)
            raise DocumentError("No se pudo encontrar el contenido del documento") from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentError("Error procesando el archivo DOCX") from e
