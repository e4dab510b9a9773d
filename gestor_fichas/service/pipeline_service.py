from __future__ import annotations

import time
from typing import Optional

from gestor_fichas.domain.errors import DocumentError
from gestor_fichas.domain.ports.Field_extractor_provider import Field_extractor_provider
from gestor_fichas.domain.ports.Pipeline_interface import Pipeline_interface
from gestor_fichas.domain.ports.Text_extractor_provider import Text_extractor_provider
from gestor_fichas.domain.ports.Worker_directory_provider import Worker_directory_provider
from gestor_fichas.domain.schemas.input_data import InputData
from gestor_fichas.domain.schemas.result_data import FichaDraft, MetaInfo, ResultData

from gestor_fichas.lib.logger import get_logger
from .docx_text_service import DocxTextService
from .field_extractor_service import FieldExtractorService
from .worker_directory_service import build_worker_directory


class PipelineService(Pipeline_interface):
    def __init__(
        self,
        text_extractor: Optional[Text_extractor_provider] = None,
        extractor: Optional[Field_extractor_provider] = None,
        workers: Optional[Worker_directory_provider] = None,
    ) -> None:
        self.logger = get_logger("pipeline")
        self.text = text_extractor or DocxTextService()
        self.extractor = extractor or FieldExtractorService()
        self.workers = workers if workers is not None else build_worker_directory()

    def run(self, input_data: InputData) -> ResultData:
        t0 = time.perf_counter()
        meta = MetaInfo(request_id=input_data.context.request_id or None, timings_ms={})

        self.logger.info(
            "start pipeline: file=%s request_id=%s", input_data.document.filename, meta.request_id
        )

        # 1) DOCX -> text
        text = self.text.get_text(input_data)
        meta.timings_ms["text"] = int((time.perf_counter() - t0) * 1000)
        meta.text_chars = len(text)
        if not text or len(text) < input_data.options.min_text_chars:
            self.logger.warning("text: only %d char(s) recovered", len(text))
            raise DocumentError("El documento parece estar vacío o dañado")
        self.logger.debug("text sample: %s", text[:500])

        # 2) Field extraction
        t1 = time.perf_counter()
        fields = self.extractor.extract(text)
        meta.timings_ms["extract"] = int((time.perf_counter() - t1) * 1000)

        # 3) Worker name -> id
        worker_id = None
        if fields.drafted_by_raw and input_data.options.resolve_worker:
            t2 = time.perf_counter()
            worker_id = self._resolve_worker(fields.drafted_by_raw)
            meta.timings_ms["workers"] = int((time.perf_counter() - t2) * 1000)

        draft = FichaDraft.from_fields(fields, worker_id=worker_id)
        self.logger.info("extracted keys: %s", sorted(draft.model_dump(exclude_none=True)))

        total_ms = int((time.perf_counter() - t0) * 1000)
        self.logger.info("done: total=%d ms, text=%d chars", total_ms, meta.text_chars)
        meta.timings_ms["total"] = total_ms

        return ResultData(meta=meta, ficha=draft)

    def _resolve_worker(self, name: str) -> Optional[str]:
        if self.workers is None:
            self.logger.warning("no worker directory configured; dropping drafted-by %r", name)
            return None
        try:
            worker_id = self.workers.find_id_by_name(name)
        except Exception as exc:
            self.logger.warning("worker lookup failed for %r: %s", name, exc)
            return None
        if worker_id is None:
            self.logger.warning("no worker matches %r", name)
        return worker_id
