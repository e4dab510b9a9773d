from __future__ import annotations

import mimetypes
import os
import sys
from pathlib import Path

from gestor_fichas.domain.schemas.input_data import DocumentPayload, InputData, ProcessingOptions
from gestor_fichas.lib.logger import get_logger
from gestor_fichas.service.pipeline_service import PipelineService

from dotenv import load_dotenv
load_dotenv()


def _as_bool(v: object, default: bool = False) -> bool:
    if v is None:
        return default
    return str(v).lower() in ("1", "true", "yes")


def build_input_from_file(path: Path) -> InputData:
    data = path.read_bytes()
    mime, _ = mimetypes.guess_type(str(path))
    options = ProcessingOptions(min_text_chars=int(os.getenv("MIN_TEXT_CHARS", "50")))
    payload = DocumentPayload(data=data, filename=path.name, content_type=mime, size_bytes=len(data))
    return InputData(document=payload, options=options)


def main() -> None:
    serve = _as_bool(os.getenv("SERVE", "0"))
    if serve and len(sys.argv) <= 1:
        # Run HTTP server; host/port from env
        import uvicorn
        host = os.getenv("DOMAIN", "0.0.0.0")
        port = int(os.getenv("PORT", "8080"))
        uvicorn.run("gestor_fichas.transport.http.server:app", host=host, port=port, reload=False)
        return

    # CLI mode: first arg is file path
    if len(sys.argv) <= 1:
        print("Usage: python main.py <ficha.docx>  # or set SERVE=1 to start HTTP server", flush=True)
        sys.exit(2)

    input_data = build_input_from_file(Path(sys.argv[1]))
    pipeline = PipelineService()
    result = pipeline.run(input_data)
    get_logger("cli").info("meta: %s", result.meta.model_dump_json())
    print(result.ficha.model_dump_json(exclude_none=True, indent=2), flush=True)


if __name__ == "__main__":
    main()
