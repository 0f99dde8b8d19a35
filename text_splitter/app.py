from fastapi import FastAPI, HTTPException

from .config import SplitterServiceConfig
from .exceptions import SplitterConfigError
from .models import (
    FileSplitRequest,
    FileSplitResponse,
    SplitRequest,
    SplitResponse,
)
from .service import SplittingService


def create_app(service: SplittingService | None = None) -> FastAPI:
    service = service or SplittingService(SplitterServiceConfig.from_env())
    app = FastAPI(
        title="Text Splitter Service",
        version="1.0.0",
        description="Delimiter, sentence and token-window text splitting.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/split", response_model=SplitResponse)
    def split(request: SplitRequest) -> SplitResponse:
        try:
            return service.split_texts(request)
        except SplitterConfigError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.get("/split/{document_id}/latest")
    def latest(document_id: str) -> dict:
        result = service.latest_result(document_id)
        if result is None:
            raise HTTPException(status_code=404, detail=f"No saved split for {document_id}")
        return result.to_dict()

    @app.post("/split/file", response_model=FileSplitResponse)
    def split_file(request: FileSplitRequest) -> FileSplitResponse:
        try:
            result, output_path = service.split_and_save(request.path)
            return FileSplitResponse(
                document_id=result.document_id,
                output_path=output_path,
                total_chunks=result.total_chunks,
            )
        except FileNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except SplitterConfigError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app
