import logging
from pathlib import Path
from typing import Optional

from .base import TextSplitter
from .config import SplitterServiceConfig
from .models import (
    Document,
    SplitRequest,
    SplitResponse,
    SplitResult,
    SplitStats,
)
from .splitters import build_splitter
from .storage import SplitStorage
from .token_counter import TokenCodec

logger = logging.getLogger(__name__)


class SplittingService:
    def __init__(
        self,
        config: SplitterServiceConfig | None = None,
        codec: Optional[TokenCodec] = None,
    ):
        self.config = config or SplitterServiceConfig()
        self.codec = codec
        self.splitter = build_splitter(
            self.config.strategy,
            self.config.splitter,
            self.config.separator,
            codec,
        )
        self.storage = SplitStorage(self.config.data_dir)

    def splitter_for(self, request: SplitRequest) -> TextSplitter:
        if request.strategy is None and request.separator is None:
            return self.splitter
        return build_splitter(
            request.strategy or self.config.strategy,
            self.config.splitter,
            request.separator or self.config.separator,
            self.codec,
        )

    def split_texts(self, request: SplitRequest) -> SplitResponse:
        splitter = self.splitter_for(request)
        records = splitter.create_documents(request.texts, request.metas, request.options())
        return SplitResponse(
            strategy=request.strategy or self.config.strategy,
            total_chunks=len(records),
            records=records,
        )

    def split_file(self, path: str) -> SplitResult:
        source = Path(path)
        logger.info(f"Splitting: {source.name}")
        text = source.read_text(encoding="utf-8")

        document_id = source.stem
        document = Document(data=text, id=document_id, meta={"source_file": str(source)})
        records = self.splitter.split_documents([document])

        lengths = [self.splitter.get_length(record.data) for record in records]
        logger.info(f"Produced {len(records)} chunks from {source.name}")

        return SplitResult(
            source_file=str(source),
            document_id=document_id,
            strategy=self.config.strategy,
            config=self.config.splitter,
            records=records,
            stats=SplitStats.from_lengths(lengths),
        )

    def split_and_save(self, path: str) -> tuple[SplitResult, str]:
        result = self.split_file(path)
        paths = self.storage.save(result)
        logger.info(f"Saved {result.total_chunks} chunks to {paths.split_file}")
        return result, str(paths.split_file)

    def latest_result(self, document_id: str) -> Optional[SplitResult]:
        """Most recently saved result of ``document_id`` for the configured strategy."""
        return self.storage.latest(document_id, self.config.strategy)
