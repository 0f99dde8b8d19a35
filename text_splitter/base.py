"""
TextSplitter - shared behaviour of all splitting strategies

Concrete strategies only implement ``split_text``. Everything else (length
measurement, optional re-assembly into chunks, turning texts and documents
into SplitRecords, merging texts back together) lives here once.

Metadata precedence in ``split_documents``:
    document meta  <  call meta (SplitOptions.meta)  <  parent_id / part
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence, Union

from pydantic import ValidationError

from .assembler import assemble_chunks
from .exceptions import DocumentError
from .models import Document, SplitOptions, SplitRecord, SplitterConfig
from .token_counter import TiktokenCodec, TokenCodec, count_tokens

logger = logging.getLogger(__name__)

DocumentLike = Union[Document, Mapping[str, Any]]


class TextSplitter(ABC):
    """
    Base class for splitters.

    Args:
        config: Frozen splitter configuration (defaults to SplitterConfig()).
        codec: Tokenizer used for the default length function. Defaults to
            a tiktoken codec for ``config.encoding_name``.
    """

    def __init__(
        self,
        config: Optional[SplitterConfig] = None,
        codec: Optional[TokenCodec] = None,
    ):
        self.config = config or SplitterConfig()
        self.codec = codec or TiktokenCodec(self.config.encoding_name)

    @abstractmethod
    def split_text(self, text: str, options: Optional[SplitOptions] = None) -> list[str]:
        """Split one text into an ordered list of trimmed pieces or chunks."""

    # -------------------------------------------------------------------------
    # Length measurement
    # -------------------------------------------------------------------------

    def count_tokens(self, text: str) -> int:
        return count_tokens(text, codec=self.codec)

    def length_function(self, config: SplitterConfig) -> Callable[[str], int]:
        return config.length_fn or self.count_tokens

    def get_length(self, text: str, options: Optional[SplitOptions] = None) -> int:
        """Measure ``text`` with the active length function."""
        return self.length_function(self.resolve(options))(text)

    def resolve(self, options: Optional[SplitOptions] = None) -> SplitterConfig:
        """Configuration for one call: instance settings plus overrides."""
        return self.config.merged(options)

    # -------------------------------------------------------------------------
    # Piece handling
    # -------------------------------------------------------------------------

    @staticmethod
    def clean_pieces(pieces: Sequence[str]) -> list[str]:
        """Trim pieces and drop the empty ones."""
        return [p for p in (piece.strip() for piece in pieces) if p]

    def finish(
        self,
        pieces: list[str],
        separator: str,
        options: Optional[SplitOptions] = None,
    ) -> list[str]:
        """Return pieces as-is, or assembled into chunks when chunking is on."""
        chunk = self.config.chunk
        if options is not None and options.chunk is not None:
            chunk = options.chunk
        if not chunk:
            return pieces

        config = self.resolve(options)
        return assemble_chunks(
            pieces,
            separator,
            config.chunk_size,
            config.overlap,
            self.length_function(config),
        )

    # -------------------------------------------------------------------------
    # Document pipeline
    # -------------------------------------------------------------------------

    def merge_text(self, texts: Sequence[str], separator: str = " ") -> str:
        return separator.join(text.strip() for text in texts)

    def merge_documents(self, docs: Sequence[DocumentLike]) -> str:
        documents = [self._to_document(doc, i) for i, doc in enumerate(docs)]
        return self.merge_text([doc.data for doc in documents])

    def create_documents(
        self,
        texts: Sequence[str],
        metas: Optional[Sequence[Optional[Mapping[str, Any]]]] = None,
        options: Optional[SplitOptions] = None,
    ) -> list[SplitRecord]:
        """
        Split each text and emit one record per chunk.

        Args:
            texts: Texts to split.
            metas: Metadata for each text by position; missing entries mean {}.
            options: Per-call overrides; ``options.meta`` is merged into every
                record after the per-text metadata.

        Returns:
            Records in input order, chunks of one text kept together.
        """
        metas = metas or []
        extra = options.meta if options else {}

        records: list[SplitRecord] = []
        for i, text in enumerate(texts):
            meta = metas[i] if i < len(metas) and metas[i] else {}
            for chunk in self.split_text(text, options):
                records.append(SplitRecord(data=chunk, meta={**meta, **extra}))

        logger.debug(f"Created {len(records)} records from {len(texts)} texts")
        return records

    def split_documents(
        self,
        docs: Sequence[DocumentLike],
        options: Optional[SplitOptions] = None,
    ) -> list[SplitRecord]:
        """
        Split documents, tagging each record with ``parent_id`` (the source
        document id) and ``part`` (the source position in ``docs``).
        """
        documents = [self._to_document(doc, i) for i, doc in enumerate(docs)]
        extra = options.meta if options else {}

        texts = [doc.data for doc in documents]
        metas = [
            {**doc.meta, **extra, "parent_id": doc.id, "part": i}
            for i, doc in enumerate(documents)
        ]
        # Call meta is already folded in; keep provenance fields last.
        call_options = options.model_copy(update={"meta": {}}) if options else None
        return self.create_documents(texts, metas, call_options)

    @staticmethod
    def _to_document(doc: DocumentLike, index: int) -> Document:
        if isinstance(doc, Document):
            return doc
        if isinstance(doc, Mapping):
            try:
                return Document.model_validate(dict(doc))
            except ValidationError as exc:
                raise DocumentError(index, doc, original_error=exc) from exc
        if hasattr(doc, "data"):
            return Document(
                data=doc.data,
                id=getattr(doc, "id", None),
                meta=dict(getattr(doc, "meta", None) or {}),
            )
        raise DocumentError(index, doc)
