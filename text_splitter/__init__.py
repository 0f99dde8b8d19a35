"""
Text Splitter - bounded-size chunks for token-limited pipelines

Splits long texts into pieces by delimiter, by sentence or by overlapping
token windows, optionally merges small pieces into size-bounded chunks, and
carries document metadata through to every produced record.

Quick Start:
    from text_splitter import SplitterConfig, TokenTextSplitter

    splitter = TokenTextSplitter(SplitterConfig(chunk_size=512, overlap=64))
    records = splitter.split_documents([{"id": "doc1", "data": text}])
"""

__version__ = "1.0.0"

from .assembler import assemble_chunks
from .base import TextSplitter
from .exceptions import (
    DegenerateWindowError,
    DocumentError,
    SplitterConfigError,
    SplitterError,
)
from .models import (
    Document,
    SplitOptions,
    SplitRecord,
    SplitResult,
    SplitStats,
    SplitStrategy,
    SplitterConfig,
)
from .sentence_splitter import split_sentences
from .service import SplittingService
from .config import SplitterServiceConfig
from .splitters import (
    CharacterTextSplitter,
    SentenceTextSplitter,
    TokenTextSplitter,
    build_splitter,
    token_windows,
)
from .token_counter import TiktokenCodec, TokenCodec, count_tokens

__all__ = [
    "__version__",
    "assemble_chunks",
    "TextSplitter",
    "CharacterTextSplitter",
    "SentenceTextSplitter",
    "TokenTextSplitter",
    "build_splitter",
    "token_windows",
    "SplittingService",
    "SplitterServiceConfig",
    "Document",
    "SplitOptions",
    "SplitRecord",
    "SplitResult",
    "SplitStats",
    "SplitStrategy",
    "SplitterConfig",
    "SplitterError",
    "SplitterConfigError",
    "DegenerateWindowError",
    "DocumentError",
    "split_sentences",
    "TiktokenCodec",
    "TokenCodec",
    "count_tokens",
]
