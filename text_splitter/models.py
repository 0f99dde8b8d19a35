"""
Data Models for Text Splitting

Defines:
1. SplitterConfig - Chunk size, overlap and length measurement settings
2. SplitOptions - Per-call overrides for a single split
3. Document / SplitRecord - Input documents and produced records
4. SplitResult - Complete output of splitting a file, with statistics
5. Request/response models for the HTTP service

Design Principles:
- Pydantic v2 for validation and serialization
- Configuration is frozen after construction; per-call overrides produce
  a new validated config instead of mutating the instance
- Save/load pattern for results

Usage:
    config = SplitterConfig(chunk_size=512, overlap=64, chunk=True)
    result = service.split_file("notes.txt")
    result.save("splits.json")
"""

import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import SplitterConfigError
from .token_counter import DEFAULT_ENCODING

LengthFunction = Callable[[str], int]


class SplitStrategy(str, Enum):
    """Available splitting strategies."""

    CHARACTER = "character"
    SENTENCE = "sentence"
    TOKEN = "token"


class SplitterConfig(BaseModel):
    """
    Configuration shared by all splitters.

    ``chunk_size`` and ``overlap`` are measured with ``length_fn``, which
    defaults to the token count of the splitter's codec.
    """
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(
        1000,
        description="Target maximum length of a chunk",
        gt=0,
    )
    overlap: int = Field(
        200,
        description="Length budget shared between consecutive chunks",
        ge=0,
    )
    chunk: bool = Field(
        False,
        description="Re-assemble pieces into size-bounded chunks",
    )
    length_fn: Optional[LengthFunction] = Field(
        None,
        description="Custom length measurement (defaults to token count)",
        exclude=True,
    )
    encoding_name: str = Field(
        DEFAULT_ENCODING,
        description="tiktoken encoding used by the default codec",
    )

    def model_post_init(self, __context: Any) -> None:
        if self.overlap > self.chunk_size:
            raise SplitterConfigError(
                f"overlap ({self.overlap}) must not be greater than "
                f"chunk_size ({self.chunk_size})"
            )

    def merged(self, options: Optional["SplitOptions"] = None) -> "SplitterConfig":
        """
        Return a validated copy with the non-empty overrides of ``options``.

        An inherited overlap is capped at an overridden ``chunk_size``; an
        explicit ``overlap`` override above ``chunk_size`` still fails.
        """
        if options is None:
            return self
        overrides = options.overrides()
        if not overrides:
            return self
        values = {
            "chunk_size": self.chunk_size,
            "overlap": self.overlap,
            "chunk": self.chunk,
            "length_fn": self.length_fn,
            "encoding_name": self.encoding_name,
        }
        values.update(overrides)
        if "overlap" not in overrides:
            values["overlap"] = min(values["overlap"], values["chunk_size"])
        return SplitterConfig(**values)


class SplitOptions(BaseModel):
    """
    Per-call overrides. Unset fields keep the splitter's configured value.
    """
    chunk_size: Optional[int] = Field(None, gt=0)
    overlap: Optional[int] = Field(None, ge=0)
    chunk: Optional[bool] = None
    length_fn: Optional[LengthFunction] = Field(None, exclude=True)
    meta: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra metadata merged into every produced record",
    )

    def overrides(self) -> dict[str, Any]:
        fields = ("chunk_size", "overlap", "chunk", "length_fn")
        return {
            name: getattr(self, name)
            for name in fields
            if getattr(self, name) is not None
        }


class Document(BaseModel):
    """A source document: text plus identity and metadata."""
    data: str
    id: Any = None
    meta: dict[str, Any] = Field(default_factory=dict)


class SplitRecord(BaseModel):
    """One produced chunk with the metadata of its source."""
    model_config = ConfigDict(frozen=True)

    data: str
    meta: dict[str, Any] = Field(default_factory=dict)


class SplitStats(BaseModel):
    """Statistics about a split, measured with the splitter's length function."""
    total_chunks: int = 0
    total_length: int = 0
    avg_chunk_length: float = 0.0
    min_chunk_length: int = 0
    max_chunk_length: int = 0

    @classmethod
    def from_lengths(cls, lengths: list[int]) -> "SplitStats":
        if not lengths:
            return cls()
        return cls(
            total_chunks=len(lengths),
            total_length=sum(lengths),
            avg_chunk_length=sum(lengths) / len(lengths),
            min_chunk_length=min(lengths),
            max_chunk_length=max(lengths),
        )


class SplitResult(BaseModel):
    """
    Complete result of splitting one source file.

    Ready for downstream embedding and vector store ingestion.
    """
    source_file: str = Field(
        ...,
        description="Path to the source text file",
    )
    document_id: str = Field(
        ...,
        description="Unique document identifier",
    )
    strategy: SplitStrategy = Field(
        ...,
        description="Strategy used for splitting",
    )
    config: SplitterConfig = Field(
        ...,
        description="Configuration used for splitting",
    )
    records: list[SplitRecord] = Field(
        default_factory=list,
        description="All produced records",
    )
    stats: SplitStats = Field(
        default_factory=SplitStats,
        description="Splitting statistics",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When splitting was performed",
    )

    @property
    def total_chunks(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save the result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "SplitResult":
        """Load a result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


# -----------------------------------------------------------------------------
# HTTP request/response models
# -----------------------------------------------------------------------------


class SplitRequest(BaseModel):
    texts: list[str]
    metas: list[Optional[dict[str, Any]]] = Field(default_factory=list)
    strategy: Optional[SplitStrategy] = None
    separator: Optional[str] = None
    chunk_size: Optional[int] = Field(None, gt=0)
    overlap: Optional[int] = Field(None, ge=0)
    chunk: Optional[bool] = None
    meta: dict[str, Any] = Field(default_factory=dict)

    def options(self) -> SplitOptions:
        return SplitOptions(
            chunk_size=self.chunk_size,
            overlap=self.overlap,
            chunk=self.chunk,
            meta=self.meta,
        )


class SplitResponse(BaseModel):
    strategy: SplitStrategy
    total_chunks: int
    records: list[SplitRecord]


class FileSplitRequest(BaseModel):
    path: str


class FileSplitResponse(BaseModel):
    document_id: str
    output_path: str
    total_chunks: int
