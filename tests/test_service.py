from pathlib import Path

import pytest

from text_splitter.config import SplitterServiceConfig
from text_splitter.models import SplitRequest, SplitResult, SplitStrategy, SplitterConfig
from text_splitter.service import SplittingService


def build_service(tmp_path: Path, codec, strategy=SplitStrategy.TOKEN) -> SplittingService:
    config = SplitterServiceConfig(
        data_dir=str(tmp_path / "data"),
        strategy=strategy,
        splitter=SplitterConfig(chunk_size=10, overlap=3),
    )
    return SplittingService(config, codec=codec)


def test_split_file_tags_records(tmp_path: Path, word_codec, numbered_words) -> None:
    source = tmp_path / "notes.txt"
    source.write_text(numbered_words, encoding="utf-8")

    service = build_service(tmp_path, word_codec)
    result = service.split_file(str(source))

    assert result.document_id == "notes"
    assert result.total_chunks == 4
    assert all(r.meta["parent_id"] == "notes" for r in result.records)
    assert all(r.meta["part"] == 0 for r in result.records)
    assert all(r.meta["source_file"] == str(source) for r in result.records)
    assert result.stats.max_chunk_length == 10
    assert result.stats.min_chunk_length == 4


def test_split_and_save_writes_result(tmp_path: Path, word_codec, numbered_words) -> None:
    source = tmp_path / "notes.txt"
    source.write_text(numbered_words, encoding="utf-8")

    service = build_service(tmp_path, word_codec)
    result, output_path = service.split_and_save(str(source))

    assert Path(output_path).exists()
    assert SplitResult.load(output_path).total_chunks == result.total_chunks


def test_split_missing_file(tmp_path: Path, word_codec) -> None:
    service = build_service(tmp_path, word_codec)
    with pytest.raises(FileNotFoundError):
        service.split_file(str(tmp_path / "missing.txt"))


def test_split_texts_with_request_strategy(tmp_path: Path, word_codec) -> None:
    service = build_service(tmp_path, word_codec)
    request = SplitRequest(
        texts=["a;b", "c"],
        metas=[{"x": 1}],
        strategy=SplitStrategy.CHARACTER,
        separator=";",
        chunk=False,
        meta={"batch": "b1"},
    )
    response = service.split_texts(request)

    assert response.strategy == SplitStrategy.CHARACTER
    assert response.total_chunks == 3
    assert [r.data for r in response.records] == ["a", "b", "c"]
    assert response.records[0].meta == {"x": 1, "batch": "b1"}
    assert response.records[2].meta == {"batch": "b1"}


def test_split_texts_uses_configured_splitter(tmp_path: Path, word_codec, numbered_words) -> None:
    service = build_service(tmp_path, word_codec)
    response = service.split_texts(SplitRequest(texts=[numbered_words], chunk_size=5, overlap=0))

    assert response.strategy == SplitStrategy.TOKEN
    assert response.total_chunks == 5


def test_latest_result_after_save(tmp_path: Path, word_codec, numbered_words) -> None:
    source = tmp_path / "notes.txt"
    source.write_text(numbered_words, encoding="utf-8")

    service = build_service(tmp_path, word_codec)
    assert service.latest_result("notes") is None

    result, _ = service.split_and_save(str(source))
    latest = service.latest_result("notes")
    assert latest.total_chunks == result.total_chunks
    assert latest.strategy == SplitStrategy.TOKEN
