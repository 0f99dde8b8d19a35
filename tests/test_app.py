from pathlib import Path

from fastapi.testclient import TestClient

from text_splitter.app import create_app
from text_splitter.config import SplitterServiceConfig
from text_splitter.models import SplitStrategy, SplitterConfig
from text_splitter.service import SplittingService


def build_client(tmp_path: Path, codec) -> TestClient:
    config = SplitterServiceConfig(
        data_dir=str(tmp_path / "data"),
        strategy=SplitStrategy.TOKEN,
        splitter=SplitterConfig(chunk_size=10, overlap=3),
    )
    return TestClient(create_app(SplittingService(config, codec=codec)))


def test_health(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_split_inline_texts(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.post(
        "/split",
        json={
            "texts": ["a,b,c"],
            "metas": [{"x": 1}],
            "strategy": "character",
            "separator": ",",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total_chunks"] == 3
    assert [r["data"] for r in body["records"]] == ["a", "b", "c"]
    assert all(r["meta"] == {"x": 1} for r in body["records"])


def test_split_degenerate_window_is_client_error(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.post(
        "/split",
        json={"texts": ["one two three"], "chunk_size": 4, "overlap": 4},
    )
    assert response.status_code == 422


def test_split_with_chunk_size_only(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.post(
        "/split",
        json={"texts": ["a,b,c"], "strategy": "character", "separator": ",", "chunk_size": 2},
    )
    assert response.status_code == 200
    assert [r["data"] for r in response.json()["records"]] == ["a", "b", "c"]


def test_split_overlap_above_chunk_size_is_client_error(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.post(
        "/split",
        json={"texts": ["one two three"], "chunk_size": 4, "overlap": 5},
    )
    assert response.status_code == 422


def test_split_file(tmp_path: Path, word_codec, numbered_words) -> None:
    source = tmp_path / "notes.txt"
    source.write_text(numbered_words, encoding="utf-8")

    client = build_client(tmp_path, word_codec)
    response = client.post("/split/file", json={"path": str(source)})

    assert response.status_code == 200
    body = response.json()
    assert body["document_id"] == "notes"
    assert body["total_chunks"] == 4
    assert Path(body["output_path"]).exists()


def test_split_missing_file(tmp_path: Path, word_codec) -> None:
    client = build_client(tmp_path, word_codec)
    response = client.post("/split/file", json={"path": str(tmp_path / "missing.txt")})
    assert response.status_code == 404


def test_latest_split(tmp_path: Path, word_codec, numbered_words) -> None:
    source = tmp_path / "notes.txt"
    source.write_text(numbered_words, encoding="utf-8")

    client = build_client(tmp_path, word_codec)
    assert client.get("/split/notes/latest").status_code == 404

    client.post("/split/file", json={"path": str(source)})
    response = client.get("/split/notes/latest")

    assert response.status_code == 200
    body = response.json()
    assert body["document_id"] == "notes"
    assert len(body["records"]) == 4
    assert "length_fn" not in body["config"]
