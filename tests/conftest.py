"""
Pytest fixtures for text splitter tests.
"""

from typing import Sequence

import pytest

from text_splitter import SplitterConfig


class WordCodec:
    """
    Deterministic whitespace tokenizer: one token per word.

    Ids are assigned in order of first appearance, so encode/decode
    round-trips any whitespace-normalized text.
    """

    def __init__(self):
        self._ids: dict[str, int] = {}
        self._words: list[str] = []

    def encode(self, text: str) -> list[int]:
        ids = []
        for word in text.split():
            if word not in self._ids:
                self._ids[word] = len(self._words)
                self._words.append(word)
            ids.append(self._ids[word])
        return ids

    def decode(self, tokens: Sequence[int]) -> str:
        return " ".join(self._words[t] for t in tokens)


@pytest.fixture
def word_codec():
    return WordCodec()


@pytest.fixture
def char_config():
    """Character-measured config with chunking enabled."""
    return SplitterConfig(chunk_size=20, overlap=5, chunk=True, length_fn=len)


@pytest.fixture
def numbered_words():
    """Text of 25 distinct words: w0 ... w24."""
    return " ".join(f"w{i}" for i in range(25))
