"""
Splitting Strategies

- CharacterTextSplitter: split on a literal separator
- SentenceTextSplitter: split on sentence boundaries
- TokenTextSplitter: overlapping fixed-size windows over token ids

Usage:
    from text_splitter import CharacterTextSplitter, SplitterConfig

    splitter = CharacterTextSplitter(",", SplitterConfig(chunk_size=10, overlap=0))
    splitter.split_text("a, b, c")
    # ["a", "b", "c"]
"""

import logging
from typing import Callable, Optional

from .base import TextSplitter
from .exceptions import DegenerateWindowError, SplitterConfigError
from .models import SplitOptions, SplitStrategy, SplitterConfig
from .sentence_splitter import split_sentences
from .token_counter import TokenCodec

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "\n\n"


class CharacterTextSplitter(TextSplitter):
    """Splits text on a fixed literal separator."""

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        config: Optional[SplitterConfig] = None,
        codec: Optional[TokenCodec] = None,
    ):
        if not separator:
            raise SplitterConfigError("separator must be a non-empty string")
        super().__init__(config, codec)
        self.separator = separator

    def split_text(self, text: str, options: Optional[SplitOptions] = None) -> list[str]:
        pieces = self.clean_pieces(text.split(self.separator))
        chunks = self.finish(pieces, self.separator, options)
        logger.debug(f"Split text into {len(pieces)} pieces, {len(chunks)} chunks")
        return chunks


class SentenceTextSplitter(TextSplitter):
    """
    Splits text into sentences using a pluggable sentence detector.

    When chunking is on, sentences are joined with a single space.
    """

    def __init__(
        self,
        config: Optional[SplitterConfig] = None,
        codec: Optional[TokenCodec] = None,
        sentence_fn: Callable[[str], list[str]] = split_sentences,
    ):
        super().__init__(config, codec)
        self.sentence_fn = sentence_fn

    def split_text(self, text: str, options: Optional[SplitOptions] = None) -> list[str]:
        sentences = self.clean_pieces(self.sentence_fn(text))
        chunks = self.finish(sentences, " ", options)
        logger.debug(f"Split text into {len(sentences)} sentences, {len(chunks)} chunks")
        return chunks


def token_windows(n_tokens: int, chunk_size: int, overlap: int) -> list[tuple[int, int]]:
    """
    Compute ``[start, end)`` bounds of overlapping token windows.

    Windows start every ``chunk_size - overlap`` tokens while the start lies
    inside the sequence; each window is cut at ``n_tokens``.

    Raises:
        DegenerateWindowError: If the window would never advance.
    """
    step = chunk_size - overlap
    if step <= 0:
        raise DegenerateWindowError(chunk_size, overlap)
    return [
        (start, min(start + chunk_size, n_tokens))
        for start in range(0, n_tokens, step)
    ]


class TokenTextSplitter(TextSplitter):
    """
    Splits text into overlapping windows of at most ``chunk_size`` tokens.

    Consecutive windows share ``overlap`` tokens. The ``chunk`` flag is
    ignored: output is always windowed.
    """

    def __init__(
        self,
        config: Optional[SplitterConfig] = None,
        codec: Optional[TokenCodec] = None,
    ):
        super().__init__(config, codec)
        if self.config.chunk_size - self.config.overlap <= 0:
            raise DegenerateWindowError(self.config.chunk_size, self.config.overlap)

    def split_text(self, text: str, options: Optional[SplitOptions] = None) -> list[str]:
        config = self.resolve(options)
        tokens = self.codec.encode(text)
        windows = token_windows(len(tokens), config.chunk_size, config.overlap)

        chunks = [self.codec.decode(tokens[start:end]).strip() for start, end in windows]
        logger.debug(
            f"Split {len(tokens)} tokens into {len(chunks)} windows "
            f"(size={config.chunk_size}, overlap={config.overlap})"
        )
        return chunks


def build_splitter(
    strategy: SplitStrategy,
    config: Optional[SplitterConfig] = None,
    separator: str = DEFAULT_SEPARATOR,
    codec: Optional[TokenCodec] = None,
) -> TextSplitter:
    """Create the splitter for ``strategy``."""
    strategy = SplitStrategy(strategy)
    if strategy == SplitStrategy.CHARACTER:
        return CharacterTextSplitter(separator, config, codec)
    if strategy == SplitStrategy.SENTENCE:
        return SentenceTextSplitter(config, codec)
    return TokenTextSplitter(config, codec)
