"""
Token Codec and Counter for Text Splitting

Wraps tiktoken encodings behind a small codec interface (encode/decode) so
that splitters can work with any tokenizer. cl100k_base is the default: it is
used by GPT-4 / GPT-3.5-turbo and is a reasonable approximation for other
BPE-based tokenizers.

Usage:
    from text_splitter.token_counter import TiktokenCodec, count_tokens

    codec = TiktokenCodec()
    ids = codec.encode("Hello world")
    text = codec.decode(ids)

    n = count_tokens("Hello world")
"""

from typing import Optional, Protocol, Sequence

import tiktoken

DEFAULT_ENCODING = "cl100k_base"

# Encoders are initialized once per encoding name and reused across calls.
_encoders: dict[str, tiktoken.Encoding] = {}


class TokenCodec(Protocol):
    """Anything that turns text into token ids and back."""

    def encode(self, text: str) -> list[int]:
        ...

    def decode(self, tokens: Sequence[int]) -> str:
        ...


def get_encoder(encoding_name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Get or initialize the tiktoken encoder for ``encoding_name``."""
    encoder = _encoders.get(encoding_name)
    if encoder is None:
        encoder = tiktoken.get_encoding(encoding_name)
        _encoders[encoding_name] = encoder
    return encoder


class TiktokenCodec:
    """TokenCodec backed by a tiktoken encoding."""

    def __init__(self, encoding_name: str = DEFAULT_ENCODING):
        self.encoding_name = encoding_name

    @property
    def encoder(self) -> tiktoken.Encoding:
        return get_encoder(self.encoding_name)

    def encode(self, text: str) -> list[int]:
        if not text:
            return []
        # Special-token markers in user text are treated as plain text.
        return self.encoder.encode(text, disallowed_special=())

    def decode(self, tokens: Sequence[int]) -> str:
        return self.encoder.decode(list(tokens))

    def __repr__(self) -> str:
        return f"TiktokenCodec({self.encoding_name!r})"


def count_tokens(
    text: str,
    encoding_name: str = DEFAULT_ENCODING,
    codec: Optional[TokenCodec] = None,
) -> int:
    """
    Count the number of tokens in a text string.

    Args:
        text: The text to tokenize.
        encoding_name: tiktoken encoding to count with.
        codec: Codec to count with instead of a tiktoken encoding.

    Returns:
        Number of tokens.
    """
    if not text:
        return 0
    codec = codec or TiktokenCodec(encoding_name)
    return len(codec.encode(text))
