"""
Chunk Assembler - greedy forward merge of pieces into size-bounded chunks

Pieces are processed left to right. The last chunk produced so far keeps
growing (joined with ``separator``) while its measured length stays below
``chunk_size + overlap``; once it reaches that ceiling, the next piece starts
a new chunk. Pieces are never split, so a single oversized piece becomes a
chunk of its own.

Usage:
    from text_splitter.assembler import assemble_chunks

    chunks = assemble_chunks(
        ["One.", "Two.", "Three."], " ", chunk_size=6, overlap=2, length_fn=len
    )
    # ["One. Two.", "Three."]
"""

from typing import Callable, Iterable


def assemble_chunks(
    pieces: Iterable[str],
    separator: str,
    chunk_size: int,
    overlap: int,
    length_fn: Callable[[str], int],
) -> list[str]:
    """
    Merge ordered pieces into chunks.

    Args:
        pieces: Trimmed text pieces in document order.
        separator: Join string placed between merged pieces.
        chunk_size: Nominal target length of a chunk.
        overlap: Extra length a chunk may grow into beyond ``chunk_size``.
        length_fn: Measures the length of a text.

    Returns:
        List of chunks in document order.
    """
    ceiling = chunk_size + overlap
    chunks: list[str] = []

    for piece in pieces:
        current = ""
        if chunks and length_fn(chunks[-1]) < ceiling:
            current = chunks.pop()

        current = piece if not current else current + separator + piece

        if current:
            chunks.append(current)

    return chunks
