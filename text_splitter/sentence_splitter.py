"""
Default Sentence Detector

Regex-based sentence boundary detection. Good enough for English prose and
most Latin-script text; it is the default collaborator of
SentenceTextSplitter and can be replaced by any callable with the same
signature (e.g. nltk.sent_tokenize).

Design:
- Split at sentence-ending punctuation (.!?) followed by whitespace and an
  uppercase letter, digit, opening quote or bracket
- Protect known abbreviations (Mr., Dr., etc.) and initialisms (e.g., U.S.)
  from triggering false splits
- Protect list ordinals at line start ("1. ")

Usage:
    from text_splitter.sentence_splitter import split_sentences

    sentences = split_sentences("This is one. This is two.")
    # ["This is one.", "This is two."]
"""

import re
from typing import Optional

# Placeholder character used to protect dots from sentence splitting.
_DOT_PLACEHOLDER = "\x00"

_ABBREVIATIONS = {
    # Titles
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "rev", "gen", "sen",
    # Latin / references
    "etc", "vs", "cf", "al", "approx", "ca", "fig", "figs", "eq", "ch",
    "sec", "vol", "nos", "pp", "ed", "eds",
    # Organisations
    "inc", "ltd", "corp",
    # Months (abbreviated)
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept",
    "oct", "nov", "dec",
}

_ABBREV_PATTERN = re.compile(
    r"(?<!\w)(?:" + "|".join(re.escape(a) for a in _ABBREVIATIONS) + r")\.(?=\s)",
    re.IGNORECASE,
)

# Initialisms: e.g., i.e., U.S., a.m., Ph.D.
_INITIALISM_PATTERN = re.compile(r"\b[A-Za-z]{1,2}\.(?:[A-Za-z]{1,2}\.)+")

# Ordinal list markers at line start: "1. ", "23. "
_ORDINAL_PATTERN = re.compile(r"(?m)^(\s*\d{1,3})\.(?=\s)")

_SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])["\')\]]?\s+(?=[A-Z0-9"\'(\[“])')


def _protect(match: re.Match) -> str:
    return match.group().replace(".", _DOT_PLACEHOLDER)


def _protect_dots(text: str) -> str:
    """Replace dots in abbreviations and special patterns with placeholders."""
    # Initialisms first so that "U.S." is not treated as "S." + boundary
    text = _INITIALISM_PATTERN.sub(_protect, text)
    text = _ABBREV_PATTERN.sub(_protect, text)
    text = _ORDINAL_PATTERN.sub(lambda m: m.group(1) + _DOT_PLACEHOLDER, text)
    return text


def _restore_dots(text: str) -> str:
    return text.replace(_DOT_PLACEHOLDER, ".")


def split_sentences(text: Optional[str]) -> list[str]:
    """
    Split text into sentences at sentence boundaries.

    Args:
        text: Input text to split into sentences.

    Returns:
        List of sentence strings, each stripped of surrounding whitespace.
        Empty/whitespace input returns an empty list.
    """
    if not text or not text.strip():
        return []

    protected = _protect_dots(text.strip())

    sentences = []
    start = 0
    for match in _SENTENCE_BOUNDARY.finditer(protected):
        # Closing quotes/brackets belong to the sentence they end
        end = match.start() + len(match.group().rstrip())
        sentences.append(protected[start:end])
        start = match.end()
    sentences.append(protected[start:])

    return [s for s in (_restore_dots(part).strip() for part in sentences) if s]
