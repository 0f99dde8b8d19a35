"""
Custom Exceptions for Text Splitting.

Exception Hierarchy:
    SplitterError (base)
    ├── SplitterConfigError
    │   └── DegenerateWindowError
    └── DocumentError

Usage:
    from text_splitter.exceptions import SplitterConfigError, SplitterError

    try:
        splitter = TokenTextSplitter(SplitterConfig(chunk_size=100, overlap=100))
    except SplitterConfigError as e:
        print(f"Invalid configuration: {e}")
"""

from __future__ import annotations

from typing import Any, Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class SplitterError(Exception):
    """
    Base exception for all splitting-related errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A splitting error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class SplitterConfigError(SplitterError):
    """
    Raised when splitter settings violate their invariants.
    """

    def __init__(
        self,
        message: str = "Invalid splitter configuration",
        details: Optional[str] = None,
    ):
        super().__init__(message, details)


class DegenerateWindowError(SplitterConfigError):
    """
    Raised when a token window would never advance.

    A window advances by ``chunk_size - overlap`` tokens per step, so the
    difference must be positive.

    Attributes:
        chunk_size: Window size in tokens
        overlap: Tokens shared between consecutive windows
    """

    def __init__(self, chunk_size: int, overlap: int):
        self.chunk_size = chunk_size
        self.overlap = overlap
        super().__init__(
            message=(
                f"Token window does not advance: chunk_size ({chunk_size}) "
                f"must be greater than overlap ({overlap})"
            ),
        )


# =============================================================================
# DOCUMENT ERRORS
# =============================================================================


class DocumentError(SplitterError):
    """
    Raised when a document-like input cannot be interpreted.

    Attributes:
        index: Position of the offending document in the input list
    """

    def __init__(
        self,
        index: int,
        value: Any = None,
        original_error: Optional[Exception] = None,
    ):
        self.index = index
        self.original_error = original_error
        details = str(original_error) if original_error else None
        if details is None and value is not None:
            details = f"got {type(value).__name__}"
        super().__init__(
            message=f"Invalid document at position {index}",
            details=details,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")

        if getattr(current, "original_error", None):
            current = current.original_error
            depth += 1
        elif current.__cause__:
            current = current.__cause__
            depth += 1
        else:
            break

    return "\n".join(lines)
