"""
Tests for text splitter exceptions.
"""

import pytest

from text_splitter.exceptions import (
    DegenerateWindowError,
    DocumentError,
    SplitterConfigError,
    SplitterError,
    format_error_chain,
)


class TestSplitterError:
    """Tests for base SplitterError."""

    def test_create_simple(self):
        error = SplitterError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details is None

    def test_create_with_details(self):
        error = SplitterError("Error occurred", details="More info here")
        assert "Error occurred" in str(error)
        assert "More info here" in str(error)


class TestConfigErrors:
    def test_hierarchy(self):
        assert issubclass(SplitterConfigError, SplitterError)
        assert issubclass(DegenerateWindowError, SplitterConfigError)

    def test_degenerate_window(self):
        error = DegenerateWindowError(chunk_size=8, overlap=8)
        assert error.chunk_size == 8
        assert error.overlap == 8
        assert "chunk_size (8)" in str(error)

    def test_catch_as_base(self):
        with pytest.raises(SplitterError):
            raise DegenerateWindowError(4, 4)


class TestDocumentError:
    def test_index_and_type(self):
        error = DocumentError(3, 42)
        assert error.index == 3
        assert "position 3" in str(error)
        assert "int" in str(error)

    def test_wraps_original(self):
        original = KeyError("data")
        error = DocumentError(0, {}, original_error=original)
        assert error.original_error is original


class TestFormatErrorChain:
    def test_single_error(self):
        assert format_error_chain(SplitterError("boom")) == "SplitterError: boom"

    def test_original_error_chain(self):
        error = DocumentError(1, original_error=ValueError("bad value"))
        chain = format_error_chain(error)
        lines = chain.splitlines()
        assert lines[0].startswith("DocumentError")
        assert "ValueError: bad value" in lines[1]

    def test_cause_chain(self):
        try:
            try:
                raise KeyError("inner")
            except KeyError as exc:
                raise SplitterError("outer") from exc
        except SplitterError as error:
            chain = format_error_chain(error)
        assert "KeyError" in chain
