"""
Unit Tests for Object File Loading
==================================

Tests for the MemoryImage value and the big-endian object loader:
- Origin and word placement, byte order
- Short inputs (FormatError)
- Address space truncation, lenient and strict (TruncatedInputError)
- Odd trailing bytes
- Reading from disk and writing images back out
"""

import logging

import pytest

from lc3_disasm.errors import (
    LC3Error,
    ObjectFileError,
    FormatError,
    TruncatedInputError,
)
from lc3_disasm.objfile import MemoryImage, load, load_file, dump


# =============================================================================
# MemoryImage Tests
# =============================================================================

class TestMemoryImage:
    """Tests for the MemoryImage value type."""

    def setup_method(self):
        self.image = MemoryImage(origin=0x3000, words=(0x1066, 0xF025))

    def test_length(self):
        assert len(self.image) == 2

    def test_absolute_indexing(self):
        """Words are indexed by absolute address, not by position."""
        assert self.image[0x3000] == 0x1066
        assert self.image[0x3001] == 0xF025

    def test_index_outside_image(self):
        with pytest.raises(IndexError):
            self.image[0x2FFF]
        with pytest.raises(IndexError):
            self.image[0x3002]

    def test_contains(self):
        assert 0x3000 in self.image
        assert 0x3001 in self.image
        assert 0x3002 not in self.image
        assert "0x3000" not in self.image

    def test_items_in_address_order(self):
        assert list(self.image.items()) == [(0x3000, 0x1066), (0x3001, 0xF025)]

    def test_addresses(self):
        assert list(self.image.addresses()) == [0x3000, 0x3001]

    def test_end_address(self):
        assert self.image.end_address == 0x3001

    def test_empty_image_end_address(self):
        assert MemoryImage(origin=0x3000, words=()).end_address is None

    def test_not_truncated_by_default(self):
        assert self.image.truncated is False
        assert self.image.dropped_words == 0

    def test_immutable(self):
        with pytest.raises(AttributeError):
            self.image.origin = 0x4000

    def test_rejects_overflowing_image(self):
        """origin + len(words) - 1 may not exceed $FFFF."""
        with pytest.raises(ValueError):
            MemoryImage(origin=0xFFFF, words=(0, 0))

    def test_last_address_is_allowed(self):
        image = MemoryImage(origin=0xFFFF, words=(0x1234,))
        assert image[0xFFFF] == 0x1234

    def test_rejects_wide_words(self):
        with pytest.raises(ValueError):
            MemoryImage(origin=0x3000, words=(0x10000,))

    def test_rejects_bad_origin(self):
        with pytest.raises(ValueError):
            MemoryImage(origin=0x10000, words=())


# =============================================================================
# Loader Tests
# =============================================================================

class TestLoad:
    """Tests for load(bytes) -> MemoryImage."""

    def test_three_word_object(self):
        """Origin word followed by two instructions."""
        image = load(bytes([0x30, 0x00, 0x10, 0x66, 0xF0, 0x25]))

        assert image.origin == 0x3000
        assert image.words == (0x1066, 0xF025)
        assert image[0x3000] == 0x1066
        assert image[0x3001] == 0xF025

    def test_origin_is_big_endian(self):
        """Bytes 30 00 are origin $3000, not $0030."""
        assert load(bytes([0x30, 0x00])).origin == 0x3000

    def test_words_are_big_endian(self):
        """Instruction words use the same byte order as the origin."""
        image = load(bytes([0x00, 0x30, 0x12, 0x34]))

        assert image.origin == 0x0030
        assert image.words == (0x1234,)

    def test_origin_only(self):
        image = load(bytes([0x30, 0x00]))

        assert len(image) == 0
        assert image.truncated is False

    def test_empty_input(self):
        with pytest.raises(FormatError) as exc_info:
            load(b"")
        assert exc_info.value.size == 0

    def test_single_byte_input(self):
        with pytest.raises(FormatError) as exc_info:
            load(b"\x30")
        assert exc_info.value.size == 1
        assert "too short" in str(exc_info.value)

    def test_format_error_hierarchy(self):
        with pytest.raises(ObjectFileError):
            load(b"")
        with pytest.raises(LC3Error):
            load(b"")

    def test_odd_trailing_byte_ignored(self):
        image = load(bytes([0x30, 0x00, 0x12, 0x34, 0x56]))

        assert image.words == (0x1234,)
        assert image.trailing_bytes == 1

    def test_odd_trailing_byte_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lc3_disasm.objfile.loader"):
            load(bytes([0x30, 0x00, 0x56]))

        assert "trailing byte" in caplog.text

    def test_does_not_interpret_words(self):
        """Any bit pattern loads unchanged."""
        image = load(bytes([0x30, 0x00, 0xFF, 0xFF, 0x00, 0x00, 0xD0, 0xE8]))

        assert image.words == (0xFFFF, 0x0000, 0xD0E8)


# =============================================================================
# Truncation Tests
# =============================================================================

class TestTruncation:
    """Tests for objects that run past the end of the address space."""

    DATA = bytes([0xFF, 0xFF, 0x11, 0x11, 0x22, 0x22])

    def test_truncates_at_boundary(self):
        """Origin $FFFF with two words loads only the first."""
        image = load(self.DATA)

        assert image.origin == 0xFFFF
        assert image.words == (0x1111,)
        assert image.truncated is True
        assert image.dropped_words == 1
        assert image.end_address == 0xFFFF

    def test_truncation_logged(self, caplog):
        """Without strict, the overflow is dropped and reported as a warning."""
        with caplog.at_level(logging.WARNING, logger="lc3_disasm.objfile.loader"):
            image = load(self.DATA)

        assert image.words == (0x1111,)
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "dropped 1" in caplog.text

    def test_strict_raises(self):
        with pytest.raises(TruncatedInputError) as exc_info:
            load(self.DATA, strict=True)

        error = exc_info.value
        assert error.loaded == 1
        assert error.dropped == 1
        assert error.image.words == (0x1111,)
        assert "0xFFFF" in str(error)

    def test_strict_is_recoverable(self):
        """The truncated image travels with the error."""
        try:
            load(self.DATA, strict=True)
        except TruncatedInputError as e:
            image = e.image
        assert image[0xFFFF] == 0x1111

    def test_strict_without_overflow(self):
        image = load(bytes([0xFF, 0xFE, 0x11, 0x11, 0x22, 0x22]), strict=True)

        assert image.words == (0x1111, 0x2222)
        assert image.truncated is False

    def test_no_wrap_to_address_zero(self):
        """Dropped words never reappear at the bottom of memory."""
        image = load(self.DATA)

        assert 0x0000 not in image


# =============================================================================
# File I/O Tests
# =============================================================================

class TestFileIO:
    """Tests for load_file() and dump()."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "prog.obj"
        path.write_bytes(bytes([0x30, 0x00, 0x10, 0x66, 0xF0, 0x25]))

        image = load_file(path)

        assert image.origin == 0x3000
        assert len(image) == 2

    def test_load_file_accepts_str(self, tmp_path):
        path = tmp_path / "prog.obj"
        path.write_bytes(bytes([0x30, 0x00]))

        assert load_file(str(path)).origin == 0x3000

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_file(tmp_path / "missing.obj")

    def test_load_file_strict(self, tmp_path):
        path = tmp_path / "prog.obj"
        path.write_bytes(TestTruncation.DATA)

        with pytest.raises(TruncatedInputError):
            load_file(path, strict=True)

    def test_dump_layout(self):
        image = MemoryImage(origin=0x3000, words=(0x1066, 0xF025))

        assert dump(image) == bytes([0x30, 0x00, 0x10, 0x66, 0xF0, 0x25])

    def test_dump_empty_image(self):
        assert dump(MemoryImage(origin=0x0200, words=())) == bytes([0x02, 0x00])

    def test_dump_then_load(self):
        image = MemoryImage(origin=0x3000, words=(0x0DFE, 0xC1C0))

        assert load(dump(image)) == image
