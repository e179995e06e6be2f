"""Unit tests for random-access byte sources."""

import pytest

from sampledigest.core.sources import BufferSource, FileSource


class TestBufferSource:
    """In-memory sources."""

    def test_size_and_reads(self):
        source = BufferSource(b"0123456789")
        assert source.size() == 10
        assert source.read(0, 4) == b"0123"
        assert source.read(5, 5) == b"56789"

    def test_short_and_past_end_reads(self):
        source = BufferSource(bytearray(b"abcdef"))
        assert source.read(4, 10) == b"ef"
        assert source.read(6, 3) == b""
        assert source.read(100, 3) == b""

    def test_memoryview_input(self):
        source = BufferSource(memoryview(b"xyz"))
        assert source.size() == 3
        assert source.read(1, 1) == b"y"

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            BufferSource(b"abc").read(-1, 2)


class TestFileSource:
    """File-backed sources."""

    def test_open_reports_size(self, write_file):
        path = write_file("a.bin", b"hello world")
        with FileSource.open(path) as source:
            assert source.size() == 11
            assert source.read(6, 5) == b"world"

    def test_reads_are_absolute(self, write_file):
        path = write_file("b.bin", bytes(range(256)))
        with FileSource.open(path) as source:
            assert source.read(200, 4) == bytes([200, 201, 202, 203])
            assert source.read(0, 2) == b"\x00\x01"

    def test_short_and_past_end_reads(self, write_file):
        path = write_file("c.bin", b"abcdef")
        with FileSource.open(path) as source:
            assert source.read(4, 10) == b"ef"
            assert source.read(6, 1) == b""
            assert source.read(0, 0) == b""

    def test_wraps_open_file(self, write_file):
        path = write_file("d.bin", b"12345")
        with open(path, "rb") as f:
            source = FileSource(f)
            assert source.size() == 5
            assert source.read(3, 2) == b"45"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            with FileSource.open(tmp_path / "missing.bin"):
                pass

    def test_read_error_propagates(self, write_file):
        path = write_file("e.bin", b"abc")
        with open(path, "rb") as f:
            source = FileSource(f)
        # File is closed now
        with pytest.raises(ValueError):
            source.read(0, 3)
