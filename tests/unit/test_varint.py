"""Unit tests for unsigned variable-length integer encoding."""

import pytest

from sampledigest.utils.varint import put_uvarint, read_uvarint, uvarint


class TestPutUvarint:
    """Encoding into caller-supplied buffers."""

    @pytest.mark.parametrize(
        "value,encoded",
        [
            (0, b"\x00"),
            (1, b"\x01"),
            (127, b"\x7f"),
            (128, b"\x80\x01"),
            (300, b"\xac\x02"),
            (131072, b"\x80\x80\x08"),
            (2**63 - 1, b"\xff" * 8 + b"\x7f"),
            (2**64 - 1, b"\xff" * 9 + b"\x01"),
        ],
    )
    def test_known_encodings(self, value, encoded):
        assert uvarint(value) == encoded

    def test_leaves_rest_of_buffer_untouched(self):
        buf = bytearray(b"\xaa" * 16)
        n = put_uvarint(buf, 300)
        assert n == 2
        assert buf[:2] == b"\xac\x02"
        assert buf[2:] == b"\xaa" * 14

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            uvarint(-1)


class TestReadUvarint:
    """Decoding from the start of a buffer."""

    def test_decodes_prefix_only(self):
        value, n = read_uvarint(b"\xc8\x01\xff\xff")
        assert value == 200
        assert n == 2

    def test_decodes_max_value(self):
        value, n = read_uvarint(uvarint(2**64 - 1) + b"\x00" * 6)
        assert value == 2**64 - 1
        assert n == 10

    def test_truncated_buffer(self):
        with pytest.raises(ValueError):
            read_uvarint(b"\x80\x80")

    def test_empty_buffer(self):
        with pytest.raises(ValueError):
            read_uvarint(b"")

    def test_overlong_encoding(self):
        with pytest.raises(ValueError):
            read_uvarint(b"\x80" * 11)
