"""Utility helpers for sampledigest."""

from .varint import put_uvarint, read_uvarint, uvarint

__all__ = ["put_uvarint", "read_uvarint", "uvarint"]
