"""128-bit mixing primitive backed by MurmurHash3 (x64, 128-bit variant).

The running state is held by ``mmh3``'s streaming hasher, so any sequence
of writes produces the same digest as a single write of their
concatenation.
"""

import struct

import mmh3

from .constants import SIZE

# mmh3 emits h1 and h2 little-endian; the reference digest is big-endian.
_MMH3_LAYOUT = struct.Struct("<QQ")
_DIGEST_LAYOUT = struct.Struct(">QQ")


class Murmur3Mixer:
    """Stream-equivalent MurmurHash3 x64_128 with seed 0."""

    seed = 0

    def __init__(self) -> None:
        self._hasher = mmh3.mmh3_x64_128(seed=self.seed)

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Mix more bytes into the running state."""
        self._hasher.update(data)

    def sum(self) -> bytes:
        """Return the 16-byte digest of everything written since the last reset.

        The running state is not modified.
        """
        h1, h2 = _MMH3_LAYOUT.unpack(self._hasher.digest())
        return _DIGEST_LAYOUT.pack(h1, h2)

    def reset(self) -> None:
        """Discard all written bytes."""
        self._hasher = mmh3.mmh3_x64_128(seed=self.seed)

    def copy(self) -> "Murmur3Mixer":
        """Return an independent mixer with the same running state."""
        clone = Murmur3Mixer.__new__(Murmur3Mixer)
        clone._hasher = self._hasher.copy()
        return clone

    @property
    def digest_size(self) -> int:
        return SIZE
