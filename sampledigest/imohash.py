"""Fast, constant-time identifiers for files and byte buffers.

An identifier is 16 bytes: a MurmurHash3 128-bit digest whose leading
bytes are overwritten with the uvarint encoding of the input size.

Inputs smaller than the sample threshold are hashed in full. Larger inputs
are hashed from three samples taken at the start, the middle and the end,
so hashing time does not grow with input size. Bytes between the samples
do not affect the identifier; this is a fingerprint for deduplication and
change detection, not a cryptographic hash.

Usage:
    from sampledigest import sum_file, ImoHash

    ident = sum_file("movie.mkv")

    h = ImoHash()
    h.write(b"hello ")
    h.write(b"world")
    ident = h.sum()
"""

from pathlib import Path

from loguru import logger

from sampledigest.core.config.sampling_config import SamplingConfig
from sampledigest.core.constants import SAMPLE_SIZE, SAMPLE_THRESHOLD, SIZE
from sampledigest.core.mixer import Murmur3Mixer
from sampledigest.core.sources import BufferSource, ByteSource, FileSource
from sampledigest.utils.varint import MAX_VARINT_LEN64, put_uvarint, read_uvarint


def _embed_length(digest: bytes, length: int) -> bytes:
    """Overwrite the leading bytes of ``digest`` with uvarint(``length``).

    The digest tail beyond the encoding is kept as-is.
    """
    result = bytearray(digest)
    encoded = bytearray(MAX_VARINT_LEN64)
    n = put_uvarint(encoded, length)
    result[:n] = encoded[:n]
    return bytes(result)


class ImoHash:
    """Sampling digest engine.

    One instance offers two separate ways to hash:

    * One-shot (``reset_and_hash_source``, ``sum_bytes``, ``sum_file``):
      resets the mixer, samples the source by size and embeds the source
      size in the identifier.
    * Incremental (``write``/``update``, ``sum``/``digest``, ``reset``):
      every written byte is mixed, nothing is sampled, and the identifier
      embeds the number of bytes written since the last reset.

    A one-shot call discards any incremental mixer state but does not
    clear the written-byte count, so call ``reset()`` before starting a new
    incremental session on an instance that was used for one-shot hashing.

    Instances are not thread-safe.
    """

    name = "imohash"

    def __init__(
        self,
        sample_size: int = SAMPLE_SIZE,
        sample_threshold: int = SAMPLE_THRESHOLD,
    ):
        """Create an engine.

        Args:
            sample_size: Bytes per sample; below 1 disables sampling
            sample_threshold: Inputs smaller than this are hashed in full
        """
        self._mixer = Murmur3Mixer()
        self._sample_size = sample_size
        self._sample_threshold = sample_threshold
        self._bytes_written = 0

    @classmethod
    def from_config(cls, config: SamplingConfig) -> "ImoHash":
        return cls(config.sample_size, config.sample_threshold)

    @property
    def sample_size(self) -> int:
        return self._sample_size

    @property
    def sample_threshold(self) -> int:
        return self._sample_threshold

    @property
    def bytes_written(self) -> int:
        """Bytes passed to ``write`` since the last reset."""
        return self._bytes_written

    @property
    def digest_size(self) -> int:
        return SIZE

    @property
    def block_size(self) -> int:
        return 1

    # One-shot hashing

    def reset_and_hash_source(self, source: ByteSource) -> bytes:
        """Hash a random-access byte source and return its identifier.

        Errors raised by the source propagate unchanged; no partial
        identifier is ever returned.
        """
        size = source.size()
        self._mixer.reset()

        if size < self._sample_threshold or self._sample_size < 1:
            logger.debug(f"Hashing whole input ({size} bytes)")
            data = source.read(0, size)
            if len(data) < size:
                # Source shrank; pad to the reported size
                data += bytes(size - len(data))
            self._mixer.write(data)
        else:
            logger.debug(
                f"Sampling input ({size} bytes) with {self._sample_size}-byte windows"
            )
            # A window past the end of the source leaves the previous
            # window's bytes in place.
            buffer = bytearray(self._sample_size)
            tail = size - self._sample_size
            if tail < 0:
                tail = size
            for offset in (0, size // 2, tail):
                self._fill(buffer, source, offset)
                self._mixer.write(buffer)

        return _embed_length(self._mixer.sum(), size)

    def sum_bytes(self, data: bytes | bytearray | memoryview) -> bytes:
        """Hash an in-memory buffer using this engine's parameters."""
        return self.reset_and_hash_source(BufferSource(data))

    def sum_file(self, path: str | Path) -> bytes:
        """Hash a file using this engine's parameters.

        Raises:
            OSError: If the file cannot be opened, stat'ed or read
        """
        with FileSource.open(path) as source:
            return self.reset_and_hash_source(source)

    @staticmethod
    def _fill(buffer: bytearray, source: ByteSource, offset: int) -> None:
        chunk = source.read(offset, len(buffer))
        buffer[: len(chunk)] = chunk

    # Incremental hashing

    def write(self, data: bytes) -> int:
        """Add more data to the running hash. All bytes are always accepted."""
        self._mixer.write(data)
        self._bytes_written += len(data)
        return len(data)

    def update(self, data: bytes) -> None:
        self.write(data)

    def sum(self, prefix: bytes = b"") -> bytes:
        """Append the current identifier to ``prefix`` and return the result.

        Does not change the running hash state.
        """
        return bytes(prefix) + _embed_length(self._mixer.sum(), self._bytes_written)

    def digest(self) -> bytes:
        return self.sum()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def reset(self) -> None:
        """Reset the running hash to its initial state."""
        self._bytes_written = 0
        self._mixer.reset()

    def copy(self) -> "ImoHash":
        """Return an independent engine with the same state and parameters."""
        clone = ImoHash(self._sample_size, self._sample_threshold)
        clone._mixer = self._mixer.copy()
        clone._bytes_written = self._bytes_written
        return clone

    def __repr__(self) -> str:
        return (
            f"ImoHash(sample_size={self._sample_size}, "
            f"sample_threshold={self._sample_threshold})"
        )


def new() -> ImoHash:
    """Return an engine using the default sample size and threshold."""
    return ImoHash()


def new_custom(sample_size: int, sample_threshold: int) -> ImoHash:
    """Return an engine with custom sampling parameters.

    The entire input is hashed (no sampling) if ``sample_size < 1``.
    """
    return ImoHash(sample_size, sample_threshold)


def sum_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Hash a byte buffer using default sample parameters."""
    return new().sum_bytes(data)


def sum_file(path: str | Path) -> bytes:
    """Hash a file using default sample parameters."""
    return new().sum_file(path)


def hexdigest(identifier: bytes) -> str:
    return identifier.hex()


def embedded_length(identifier: bytes) -> int:
    """Return the size (or byte count) embedded at the start of an identifier."""
    value, _ = read_uvarint(identifier)
    return value
