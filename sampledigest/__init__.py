"""sampledigest - constant-time sampled identifiers for files and buffers."""

from loguru import logger

from .core.config.sampling_config import SamplingConfig
from .core.constants import SAMPLE_SIZE, SAMPLE_THRESHOLD, SIZE
from .imohash import (
    ImoHash,
    embedded_length,
    hexdigest,
    new,
    new_custom,
    sum_bytes,
    sum_file,
)
from .version import __version__

# Silent unless the application opts in with logger.enable("sampledigest")
logger.disable("sampledigest")

__all__ = [
    "ImoHash",
    "SamplingConfig",
    "SAMPLE_SIZE",
    "SAMPLE_THRESHOLD",
    "SIZE",
    "embedded_length",
    "hexdigest",
    "new",
    "new_custom",
    "sum_bytes",
    "sum_file",
    "__version__",
]
