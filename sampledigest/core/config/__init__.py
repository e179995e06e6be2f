"""Configuration models for sampledigest."""

from .sampling_config import SamplingConfig

__all__ = ["SamplingConfig"]
