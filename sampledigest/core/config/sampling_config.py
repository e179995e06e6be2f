"""Sampling configuration for sampledigest.

Controls when one-shot hashing switches from reading the whole input to
reading three fixed-size samples. Values are resolved with the following
precedence:
1. CLI arguments (highest priority)
2. Environment variables
3. Default values (lowest priority)
"""

import argparse
import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from sampledigest.core.constants import SAMPLE_SIZE, SAMPLE_THRESHOLD


class SamplingConfig(BaseModel):
    """Configuration for one-shot sampling behavior."""

    sample_size: int = Field(
        default=SAMPLE_SIZE,
        description=(
            "Bytes read from the start, middle and end of large inputs. "
            "Values below 1 disable sampling (whole input is always hashed)."
        ),
    )
    sample_threshold: int = Field(
        default=SAMPLE_THRESHOLD,
        description="Inputs smaller than this many bytes are hashed in their entirety",
    )

    @field_validator("sample_threshold")
    def validate_threshold(cls, v: int) -> int:
        """Validate sample threshold."""
        if v < 0:
            raise ValueError("sample_threshold must be non-negative")
        return v

    @property
    def sampling_enabled(self) -> bool:
        """Whether large inputs are sampled rather than read in full."""
        return self.sample_size >= 1

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add sampling-related CLI arguments."""
        parser.add_argument(
            "--sample-size",
            type=int,
            default=None,
            help=(
                "Bytes to read from each of the start, middle and end of large "
                f"files (0 = hash whole file). Default: {SAMPLE_SIZE}"
            ),
        )
        parser.add_argument(
            "--sample-threshold",
            type=int,
            default=None,
            help=(
                "Files smaller than this many bytes are hashed in full. "
                f"Default: {SAMPLE_THRESHOLD}"
            ),
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load sampling config from environment variables."""
        config = {}

        if sample_size := os.getenv("SAMPLEDIGEST_SAMPLING__SAMPLE_SIZE"):
            try:
                config["sample_size"] = int(sample_size)
            except ValueError:
                # Ignore invalid env values and keep default
                pass
        if threshold := os.getenv("SAMPLEDIGEST_SAMPLING__SAMPLE_THRESHOLD"):
            try:
                config["sample_threshold"] = int(threshold)
            except ValueError:
                pass

        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract sampling config from CLI arguments."""
        overrides = {}

        if getattr(args, "sample_size", None) is not None:
            overrides["sample_size"] = args.sample_size
        if getattr(args, "sample_threshold", None) is not None:
            overrides["sample_threshold"] = args.sample_threshold

        return overrides

    @classmethod
    def from_sources(cls, args: Any = None) -> "SamplingConfig":
        """Build a config from defaults, environment and CLI arguments."""
        config_data = cls.load_from_env()
        if args is not None:
            config_data.update(cls.extract_cli_overrides(args))
        return cls(**config_data)
