"""Shared utilities for sampledigest CLI commands."""

from .rich_output import RichOutputFormatter

__all__ = ["RichOutputFormatter"]
