"""
Pytest configuration and fixtures for sampledigest tests.
"""

import os
import random
from pathlib import Path

import pytest


@pytest.fixture
def random_bytes():
    """Return a factory for deterministic pseudo-random byte strings."""

    def _make(length: int, seed: int = 0) -> bytes:
        return random.Random(seed).randbytes(length)

    return _make


@pytest.fixture
def write_file(tmp_path: Path):
    """Return a factory that writes bytes to a file under tmp_path."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def clean_environment():
    """Clean up sampledigest environment variables before and after tests."""
    # Store original values
    original_env = {}
    for key in list(os.environ.keys()):
        if key.startswith("SAMPLEDIGEST_"):
            original_env[key] = os.environ[key]
            del os.environ[key]

    yield

    # Restore original values
    for key in list(os.environ.keys()):
        if key.startswith("SAMPLEDIGEST_"):
            del os.environ[key]

    for key, value in original_env.items():
        os.environ[key] = value
