"""
Pytest configuration and fixtures for PeerShare tests.

Created by orpheus497

Provides common fixtures and test utilities for unit and integration tests.
"""

import base64
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from peershare import crypto
from peershare.random_source import SecureRandom


class FixedRandom(SecureRandom):
    """Deterministic random source that always returns the same bytes."""

    def __init__(self, byte: int = 0x42):
        self.byte = byte

    def token_bytes(self, n: int) -> bytes:
        return bytes([self.byte]) * n


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test data.

    Yields:
        Path: Temporary directory path
    """
    tmp = Path(tempfile.mkdtemp(prefix="peershare_test_"))
    try:
        yield tmp
    finally:
        shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def key() -> str:
    """A fresh random key."""
    return crypto.generate_key()


@pytest.fixture
def zero_key() -> str:
    """The key made of 32 zero bytes."""
    return base64.b64encode(bytes(32)).decode("ascii")


@pytest.fixture
def fixed_random() -> FixedRandom:
    """Random source returning a constant nonce."""
    return FixedRandom()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PEERSHARE_* environment overrides for the test."""
    for name in list(os.environ):
        if name.startswith("PEERSHARE_"):
            monkeypatch.delenv(name)
    return monkeypatch


# Pytest marks
def pytest_configure(config):
    """
    Configure pytest markers.

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to tests in the unit/ directory."""
    for item in items:
        if "unit" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.unit)
