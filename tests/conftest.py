"""Pytest fixtures for archivetype tests."""

import io
import logging

import pytest

import archivetype
from archivetype._constants import BUFFER_SIZE_ENV_VAR


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests (no I/O beyond tmp_path)")
    config.addinivalue_line("markers", "integration: end-to-end tests with real files and stores")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def payload():
    """Deterministic non-repeating bytes of a given length."""

    def _make(size: int) -> bytes:
        return bytes((i * 31 + 7) % 256 for i in range(size))

    return _make


class FailingStream(io.RawIOBase):
    """Stream that fails after yielding a fixed prefix."""

    def __init__(self, prefix: bytes = b""):
        self._prefix = prefix

    def readable(self):
        return True

    def readinto(self, buffer):
        if self._prefix:
            n = min(len(buffer), len(self._prefix))
            buffer[:n] = self._prefix[:n]
            self._prefix = self._prefix[n:]
            return n
        raise OSError("device unplugged")


@pytest.fixture
def failing_stream():
    return FailingStream


@pytest.fixture(autouse=True)
def reset_archivetype(monkeypatch):
    monkeypatch.delenv(BUFFER_SIZE_ENV_VAR, raising=False)
    monkeypatch.setattr(archivetype, "_BUFFER_SIZE", None)

    logger = logging.getLogger("archivetype")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    original_propagate = logger.propagate
    yield
    logger.handlers = original_handlers
    logger.setLevel(original_level)
    logger.propagate = original_propagate
