"""
Pytest configuration and shared fixtures for textops tests.
"""

from io import StringIO

import pytest

from textops.buffer import TextBuffer
from textops.config import PromptConfig


class ClosedStream(StringIO):
    """A stream whose reads fail like a closed terminal."""

    def readline(self, size=-1):
        raise OSError("stream closed")

    def read(self, size=-1):
        raise OSError("stream closed")


@pytest.fixture
def streams():
    """Factory fixture returning (stdin, stdout) with stdin pre-filled."""

    def _create_streams(answers: str = "") -> tuple[StringIO, StringIO]:
        return StringIO(answers), StringIO()

    return _create_streams


@pytest.fixture
def closed_stream():
    """A stdin replacement whose reads raise OSError."""
    return ClosedStream()


@pytest.fixture
def buffer_factory():
    """Factory fixture for creating text buffers."""

    def _create_buffer(value: str = "") -> TextBuffer:
        return TextBuffer(value)

    return _create_buffer


@pytest.fixture
def prompt_config():
    """Default prompt configuration."""
    return PromptConfig()
