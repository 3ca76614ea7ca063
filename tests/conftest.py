"""Pytest configuration and fixtures."""

import io
import sys

import pytest

from boxtools.ui.components import strip_ansi


@pytest.fixture
def stdin_bytes(monkeypatch):
    """Replace stdin with a stream holding the given bytes."""
    def _set(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return _set


@pytest.fixture
def visible():
    """Strip escape directives, for comparing what the terminal shows."""
    return strip_ansi


@pytest.fixture(autouse=True)
def clear_color_env(monkeypatch):
    monkeypatch.delenv("BOXIFY_TEXT_COLOR", raising=False)
    monkeypatch.delenv("BOXIFY_BORDER_COLOR", raising=False)
