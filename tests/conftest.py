# tests/conftest.py
"""
Shared fixtures for the causeprint test-suite.
"""

import io
import re

import pytest

from causeprint.introspect import default_registry
from tests.helpers import make_captured_failure, make_exception

ANSI = re.compile(r"\x1b\[[0-9;]*m")


class TtyStringIO(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def tty():
    return TtyStringIO()


@pytest.fixture
def request_failure():
    return make_exception()


@pytest.fixture
def captured_failure():
    return make_captured_failure()


@pytest.fixture
def strip_ansi():
    return lambda text: ANSI.sub("", text)
