"""
Shared test fixtures and utilities for simplefind tests.
"""

from pathlib import Path

import pytest

from simplefind import FileInput, SearchConfig, SimpleFind
from simplefind.utils.logging_config import LogLevel, configure_logging

# Test data constants
SAMPLE_PYTHON_CODE = """\
def foo():
    '''A simple function'''
    pass

class Bar:
    def baz(self):
        return "ok"

def qux(x):
    return foo() or x
"""

SAMPLE_MARKDOWN = """\
# Notes

TODO: write docs
todo: add tests
Nothing to do here.
"""


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the package logger off the console so tests do not share a dead stream."""
    configure_logging(level=LogLevel.WARNING, enable_console=False)
    yield


@pytest.fixture
def sample_files():
    """Three in-memory files with interleaved matches for 'foo'."""
    return [
        FileInput("a.txt", "foo\nbar\nfoo"),
        FileInput("b.txt", "nothing here"),
        FileInput("c.txt", "xfoo foo\n\nfoo"),
    ]


@pytest.fixture
def code_files():
    return [
        FileInput("utils.py", SAMPLE_PYTHON_CODE),
        FileInput("NOTES.md", SAMPLE_MARKDOWN),
    ]


@pytest.fixture
def engine():
    """A sequential SimpleFind engine for deterministic tests."""
    return SimpleFind(SearchConfig(parallel=False))


@pytest.fixture
def disk_files(tmp_path: Path):
    """Write a couple of files to disk for command-line tests."""
    (tmp_path / "main.py").write_text(
        "def main():\n" "    print('Hello World')\n" "    return 0\n", encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("hello again\nHELLO loud\n", encoding="utf-8")
    return tmp_path


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "api: API-related tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "matcher: Matcher-related tests")
