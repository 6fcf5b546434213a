"""Pytest configuration and fixtures for Style-Report tests."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from src.logging.manager import LoggingManager
from src.report.data_models import Document
from src.report.surface import ReportSurface

SAMPLE_TEXT = "Hello world. This is a simple test."

SAMPLE_STYLE_OUTPUT = """\
readability grades:
        Kincaid: 2.3
        ARI: 1.8
        Coleman-Liau: 6.1
        Flesch Index: 97.0/100
        Fog Index: 3.2
        Lix: 15.0 = below school year 5
        SMOG-Grading: 3.0
sentence info:
        35 characters
        7 words, average length 4.14 characters = 1.29 syllables
        2 sentences, average length 3.5 words
"""


@pytest.fixture(autouse=True)
def reset_singletons():
    """Each test starts without a shared surface or logging session."""
    ReportSurface.reset_instance()
    LoggingManager.reset_instance()
    yield
    ReportSurface.reset_instance()
    LoggingManager.reset_instance()


@pytest.fixture
def sample_text():
    """Sample document text."""
    return SAMPLE_TEXT


@pytest.fixture
def style_output():
    """Sample output of GNU style."""
    return SAMPLE_STYLE_OUTPUT


@pytest.fixture
def saved_document(tmp_path) -> Document:
    """A document saved to disk with no unsaved changes."""
    path = tmp_path / "essay.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return Document.from_path(path)


def completed(returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess:
    """Build a finished process result."""
    return subprocess.CompletedProcess(args="style", returncode=returncode, stdout=stdout)


class FakeStyle:
    """Stands in for the style program: records calls made through subprocess.run."""

    def __init__(self, output: str = SAMPLE_STYLE_OUTPUT, self_test_status: int = 0):
        self.output = output
        self.self_test_status = self_test_status
        self.calls: list[dict] = []
        self.run = Mock(side_effect=self._run)

    def _run(self, args, **kwargs):
        self.calls.append({"args": args, **kwargs})
        if isinstance(args, list):
            # Bare self-test invocation
            return completed(self.self_test_status)
        return completed(0, self.output)

    @property
    def analysis_calls(self) -> list[dict]:
        return [call for call in self.calls if not isinstance(call["args"], list)]


@pytest.fixture
def fake_style():
    """Patch PATH lookup and process execution with a working style program."""
    fake = FakeStyle()
    with patch("src.tools.locator.shutil.which", return_value="/usr/bin/style"), patch(
        "subprocess.run", fake.run
    ):
        yield fake


@pytest.fixture
def missing_style():
    """Patch PATH lookup so the style program cannot be found."""
    run = Mock()
    with patch("src.tools.locator.shutil.which", return_value=None), patch(
        "subprocess.run", run
    ):
        yield run


@pytest.fixture
def broken_style():
    """Patch process execution with a style program that fails its self-test."""
    fake = FakeStyle(self_test_status=1)
    with patch("src.tools.locator.shutil.which", return_value="/usr/bin/style"), patch(
        "subprocess.run", fake.run
    ):
        yield fake
