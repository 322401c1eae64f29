"""Shared pytest configuration and fixtures for all tests."""

import pytest

from codefig.api.highlight.Highlighter import Highlighter


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


# =============================================================================
# Highlighter Helpers
# =============================================================================


class RecordingHighlighter(Highlighter):
    """Highlighter that records its calls and returns a predictable fragment."""

    def __init__(self):
        self.calls: list[tuple[str, str | None]] = []

    def highlight(self, source: str, filetype: str | None) -> str:
        self.calls.append((source, filetype))
        return f"<pre data-filetype='{filetype}'>{source}</pre>"


@pytest.fixture
def recording_highlighter() -> RecordingHighlighter:
    return RecordingHighlighter()


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run from an empty directory with no CODEFIG_CONFIG so defaults apply."""
    monkeypatch.delenv("CODEFIG_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
