"""
Pytest configuration and shared fixtures for the structure check tests.
"""

import sys
from pathlib import Path

import pytest

# src/ 모듈을 bare import로 사용
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from check_structure import DOCUMENT_PATH, REQUIRED_SECTIONS  # noqa: E402


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each test from an empty temp directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_doc(workdir):
    """Write CLARIFICATION_REQUEST.md into the working directory."""
    def _write(text: str) -> Path:
        path = workdir / DOCUMENT_PATH
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def full_doc() -> str:
    return (
        "# Title\n...\n"
        "## Background\n...\n"
        "## Observed Ambiguity\n...\n"
        "## Specific Clarification Questions\n...\n"
        "## Risk of Proceeding Without Clarification\n...\n"
        "## Suggested Documentation Improvements\n..."
    )


@pytest.fixture
def sections():
    return list(REQUIRED_SECTIONS)
