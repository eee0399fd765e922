"""Shared fixtures for the scrape_docs test suite."""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from scrape_docs.utils.logger import Logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    Logger.reset()


def render_doc(api_names, body="", description=None):
    lines = ["---", "UID: NF:example", "api_name:"]
    lines.extend(f" - {name}" for name in api_names)
    if description is not None:
        lines.append(f"description: {description}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def make_doc():
    """Build document text from declared names, body and description."""
    return render_doc


@pytest.fixture
def docs_root(tmp_path):
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(docs_root):
    """Write a document under the content root and return its path."""
    def _write(relative_path, text, encoding="utf-8"):
        path = docs_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode(encoding))
        return path
    return _write
