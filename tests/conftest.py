"""Test setup for orgtree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def outline_text() -> str:
    """A small outline with a preamble and three levels."""
    return (
        "An introduction.\n"
        "\n"
        "* A Headline\n"
        "\n"
        "  Some text.\n"
        "\n"
        "** Sub-Topic 1\n"
        "\n"
        "** Sub-Topic 2\n"
        "\n"
        "*** Additional entry"
    )
