"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from wordladder.logging import reset_logging


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """Small dictionary with mixed case, blank lines and surrounding spaces."""
    path = tmp_path / "words.txt"
    path.write_text("Banan\ntable\n\n  chaise \nLIT\nbanon\n", encoding="utf-8")
    return path


@pytest.fixture
def ladder_words() -> List[str]:
    """Classic three-letter ladder dictionary."""
    return ["cat", "cot", "cog", "dot", "cut", "bat"]


@pytest.fixture
def disconnected_graph() -> Dict[str, List[Tuple[str, int]]]:
    # A <-> B and C -> D, no route from A to D.
    return {
        "A": [("B", 1)],
        "B": [("A", 1)],
        "C": [("D", 1)],
        "D": [],
    }


@pytest.fixture
def weighted_graph() -> Dict[str, List[Tuple[str, int]]]:
    # Metric:
    #      [1]      [5]
    #   A──────►B──────►G
    #   │               ▲
    #   │ [2]      [2]  │
    #   └──────►C───────┘
    return {
        "A": [("B", 1), ("C", 2)],
        "B": [("G", 5)],
        "C": [("G", 2)],
        "G": [],
    }


@pytest.fixture
def isolate_logging():
    """Reset package logging before and after a test."""
    reset_logging()
    yield
    reset_logging()
