"""Reading word lists."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union


def parse_words(lines: Iterable[str]) -> List[str]:
    """Return the lowercased, stripped, non-empty lines in their original order.

    Duplicates are kept.
    """
    words = []
    for line in lines:
        word = line.strip()
        if word:
            words.append(word.lower())
    return words


def load_words(path: Union[str, Path]) -> List[str]:
    """Load a dictionary file holding one word per line.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return parse_words(fh)
