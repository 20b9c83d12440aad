"""Whitespace tokenizer for a single line."""

from __future__ import annotations

import re
from typing import Iterator

_TOKEN = re.compile(r"\S+")


def tokenize(line: str) -> Iterator[str]:
    """Lazily yield the non-empty whitespace-delimited tokens of line."""
    if not isinstance(line, str):
        raise TypeError("line must be a string")
    for match in _TOKEN.finditer(line):
        yield match.group()
