"""
Line source for automaton and candidate-string files.

Yields meaningful lines lazily, dropping blank lines and comment lines.
A line holding only whitespace is not blank: it is yielded as-is, which is
how an automaton file spells an empty final-state set.
"""

from __future__ import annotations

from typing import Iterator, TextIO

from pydfa.core.errors import AutomatonIOError


def _strip_terminator(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def iter_numbered_lines(stream: TextIO, comment: str = "#") -> Iterator[tuple[int, str]]:
    """
    Yield (line_number, text) for every non-blank, non-comment line.

    line_number is the 1-based physical line in the stream. Read failures
    surface as AutomatonIOError; end of stream simply ends the iterator.
    """
    line_number = 0
    while True:
        try:
            raw = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise AutomatonIOError(f"read failed: {exc}", line_number + 1) from exc
        if not raw:
            return

        line_number += 1
        text = _strip_terminator(raw)
        if not text or text.startswith(comment):
            continue
        yield line_number, text


def iter_lines(stream: TextIO, comment: str = "#") -> Iterator[str]:
    for _, text in iter_numbered_lines(stream, comment):
        yield text
