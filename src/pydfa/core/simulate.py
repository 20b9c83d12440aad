"""
Simulation engine: run strings through a loaded Automaton.

classify never raises for string input. A symbol outside the alphabet gives
INVALID_SYMBOL, a missing edge gives REJECTED.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

from pydfa.core.types import NO_TRANSITION, Automaton, Verdict
from pydfa.io.lines import iter_lines


def _symbol_ids(automaton: Automaton, text: str) -> Optional[list[int]]:
    ids = []
    for char in text:
        idx = automaton.symbol_index(char)
        if idx is None:
            return None
        ids.append(idx)
    return ids


def _walk(automaton: Automaton, symbol_ids: list[int]) -> Optional[int]:
    table = automaton.transition_table
    state = automaton.start_state
    for symbol in symbol_ids:
        state = int(table[state, symbol])
        if state == NO_TRANSITION:
            return None
    return state


def run(automaton: Automaton, text: str) -> Optional[int]:
    """
    Return the index of the state reached after consuming text.

    None if text holds a symbol outside the alphabet or the walk hits a
    (state, symbol) pair with no transition.
    """
    symbol_ids = _symbol_ids(automaton, text)
    if symbol_ids is None:
        return None
    return _walk(automaton, symbol_ids)


def classify(automaton: Automaton, text: str) -> Verdict:
    """
    Classify text with automaton.

    Args:
        automaton: A loaded Automaton.
        text: Candidate string; the empty string is valid input.

    Returns:
        Verdict.INVALID_SYMBOL if any character is outside the alphabet,
        otherwise ACCEPTED iff every character has a transition and the
        ending state is final, else REJECTED.
    """
    symbol_ids = _symbol_ids(automaton, text)
    if symbol_ids is None:
        return Verdict.INVALID_SYMBOL

    final = _walk(automaton, symbol_ids)
    if final is not None and automaton.is_final(final):
        return Verdict.ACCEPTED
    return Verdict.REJECTED


def classify_many(automaton: Automaton, texts: Iterable[str]) -> list[Verdict]:
    return [classify(automaton, text) for text in texts]


def iter_verdicts(
    automaton: Automaton,
    stream: TextIO,
    comment: str = "#",
) -> Iterator[tuple[str, Verdict]]:
    """Yield (line, verdict) for every candidate line of a strings stream."""
    for line in iter_lines(stream, comment):
        yield line, classify(automaton, line)
