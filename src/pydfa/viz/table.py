"""Plain-text dump of an Automaton's tables, for debugging."""

from __future__ import annotations

from pydfa.core.types import Automaton

UNDEFINED = "??????"


def format_automaton(automaton: Automaton) -> str:
    """
    Render start/final/all states, the alphabet and every (state, symbol) row.

    Pairs without a transition are shown with UNDEFINED as the target.
    """
    width = max(6, max(len(name) for name in automaton.states))
    lines = [
        f"Start state: {automaton.start_name}",
        f"End states:  {' '.join(automaton.final_names)}",
        f"All states:  {' '.join(automaton.states)}",
        f"Symbols:     {' '.join(automaton.alphabet)}",
        "Transition table: -------------",
    ]
    for i, name in enumerate(automaton.states):
        for j, symbol in enumerate(automaton.alphabet):
            target = automaton.target(i, j)
            target_name = UNDEFINED if target is None else automaton.states[target]
            lines.append(f"{name:>{width}} {symbol} {target_name}")
    return "\n".join(lines)
