"""
Core types for pydfa: Automaton and Verdict.

Automaton is an immutable, validated container. The transition function is
a read-only int64 table indexed by (state, symbol); NO_TRANSITION marks a
pair with no outgoing edge.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Mapping

import numpy as np

from pydfa.core.errors import (
    DuplicateFinalState,
    DuplicateState,
    DuplicateSymbol,
    UnknownFinalState,
    UnknownStartState,
)

NO_TRANSITION = -1


class Verdict(enum.Enum):
    """Outcome of classifying one string."""

    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    INVALID_SYMBOL = "WRONG SYMBOL"

    @property
    def label(self) -> str:
        return self.value


def _first_duplicate(items: Iterable[str]) -> str | None:
    seen: set[str] = set()
    for item in items:
        if item in seen:
            return item
        seen.add(item)
    return None


@dataclass(frozen=True, eq=False)
class Automaton:
    states: tuple[str, ...]
    alphabet: tuple[str, ...]
    start_state: int
    final_states: frozenset[int]
    transition_table: np.ndarray
    _state_ids: dict[str, int] = field(init=False, repr=False, compare=False)
    _symbol_ids: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        object.__setattr__(self, "final_states", frozenset(self.final_states))

        if not self.states:
            raise ValueError("states must not be empty")
        duplicate = _first_duplicate(self.states)
        if duplicate is not None:
            raise DuplicateState(f"state {duplicate!r} is declared twice")
        for symbol in self.alphabet:
            if len(symbol) != 1:
                raise ValueError(f"alphabet symbols must be single characters, got {symbol!r}")
        duplicate = _first_duplicate(self.alphabet)
        if duplicate is not None:
            raise DuplicateSymbol(f"symbol {duplicate!r} occurs in symbol list twice")

        n_states = len(self.states)
        if not (0 <= self.start_state < n_states):
            raise ValueError("start_state must index into states")
        for idx in self.final_states:
            if not (0 <= idx < n_states):
                raise ValueError(f"final state index out of range: {idx}")

        table = np.array(self.transition_table, dtype=np.int64, copy=True)
        if table.shape != (n_states, len(self.alphabet)):
            raise ValueError(
                f"transition_table must have shape {(n_states, len(self.alphabet))}, "
                f"got {table.shape}"
            )
        defined = table[table != NO_TRANSITION]
        if defined.size and (defined.min() < 0 or defined.max() >= n_states):
            raise ValueError("transition_table references unknown state")
        table.flags.writeable = False
        object.__setattr__(self, "transition_table", table)

        object.__setattr__(self, "_state_ids", {name: i for i, name in enumerate(self.states)})
        object.__setattr__(self, "_symbol_ids", {sym: i for i, sym in enumerate(self.alphabet)})

    @classmethod
    def from_names(
        cls,
        states: Iterable[str],
        alphabet: Iterable[str],
        start_state: str,
        final_states: Iterable[str],
        transitions: Mapping[tuple[str, str], str],
    ) -> Automaton:
        """Build an Automaton from state names instead of indices."""
        states = tuple(states)
        alphabet = tuple(alphabet)
        state_ids = {name: i for i, name in enumerate(states)}
        symbol_ids = {sym: i for i, sym in enumerate(alphabet)}

        if start_state not in state_ids:
            raise UnknownStartState(f"start state {start_state} is not listed in states list")
        finals = set()
        for name in final_states:
            if name not in state_ids:
                raise UnknownFinalState(f"finishing state {name} is not listed in states list")
            if state_ids[name] in finals:
                raise DuplicateFinalState(f"duplicated finishing state: {name}")
            finals.add(state_ids[name])

        table = np.full((len(states), len(alphabet)), NO_TRANSITION, dtype=np.int64)
        for (src, symbol), dst in transitions.items():
            if src not in state_ids or dst not in state_ids:
                raise ValueError(f"transition references unknown state: {src} {symbol} {dst}")
            if symbol not in symbol_ids:
                raise ValueError(f"transition references unknown symbol: {symbol!r}")
            table[state_ids[src], symbol_ids[symbol]] = state_ids[dst]

        return cls(
            states=states,
            alphabet=alphabet,
            start_state=state_ids[start_state],
            final_states=frozenset(finals),
            transition_table=table,
        )

    def state_index(self, name: str) -> int | None:
        return self._state_ids.get(name)

    def symbol_index(self, symbol: str) -> int | None:
        return self._symbol_ids.get(symbol)

    def target(self, state: int, symbol: int) -> int | None:
        nxt = int(self.transition_table[state, symbol])
        if nxt == NO_TRANSITION:
            return None
        return nxt

    def is_final(self, state: int) -> bool:
        return state in self.final_states

    @property
    def start_name(self) -> str:
        return self.states[self.start_state]

    @property
    def final_names(self) -> tuple[str, ...]:
        """Final state names in declaration order."""
        return tuple(name for i, name in enumerate(self.states) if i in self.final_states)

    @property
    def transitions(self) -> dict[tuple[int, int], int]:
        """Defined edges as {(state, symbol): target}."""
        rows, cols = np.nonzero(self.transition_table != NO_TRANSITION)
        return {
            (int(r), int(c)): int(self.transition_table[r, c])
            for r, c in zip(rows, cols)
        }
