"""
Automaton loader.

Reads the five sections of an automaton file in order:

    1. start state        (whole trimmed line)
    2. states             (tokens, declaration order)
    3. alphabet           (first character of each token)
    4. final states       (tokens, may be an all-whitespace line)
    5. transitions        (`from symbol to` per line, until end of file)

Loading fails fast: the first inconsistency raises an AutomatonFormatError
subclass and no automaton is returned.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Iterator, Optional, TextIO, Union

import numpy as np

from pydfa.config import DEFAULT_CONFIG, LoaderConfig
from pydfa.core.errors import (
    AutomatonIOError,
    DuplicateFinalState,
    DuplicateState,
    DuplicateSymbol,
    DuplicateTransition,
    InvalidTransition,
    LimitExceeded,
    MissingSection,
    UnknownFinalState,
    UnknownStartState,
)
from pydfa.core.types import NO_TRANSITION, Automaton
from pydfa.io.lines import iter_numbered_lines
from pydfa.io.tokenizer import tokenize

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _next_section(lines: Iterator[tuple[int, str]], section: str) -> tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise MissingSection(f"cannot read {section}: file ended early") from None


def _read_states(line_number: int, line: str, config: LoaderConfig) -> dict[str, int]:
    state_ids: dict[str, int] = {}
    for name in tokenize(line):
        if name in state_ids:
            raise DuplicateState(f"state {name} is listed twice", line_number)
        state_ids[name] = len(state_ids)
        if config.max_states is not None and len(state_ids) > config.max_states:
            raise LimitExceeded(f"more than {config.max_states} states", line_number)
    return state_ids


def _read_alphabet(line_number: int, line: str, config: LoaderConfig) -> dict[str, int]:
    symbol_ids: dict[str, int] = {}
    for token in tokenize(line):
        symbol = token[0]
        if symbol in symbol_ids:
            raise DuplicateSymbol(f"symbol {symbol} occurs in symbol list twice", line_number)
        symbol_ids[symbol] = len(symbol_ids)
        if config.max_symbols is not None and len(symbol_ids) > config.max_symbols:
            raise LimitExceeded(f"more than {config.max_symbols} symbols", line_number)
    return symbol_ids


def _read_final_states(line_number: int, line: str, state_ids: dict[str, int]) -> frozenset[int]:
    finals: set[int] = set()
    for name in tokenize(line):
        idx = state_ids.get(name)
        if idx is None:
            raise UnknownFinalState(
                f"finishing state {name} is not listed in states list", line_number
            )
        if idx in finals:
            raise DuplicateFinalState(f"duplicated finishing state: {name}", line_number)
        finals.add(idx)
    return frozenset(finals)


def _read_transitions(
    lines: Iterator[tuple[int, str]],
    state_ids: dict[str, int],
    symbol_ids: dict[str, int],
) -> np.ndarray:
    table = np.full((len(state_ids), len(symbol_ids)), NO_TRANSITION, dtype=np.int64)
    for line_number, line in lines:
        tokens = list(tokenize(line))
        if len(tokens) != 3:
            raise InvalidTransition(
                f"expected `from symbol to`, got {len(tokens)} token(s): {line.strip()}",
                line_number,
            )
        src, symbol, dst = tokens
        src_idx = state_ids.get(src)
        sym_idx = symbol_ids.get(symbol[0])
        dst_idx = state_ids.get(dst)
        if src_idx is None or sym_idx is None or dst_idx is None:
            raise InvalidTransition(f"invalid transition: {src} {symbol} {dst}", line_number)

        if table[src_idx, sym_idx] != NO_TRANSITION:
            raise DuplicateTransition(
                f"duplicate transition: {src} {symbol} {dst}", line_number
            )
        table[src_idx, sym_idx] = dst_idx
    return table


def read_automaton(stream: TextIO, config: Optional[LoaderConfig] = None) -> Automaton:
    """
    Build an Automaton from an open text stream.

    Args:
        stream: Text stream positioned at the start of an automaton description.
        config: Loader settings (comment marker, size limits).

    Returns:
        A validated, immutable Automaton.

    Raises:
        AutomatonFormatError: On the first structural or validation error.
        AutomatonIOError: If reading the stream fails.
    """
    config = config or DEFAULT_CONFIG
    lines = iter_numbered_lines(stream, config.comment)

    start_line, start_text = _next_section(lines, "initial state")
    start_name = start_text.strip()

    states_line, states_text = _next_section(lines, "set of states")
    state_ids = _read_states(states_line, states_text, config)
    if start_name not in state_ids:
        raise UnknownStartState(
            f"start state {start_name} is not listed in states list", start_line
        )
    logger.debug("read %d states, start state %r", len(state_ids), start_name)

    symbols_line, symbols_text = _next_section(lines, "transition symbols")
    symbol_ids = _read_alphabet(symbols_line, symbols_text, config)

    finals_line, finals_text = _next_section(lines, "set of finish states")
    finals = _read_final_states(finals_line, finals_text, state_ids)

    table = _read_transitions(lines, state_ids, symbol_ids)

    automaton = Automaton(
        states=tuple(state_ids),
        alphabet=tuple(symbol_ids),
        start_state=state_ids[start_name],
        final_states=finals,
        transition_table=table,
    )
    logger.debug(
        "loaded automaton: %d states, %d symbols, %d final, %d transitions",
        len(automaton.states),
        len(automaton.alphabet),
        len(automaton.final_states),
        int(np.count_nonzero(table != NO_TRANSITION)),
    )
    return automaton


def loads_automaton(text: str, config: Optional[LoaderConfig] = None) -> Automaton:
    """Build an Automaton from its textual description."""
    return read_automaton(io.StringIO(text), config)


def load_automaton(path: PathLike, config: Optional[LoaderConfig] = None) -> Automaton:
    """
    Load an Automaton from a file.

    Raises:
        AutomatonIOError: If the file cannot be opened or read.
        AutomatonFormatError: If the description is invalid.
    """
    config = config or DEFAULT_CONFIG
    try:
        f = open(path, "r", encoding=config.encoding, newline="")
    except OSError as exc:
        raise AutomatonIOError(f"file not found or could not be opened: {path}") from exc

    logger.debug("loading automaton from %s", path)
    with f:
        return read_automaton(f, config)
