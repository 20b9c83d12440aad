"""
Pytest configuration and fixtures for pydfa tests.

Provides the automaton descriptions used across unit and integration tests.
"""

import pytest


EVEN_ONES = """\
even
even odd
0 1
even
even 0 even
even 1 odd
odd 0 odd
odd 1 even
"""

DEAD_END = """\
s0
s0 s1 s2
a
s0
s0 a s1
s1 a s1
"""


@pytest.fixture
def even_ones_text():
    """Binary strings with an even number of 1s."""
    return EVEN_ONES


@pytest.fixture
def dead_end_text():
    """One-symbol automaton with an unreachable state s2."""
    return DEAD_END


@pytest.fixture
def even_ones(even_ones_text):
    from pydfa.core.loader import loads_automaton
    return loads_automaton(even_ones_text)


@pytest.fixture
def dead_end(dead_end_text):
    from pydfa.core.loader import loads_automaton
    return loads_automaton(dead_end_text)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path
    return _write
