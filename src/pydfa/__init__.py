"""
pydfa: deterministic finite automata loaded from text files.

- load_automaton / loads_automaton: build a validated Automaton
- classify: run a string through an Automaton and get a Verdict
"""

from pydfa.core.errors import AutomatonError, AutomatonFormatError, AutomatonIOError
from pydfa.core.loader import load_automaton, loads_automaton, read_automaton
from pydfa.core.simulate import classify, classify_many, iter_verdicts
from pydfa.core.types import Automaton, Verdict

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "AutomatonError",
    "AutomatonFormatError",
    "AutomatonIOError",
    "Verdict",
    "classify",
    "classify_many",
    "iter_verdicts",
    "load_automaton",
    "loads_automaton",
    "read_automaton",
]
