"""
Test the simulation engine: classify, run, and batch helpers.
"""

import io
import itertools

import pytest

from pydfa.core.loader import loads_automaton
from pydfa.core.simulate import classify, classify_many, iter_verdicts, run
from pydfa.core.types import Automaton, Verdict


class TestClassifyEvenOnes:
    """Binary strings with an even count of 1s."""

    def test_empty_string_accepted(self, even_ones):
        """Empty string: start state 'even' is final."""
        assert classify(even_ones, "") is Verdict.ACCEPTED

    def test_two_ones_accepted(self, even_ones):
        """"11" has an even count of 1s."""
        assert classify(even_ones, "11") is Verdict.ACCEPTED

    def test_one_one_rejected(self, even_ones):
        """"1" has an odd count of 1s."""
        assert classify(even_ones, "1") is Verdict.REJECTED

    def test_invalid_symbol(self, even_ones):
        """'2' is outside the alphabet."""
        assert classify(even_ones, "102") is Verdict.INVALID_SYMBOL

    def test_invalid_symbol_wins_over_missing_edge(self):
        """The alphabet check covers the whole string, not just the walked prefix."""
        partial = Automaton.from_names(("s", "t"), ("a", "b"), "s", ("t",), {("s", "a"): "t"})
        assert classify(partial, "bbz") is Verdict.INVALID_SYMBOL

    @pytest.mark.parametrize("length", range(6))
    def test_matches_parity_for_all_strings(self, even_ones, length):
        """Every binary string up to length 5 matches parity."""
        for chars in itertools.product("01", repeat=length):
            text = "".join(chars)
            expected = Verdict.ACCEPTED if text.count("1") % 2 == 0 else Verdict.REJECTED
            assert classify(even_ones, text) is expected


class TestClassifyDeadEnd:
    def test_empty_string_start_final(self, dead_end):
        """Empty string accepted when start is final."""
        assert classify(dead_end, "") is Verdict.ACCEPTED

    def test_ends_in_non_final(self, dead_end):
        """Ending in non-final s1 rejects."""
        assert classify(dead_end, "aaaa") is Verdict.REJECTED

    def test_missing_edge_rejects(self):
        """Walking off the graph rejects."""
        a = loads_automaton("s\ns t\na b\nt\ns a t\n")
        assert classify(a, "a") is Verdict.ACCEPTED
        assert classify(a, "ab") is Verdict.REJECTED
        assert classify(a, "b") is Verdict.REJECTED

    def test_empty_string_start_not_final(self):
        """Empty string rejected when start is not final."""
        a = loads_automaton("s\ns t\na\nt\ns a t\n")
        assert classify(a, "") is Verdict.REJECTED


class TestClassifyProperties:
    @pytest.mark.parametrize("text", ["x", "0x", "\n", " ", "é"])
    def test_foreign_characters_never_accept_or_reject(self, even_ones, text):
        """Any foreign character gives INVALID_SYMBOL."""
        assert classify(even_ones, text) is Verdict.INVALID_SYMBOL

    def test_repeated_calls_same_verdict(self, even_ones):
        """classify is deterministic."""
        verdicts = {classify(even_ones, "0110101") for _ in range(10)}
        assert len(verdicts) == 1

    @pytest.mark.slow
    def test_long_input(self, even_ones):
        """Long inputs classify without error."""
        assert classify(even_ones, "1" * 1_000_000) is Verdict.ACCEPTED

    def test_empty_alphabet(self):
        """Empty alphabet: only the empty string is valid."""
        a = Automaton.from_names(("s",), (), "s", ("s",), {})
        assert classify(a, "") is Verdict.ACCEPTED
        assert classify(a, "a") is Verdict.INVALID_SYMBOL


class TestRun:
    def test_run_returns_ending_state(self, even_ones):
        """run returns the index of the ending state."""
        assert run(even_ones, "1") == 1
        assert run(even_ones, "") == 0

    def test_run_none_on_missing_edge(self):
        """run returns None off the graph."""
        a = loads_automaton("s\ns t\na b\nt\ns a t\n")
        assert run(a, "ab") is None

    def test_run_none_on_unknown_symbol(self, even_ones):
        """run returns None for foreign symbols."""
        assert run(even_ones, "2") is None


class TestBatch:
    def test_classify_many_preserves_order(self, even_ones):
        """Verdicts come back in input order."""
        texts = ["", "1", "11", "102"]
        assert classify_many(even_ones, texts) == [
            Verdict.ACCEPTED,
            Verdict.REJECTED,
            Verdict.ACCEPTED,
            Verdict.INVALID_SYMBOL,
        ]

    def test_iter_verdicts_skips_blank_and_comments(self, even_ones):
        """Only candidate lines are classified."""
        stream = io.StringIO("# candidates\n11\n\n1\n102")
        assert list(iter_verdicts(even_ones, stream)) == [
            ("11", Verdict.ACCEPTED),
            ("1", Verdict.REJECTED),
            ("102", Verdict.INVALID_SYMBOL),
        ]

    def test_bad_line_does_not_stop_batch(self, even_ones):
        """An invalid line does not affect later lines."""
        stream = io.StringIO("x\n11\n")
        verdicts = [v for _, v in iter_verdicts(even_ones, stream)]
        assert verdicts == [Verdict.INVALID_SYMBOL, Verdict.ACCEPTED]
