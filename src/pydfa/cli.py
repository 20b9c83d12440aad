"""
Command-line driver.

Loads an automaton file, then prints one verdict per line of a strings file.
Paths not given on the command line are prompted for on stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydfa.config import LoaderConfig
from pydfa.core.errors import AutomatonError
from pydfa.core.loader import load_automaton
from pydfa.core.simulate import iter_verdicts
from pydfa.core.types import Verdict
from pydfa.viz.table import format_automaton

logger = logging.getLogger(__name__)


def format_verdict(line: str, verdict: Verdict) -> str:
    if verdict is Verdict.INVALID_SYMBOL:
        return f"{verdict.label}: {line}"
    return f"{verdict.label} LINE {line}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydfa",
        description="Classify strings with a deterministic finite automaton",
    )
    parser.add_argument("automaton", nargs="?", help="path to automaton file")
    parser.add_argument("strings", nargs="?", help="path to strings file")
    parser.add_argument("--dump", action="store_true", help="print automaton tables first")
    parser.add_argument("--encoding", default="utf-8", help="encoding of both input files")
    parser.add_argument(
        "--max-states", type=int, default=None, help="reject automata with more states"
    )
    parser.add_argument(
        "--max-symbols", type=int, default=None, help="reject automata with more symbols"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _prompt(text: str) -> str:
    print(text, end="", flush=True)
    return sys.stdin.readline().strip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )

    try:
        config = LoaderConfig(
            encoding=args.encoding,
            max_states=args.max_states,
            max_symbols=args.max_symbols,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    automaton_path = args.automaton or _prompt("Enter automaton file path: ")
    strings_path = args.strings or _prompt("Enter strings file path:   ")

    try:
        automaton = load_automaton(automaton_path, config)
    except AutomatonError as exc:
        print(f"Could not load automaton: {exc}", file=sys.stderr)
        return 1

    if args.dump:
        print(format_automaton(automaton))

    try:
        f = open(strings_path, "r", encoding=config.encoding, newline="")
    except OSError:
        print(f"Cannot open strings file {strings_path}!", file=sys.stderr)
        return 1

    counts = {verdict: 0 for verdict in Verdict}
    with f:
        try:
            for line, verdict in iter_verdicts(automaton, f, config.comment):
                counts[verdict] += 1
                print(format_verdict(line, verdict))
        except AutomatonError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    logger.debug(
        "classified %d strings: %s",
        sum(counts.values()),
        ", ".join(f"{v.label}={n}" for v, n in counts.items()),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
