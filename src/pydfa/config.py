"""Loader configuration."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoaderConfig:
    """
    Settings for reading automaton and candidate-string files.

    max_states / max_symbols are optional hard limits; None means unbounded.
    """

    encoding: str = "utf-8"
    comment: str = "#"
    max_states: Optional[int] = None
    max_symbols: Optional[int] = None

    def __post_init__(self):
        """Validate LoaderConfig constraints."""
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding}") from None
        if len(self.comment) != 1:
            raise ValueError("comment must be a single character")
        if self.max_states is not None and self.max_states <= 0:
            raise ValueError("max_states must be > 0")
        if self.max_symbols is not None and self.max_symbols <= 0:
            raise ValueError("max_symbols must be > 0")


DEFAULT_CONFIG = LoaderConfig()
