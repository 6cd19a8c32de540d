"""Deterministic re-checking of reported assignments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import LETTER_INDEX
from ..core.exceptions import ConfigurationError
from ..core.models import Puzzle
from ..core.pattern import pattern
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger
from .assignment import Assignment

LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class SolutionValidator:
    """Checks an assignment without going through the search predicates."""

    def __init__(self, puzzle: Puzzle, index: DictionaryIndex) -> None:
        self.puzzle = puzzle
        self.index = index

    def validate(self, assignment: Assignment) -> ValidationResult:
        messages: List[str] = []
        bindings = assignment.bindings

        missing = [symbol for symbol in self.puzzle.symbols_by_frequency if symbol not in bindings]
        if missing:
            messages.append(f"Unbound symbols: {', '.join(missing)}")

        letters = list(bindings.values())
        if len(set(letters)) != len(letters):
            messages.append(f"Letters bound more than once: {''.join(letters)}")
        for symbol, letter in bindings.items():
            if letter not in LETTER_INDEX:
                messages.append(f"Symbol {symbol} bound to non-letter {letter!r}")

        if not missing:
            for solution, key in self.puzzle.items():
                word = assignment.word(solution)
                if pattern(word) != key:
                    messages.append(f"'{word}' does not repeat like {' '.join(solution)}")
                    continue
                try:
                    known = self.index.trie_for(key).contains(word)
                except ConfigurationError as exc:
                    messages.append(str(exc))
                    continue
                if not known:
                    messages.append(f"'{word}' is not in the dictionary")

        if messages:
            LOGGER.error("Assignment %s failed validation: %s", assignment, "; ".join(messages))
        return ValidationResult(ok=not messages, messages=messages)
