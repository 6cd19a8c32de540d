"""Partial symbol-to-letter assignments, the nodes of the search tree."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, LETTER_INDEX, WILDCARD
from ..core.exceptions import PuzzleError
from ..core.models import Puzzle, Symbol

if TYPE_CHECKING:
    from ..data.dictionary import DictionaryIndex


class Assignment:
    """An injective mapping from puzzle symbols to letters.

    Instances are never mutated: :meth:`children` copies the bindings and
    adds one more. Validity is not stored; it is asked of the dictionary
    index on demand through :meth:`is_possible` and :meth:`is_correct`.
    """

    __slots__ = ("puzzle", "_bindings", "_used")

    def __init__(self, puzzle: Puzzle, bindings: Optional[Mapping[Symbol, str]] = None) -> None:
        self.puzzle = puzzle
        self._bindings: Dict[Symbol, str] = dict(bindings or {})
        self._used: FrozenSet[str] = frozenset(self._bindings.values())
        if len(self._used) != len(self._bindings):
            raise ValueError(f"Assignment binds a letter twice: {self._bindings}")

    @classmethod
    def from_letters(cls, puzzle: Puzzle, text: str) -> "Assignment":
        """Bind the first ``len(text)`` symbols, in search order, to ``text``."""

        text = text.strip().lower()
        if len(text) > puzzle.symbol_count:
            raise PuzzleError(
                f"'{text}' binds {len(text)} letters but the puzzle has {puzzle.symbol_count} symbols"
            )
        if any(letter not in LETTER_INDEX for letter in text):
            raise PuzzleError(f"'{text}' contains characters outside a-z")
        if len(set(text)) != len(text):
            raise PuzzleError(f"'{text}' repeats a letter")
        return cls(puzzle, dict(zip(puzzle.symbols_by_frequency, text)))

    # ------------------------------------------------------------------
    # Solution checking
    # ------------------------------------------------------------------
    def mask(self, solution: Sequence[Symbol]) -> Tuple[Optional[str], ...]:
        return tuple(self._bindings.get(symbol) for symbol in solution)

    def word(self, solution: Sequence[Symbol]) -> str:
        return "".join(self._bindings.get(symbol, WILDCARD) for symbol in solution)

    def is_full(self) -> bool:
        return len(self._bindings) == self.puzzle.symbol_count

    def is_correct(self, index: "DictionaryIndex") -> bool:
        return all(
            index.trie_for(key).contains(self.mask(solution))
            for solution, key in self.puzzle.items()
        )

    def is_possible(self, index: "DictionaryIndex") -> bool:
        if self.is_full():
            return self.is_correct(index)
        return all(
            index.trie_for(key).fuzzy_contains(self.mask(solution))
            for solution, key in self.puzzle.items()
        )

    # ------------------------------------------------------------------
    # Search space traversal
    # ------------------------------------------------------------------
    def next_symbol(self) -> Optional[Symbol]:
        for symbol in self.puzzle.symbols_by_frequency:
            if symbol not in self._bindings:
                return symbol
        return None

    def children(self) -> List["Assignment"]:
        slot = self.next_symbol()
        if slot is None:
            return []
        result = []
        for letter in ALPHABET:
            if letter in self._used:
                continue
            bindings = dict(self._bindings)
            bindings[slot] = letter
            result.append(Assignment(self.puzzle, bindings))
        return result

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def bindings(self) -> Mapping[Symbol, str]:
        return MappingProxyType(self._bindings)

    @property
    def letters(self) -> str:
        return "".join(self._bindings.values())

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Assignment):
            return NotImplemented
        return self.puzzle == other.puzzle and self._bindings == other._bindings

    def __hash__(self) -> int:
        return hash(frozenset(self._bindings.items()))

    def __str__(self) -> str:
        return self.letters

    def __repr__(self) -> str:
        return f"Assignment({self.letters!r})"
