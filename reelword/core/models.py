"""Data models supporting the reel-word solver."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from .constants import ALPHABET_SIZE
from .exceptions import PuzzleError
from .pattern import Pattern, pattern

Symbol = str
Solution = Tuple[Symbol, ...]


@dataclass(frozen=True)
class Puzzle:
    """The fixed table of reel solutions plus everything derived from it.

    Derived fields are computed once here; search code reads them and never
    recomputes a pattern for a puzzle solution.
    """

    solutions: Tuple[Solution, ...]
    name: str = "puzzle"
    solution_patterns: Tuple[Pattern, ...] = field(init=False, repr=False)
    symbols_by_frequency: Tuple[Symbol, ...] = field(init=False, repr=False)
    required_patterns: Tuple[Pattern, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        solutions = tuple(tuple(solution) for solution in self.solutions)
        if not solutions:
            raise PuzzleError(f"Puzzle '{self.name}' has no solutions")
        for index, solution in enumerate(solutions):
            if not solution:
                raise PuzzleError(f"Puzzle '{self.name}' solution {index} is empty")

        counts: Dict[Symbol, int] = Counter(symbol for solution in solutions for symbol in solution)
        if len(counts) > ALPHABET_SIZE:
            raise PuzzleError(
                f"Puzzle '{self.name}' uses {len(counts)} symbols; at most {ALPHABET_SIZE} fit the alphabet"
            )

        patterns = tuple(pattern(solution) for solution in solutions)
        # Counter keeps first-seen order and sorted() is stable, so ties fall
        # back to first appearance.
        by_frequency = tuple(sorted(counts, key=lambda symbol: -counts[symbol]))

        object.__setattr__(self, "solutions", solutions)
        object.__setattr__(self, "solution_patterns", patterns)
        object.__setattr__(self, "symbols_by_frequency", by_frequency)
        object.__setattr__(self, "required_patterns", tuple(dict.fromkeys(patterns)))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Symbol]], name: str = "puzzle") -> "Puzzle":
        return cls(solutions=tuple(tuple(row) for row in rows), name=name)

    @property
    def symbol_count(self) -> int:
        return len(self.symbols_by_frequency)

    def items(self) -> Iterable[Tuple[Solution, Pattern]]:
        """Yield ``(solution, pattern)`` pairs in table order."""

        return zip(self.solutions, self.solution_patterns)
