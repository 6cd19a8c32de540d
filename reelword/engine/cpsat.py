"""CP-SAT cross-check backend using OR-Tools.

Models the same puzzle as a constraint program: one letter variable per
symbol, all different, and a table constraint per solution listing the
dictionary words of that solution's pattern. Every feasible assignment is
enumerated so the result can be compared one-for-one with the backtracking
search.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ortools.sat.python import cp_model

from ..core.constants import ALPHABET, ALPHABET_SIZE, LETTER_INDEX
from ..core.models import Puzzle, Solution, Symbol
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger
from .assignment import Assignment

LOGGER = get_logger(__name__)


class _AssignmentCollector(cp_model.CpSolverSolutionCallback):
    """Record every solution as a tuple of letter indices."""

    def __init__(self, variables: List[cp_model.IntVar]) -> None:
        cp_model.CpSolverSolutionCallback.__init__(self)
        self._variables = variables
        self.found: List[Tuple[int, ...]] = []

    def on_solution_callback(self) -> None:
        self.found.append(tuple(self.value(v) for v in self._variables))


def solve_with_cpsat(puzzle: Puzzle, index: DictionaryIndex, timeout: float = 60.0) -> List[Assignment]:
    """Enumerate all assignments with CP-SAT.

    Args:
        puzzle: Puzzle whose symbols become letter variables.
        index: Dictionary index holding a trie for every puzzle pattern.
        timeout: Solver time limit in seconds.

    Returns:
        Assignments in the order the depth-first search would report them.
    """
    index.require(puzzle.required_patterns)

    model = cp_model.CpModel()
    symbols = puzzle.symbols_by_frequency
    letter_vars: Dict[Symbol, cp_model.IntVar] = {
        symbol: model.new_int_var(0, ALPHABET_SIZE - 1, f"L_{symbol}") for symbol in symbols
    }
    model.add_all_different(list(letter_vars.values()))

    for solution, key in puzzle.items():
        words = index.trie_for(key).words()
        if not words:
            LOGGER.info("CP-SAT: no dictionary words repeat like %s", " ".join(solution))
            return []
        distinct, positions = _first_occurrences(solution)
        tuples = [[LETTER_INDEX[word[pos]] for pos in positions] for word in words]
        model.add_allowed_assignments([letter_vars[symbol] for symbol in distinct], tuples)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    collector = _AssignmentCollector([letter_vars[symbol] for symbol in symbols])

    LOGGER.info(
        "CP-SAT: %d symbol vars, %d table constraints, solving (timeout=%0.1fs)...",
        len(letter_vars),
        len(puzzle.solutions),
        timeout,
    )
    status = solver.solve(model, collector)
    if status == cp_model.FEASIBLE:
        LOGGER.warning("CP-SAT: time limit reached; enumeration may be incomplete")
    elif status not in (cp_model.OPTIMAL, cp_model.INFEASIBLE):
        LOGGER.warning("CP-SAT: solver stopped with status %s", solver.status_name(status))
    LOGGER.info("CP-SAT: %d solutions in %.2fs", len(collector.found), solver.wall_time)

    return [
        Assignment(puzzle, {symbol: ALPHABET[value] for symbol, value in zip(symbols, values)})
        for values in sorted(set(collector.found))
    ]


def _first_occurrences(solution: Solution) -> Tuple[List[Symbol], List[int]]:
    """Return the distinct symbols of ``solution`` and the position each first appears at."""
    distinct: List[Symbol] = []
    positions: List[int] = []
    for pos, symbol in enumerate(solution):
        if symbol not in distinct:
            distinct.append(symbol)
            positions.append(pos)
    return distinct, positions
