"""Pretty-print helpers for found assignments."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.models import Puzzle
    from ..engine.assignment import Assignment
    from ..engine.search import SearchResult


def format_solution(puzzle: Puzzle, assignment: Assignment, number: Optional[int] = None) -> str:
    """Render the symbol table next to each reel and the word it spells."""

    heading = f"Found solution: {assignment}"
    if number is not None:
        heading = f"Found solution #{number}: {assignment}"
    lines = [heading]

    symbol_width = max(len(symbol) for symbol in puzzle.symbols_by_frequency)
    rendered_reels = [" ".join(solution) for solution in puzzle.solutions]
    reel_width = max(len(text) for text in rendered_reels)
    rows = max(len(assignment.bindings), len(puzzle.solutions))
    bindings = list(assignment.bindings.items())

    for i in range(rows):
        left = ""
        if i < len(bindings):
            symbol, letter = bindings[i]
            left = f"{symbol:<{symbol_width}} => {letter}"
        right = ""
        if i < len(puzzle.solutions):
            right = f"{rendered_reels[i]:<{reel_width}} => {assignment.word(puzzle.solutions[i])}"
        lines.append(f"  {left:<{symbol_width + 5}}   {right}".rstrip())
    return "\n".join(lines)


def print_solution(
    puzzle: Puzzle,
    assignment: Assignment,
    number: Optional[int] = None,
    *,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    print(format_solution(puzzle, assignment, number), file=stream)
    print(file=stream)


def print_summary(result: SearchResult, *, stream=None) -> None:
    """Print counts and timings for a finished run."""

    stream = stream or sys.stdout
    print("--- Search ---", file=stream)
    print(f"  Solutions:     {len(result.solutions)}", file=stream)
    print(f"  Nodes visited: {result.nodes_visited}", file=stream)
    print(f"  Elapsed:       {result.elapsed_seconds:.2f} s", file=stream)
    if not result.completed:
        print("  Stopped early; results are partial", file=stream)
    elif result.exhausted:
        print("  No assignment satisfies every reel", file=stream)
