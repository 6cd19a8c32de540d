"""CLI entrypoint for the slot machine reel-word solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from reelword.core.constants import Backend
from reelword.core.exceptions import ConfigurationError, DictionaryLoadError, PuzzleError
from reelword.core.models import Puzzle
from reelword.core.pattern import pattern_key
from reelword.data.dictionary import DictionaryConfig, DictionaryIndex
from reelword.data.puzzles import SLOT_MACHINE_PUZZLE, load_puzzle, puzzle_to_dict
from reelword.engine.assignment import Assignment
from reelword.engine.search import SearchConfig, SearchEngine, SearchResult
from reelword.engine.validator import SolutionValidator
from reelword.utils.logger import configure_logging, get_logger
from reelword.utils.pretty import print_solution, print_summary

LOGGER = get_logger("reelword.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assign letters to slot machine symbols so every reel spells a dictionary word",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path("words.txt"),
        help="Word list, one word per line (default: words.txt)",
    )
    parser.add_argument(
        "--puzzle",
        type=Path,
        help="JSON puzzle file; defaults to the built-in slot machine reels",
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=[b.value for b in Backend],
        default=Backend.SEARCH.value,
        help="Backtracking search or the CP-SAT cross-check",
    )
    parser.add_argument("--workers", type=int, default=None, help="Threads for root fan-out (search backend)")
    parser.add_argument("--max-nodes", type=int, default=None, help="Stop after visiting this many nodes")
    parser.add_argument(
        "--start",
        type=str,
        default="",
        help="Letters to pre-bind to the most frequent symbols before searching",
    )
    parser.add_argument("--timeout", type=float, default=60.0, help="CP-SAT time limit in seconds")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Log search progress while the tree is being walked",
    )
    return parser


def build_payload(puzzle: Puzzle, solutions: List[Assignment], result: SearchResult | None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "puzzle": puzzle_to_dict(puzzle),
        "patterns": [pattern_key(key) for key in puzzle.solution_patterns],
        "symbols": list(puzzle.symbols_by_frequency),
        "solutions": [
            {
                "letters": str(solution),
                "bindings": dict(solution.bindings),
                "words": [solution.word(reel) for reel in puzzle.solutions],
            }
            for solution in solutions
        ],
    }
    if result is not None:
        payload["search"] = {
            "nodes_visited": result.nodes_visited,
            "elapsed_seconds": round(result.elapsed_seconds, 3),
            "completed": result.completed,
        }
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level, show_progress=args.progress)

    if args.backend == Backend.CPSAT.value:
        ignored = [
            flag
            for flag, value in (("--workers", args.workers), ("--max-nodes", args.max_nodes), ("--start", args.start))
            if value
        ]
        if ignored:
            parser.error(f"{', '.join(ignored)} only apply to the search backend")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.max_nodes is not None and args.max_nodes < 1:
        parser.error("--max-nodes must be positive")

    try:
        puzzle = load_puzzle(args.puzzle) if args.puzzle else SLOT_MACHINE_PUZZLE
        index = DictionaryIndex.from_path(puzzle.solutions, DictionaryConfig(path=args.dictionary))
    except DictionaryLoadError as exc:
        LOGGER.error("%s", exc)
        return 1
    except PuzzleError as exc:
        LOGGER.error("%s", exc)
        return 2

    result: SearchResult | None = None
    try:
        if args.backend == Backend.CPSAT.value:
            from reelword.engine.cpsat import solve_with_cpsat

            solutions = solve_with_cpsat(puzzle, index, timeout=args.timeout)
            for number, solution in enumerate(solutions, start=1):
                print_solution(puzzle, solution, number)
        else:
            config = SearchConfig(workers=args.workers or 1, max_nodes=args.max_nodes, start=args.start)
            found = []

            def report(solution: Assignment) -> None:
                found.append(solution)
                print_solution(puzzle, solution, len(found))

            result = SearchEngine(puzzle, index, config).run(report)
            solutions = result.solutions
            print_summary(result)
    except (ConfigurationError, PuzzleError) as exc:
        LOGGER.error("%s", exc)
        return 2

    validator = SolutionValidator(puzzle, index)
    invalid = [s for s in solutions if not validator.validate(s).ok]
    if invalid:
        LOGGER.warning("%d reported assignments failed re-validation", len(invalid))

    if args.output:
        output_text = json.dumps(build_payload(puzzle, solutions, result), indent=2)
        args.output.write_text(output_text, encoding="utf-8")
        LOGGER.info("Wrote %d solutions to %s", len(solutions), args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
