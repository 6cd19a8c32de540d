"""Puzzle tables: the built-in slot machine reels and JSON puzzle files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..core.exceptions import PuzzleError
from ..core.models import Puzzle
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

# Transcribed by hand from the DVD slot machine; kept verbatim even where a
# row looks suspicious.
SLOT_MACHINE_ROWS = (
    ("club", "star", "grapes", "seven", "seven"),
    ("cherry", "crown", "spade", "heart", "star"),
    ("club", "horseshoe", "grapes", "bar", "star"),
    ("bell", "cherry", "club", "seven", "grapes"),
    ("horseshoe", "dollar", "club", "diamond", "bar"),
    ("cherry", "diamond", "cherry", "club", "star"),
    ("bar", "horseshoe", "spade", "grapes", "club"),
    ("crown", "diamond", "cherry", "club", "heart"),
    ("spade", "crown", "club", "grapes", "bell"),
    ("seven", "club", "star", "diamond", "bar"),
)

SLOT_MACHINE_PUZZLE = Puzzle.from_rows(SLOT_MACHINE_ROWS, name="slot-machine")


def load_puzzle(path: Path | str) -> Puzzle:
    """Read a puzzle file of the form ``{"name": ..., "solutions": [[symbol, ...], ...]}``."""

    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PuzzleError(f"Unable to read puzzle file {source}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PuzzleError(f"Puzzle file {source} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PuzzleError(f"Puzzle file {source} is not valid JSON: {exc}") from exc

    puzzle = puzzle_from_dict(payload, default_name=source.stem)
    LOGGER.info(
        "Loaded puzzle '%s' with %d solutions over %d symbols",
        puzzle.name,
        len(puzzle.solutions),
        puzzle.symbol_count,
    )
    return puzzle


def puzzle_from_dict(payload: Any, default_name: str = "puzzle") -> Puzzle:
    if not isinstance(payload, dict):
        raise PuzzleError("Puzzle document must be a JSON object")
    rows = payload.get("solutions")
    if not isinstance(rows, list):
        raise PuzzleError("Puzzle document needs a 'solutions' list")
    for index, row in enumerate(rows):
        if not isinstance(row, list) or not all(isinstance(symbol, str) and symbol for symbol in row):
            raise PuzzleError(f"Solution {index} must be a list of non-empty symbol names")
    name = payload.get("name") or default_name
    return Puzzle.from_rows(rows, name=str(name))


def puzzle_to_dict(puzzle: Puzzle) -> Dict[str, Any]:
    return {"name": puzzle.name, "solutions": [list(solution) for solution in puzzle.solutions]}
