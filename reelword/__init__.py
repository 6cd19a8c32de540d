"""Reel-word solver: assign letters to slot machine symbols so every reel spells a word.

This package exposes the public API surface via:

- ``reelword.core.models.Puzzle``: the fixed reel table and its derived orderings.
- ``reelword.data.dictionary.DictionaryIndex``: pattern-keyed tries built from a word list.
- ``reelword.engine.search.SearchEngine``: exhaustive backtracking over assignments.
"""

from .core.models import Puzzle
from .core.pattern import pattern
from .data.dictionary import DictionaryConfig, DictionaryIndex
from .engine.assignment import Assignment
from .engine.search import SearchConfig, SearchEngine, SearchResult, solve

__all__ = [
    "Assignment",
    "DictionaryConfig",
    "DictionaryIndex",
    "Puzzle",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "pattern",
    "solve",
]

__version__ = "0.1.0"
