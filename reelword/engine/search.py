"""Depth-first backtracking search over symbol assignments.

The search binds symbols one at a time, most frequent first, and prunes any
partial assignment for which some puzzle solution no longer has a dictionary
completion. It is exhaustive: every full assignment whose words are all in
the dictionary is reported, in the order the traversal meets them.
"""

from __future__ import annotations

import itertools
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.models import Puzzle
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger, get_progress_logger
from .assignment import Assignment

LOGGER = get_logger(__name__)
PROGRESS = get_progress_logger()

SolutionSink = Callable[[Assignment], None]


@dataclass
class SearchConfig:
    workers: int = 1
    max_nodes: Optional[int] = None
    progress_interval: int = 50_000
    start: str = ""


@dataclass
class SearchResult:
    solutions: List[Assignment]
    nodes_visited: int
    elapsed_seconds: float
    completed: bool = True

    @property
    def exhausted(self) -> bool:
        """True when the whole tree was searched and nothing matched."""

        return self.completed and not self.solutions


@dataclass
class _Walk:
    """Per-subtree bookkeeping; each worker owns exactly one."""

    solutions: List[Assignment] = field(default_factory=list)
    nodes: int = 0


class SearchEngine:
    """Enumerates every assignment that turns all puzzle solutions into words."""

    def __init__(
        self,
        puzzle: Puzzle,
        index: DictionaryIndex,
        config: Optional[SearchConfig] = None,
    ) -> None:
        # Fail before searching if a solution's pattern was never indexed.
        index.require(puzzle.required_patterns)
        self.puzzle = puzzle
        self.index = index
        self.config = config or SearchConfig()
        self._cancelled = threading.Event()
        self._sink_lock = threading.Lock()
        self._tickets = itertools.count(1)
        self._budget_spent = False

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def run(self, sink: Optional[SolutionSink] = None) -> SearchResult:
        """Search the whole tree, or until cancelled or out of node budget.

        A :meth:`cancel` issued before the run starts is honoured; the flag is
        reset once the run returns so the engine can be run again.
        """

        try:
            return self._run(sink)
        finally:
            self._cancelled.clear()

    def _run(self, sink: Optional[SolutionSink]) -> SearchResult:
        self._tickets = itertools.count(1)
        self._budget_spent = False

        if self.config.start:
            root = Assignment.from_letters(self.puzzle, self.config.start)
        else:
            root = Assignment(self.puzzle)

        LOGGER.info(
            "Starting search over %d symbols (%d solutions, %d workers)",
            self.puzzle.symbol_count,
            len(self.puzzle.solutions),
            max(1, self.config.workers),
        )
        started = time.perf_counter()
        if self.config.workers > 1 and not root.is_full():
            walks = self._search_parallel(root, sink)
        else:
            walk = _Walk()
            self._search(root, walk, sink)
            walks = [walk]
        elapsed = time.perf_counter() - started

        result = SearchResult(
            solutions=[solution for walk in walks for solution in walk.solutions],
            nodes_visited=sum(walk.nodes for walk in walks),
            elapsed_seconds=elapsed,
            completed=not self._cancelled.is_set(),
        )
        if self._budget_spent:
            LOGGER.warning("Node budget of %d exhausted; search stopped early", self.config.max_nodes)
        LOGGER.info(
            "Search finished in %.2fs: %d solutions, %d nodes visited",
            elapsed,
            len(result.solutions),
            result.nodes_visited,
        )
        return result

    def cancel(self) -> None:
        """Stop the current run, or the next one if none is in progress."""

        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _search(self, assignment: Assignment, walk: _Walk, sink: Optional[SolutionSink]) -> None:
        if not self._visit(assignment, walk):
            return

        if assignment.is_full():
            if assignment.is_correct(self.index):
                self._report(assignment, walk, sink)
            return

        for child in assignment.children():
            if self._cancelled.is_set():
                return
            if child.is_possible(self.index):
                self._search(child, walk, sink)

    def _search_parallel(self, root: Assignment, sink: Optional[SolutionSink]) -> List[_Walk]:
        root_walk = _Walk()
        if not self._visit(root, root_walk):
            return [root_walk]
        branches = [child for child in root.children() if child.is_possible(self.index)]
        LOGGER.info("Fanning out %d root branches over %d workers", len(branches), self.config.workers)

        walks = [_Walk() for _ in branches]
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = [
                executor.submit(self._search, branch, walk, sink)
                for branch, walk in zip(branches, walks)
            ]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                self._cancelled.set()
                raise
        return [root_walk] + walks

    def _visit(self, assignment: Assignment, walk: _Walk) -> bool:
        if self._cancelled.is_set():
            return False
        ticket = next(self._tickets)
        if self.config.max_nodes is not None and ticket > self.config.max_nodes:
            self._budget_spent = True
            self._cancelled.set()
            return False
        walk.nodes += 1
        interval = self.config.progress_interval
        if interval and ticket % interval == 0:
            PROGRESS.debug("Visited %d nodes, at '%s'", ticket, assignment)
        return True

    def _report(self, assignment: Assignment, walk: _Walk, sink: Optional[SolutionSink]) -> None:
        with self._sink_lock:
            # Another worker may have cancelled while this one waited.
            if self._cancelled.is_set():
                return
            walk.solutions.append(assignment)
            LOGGER.info("Found solution: %s", assignment)
            if sink is None:
                return
            try:
                sink(assignment)
            except BaseException:
                self._cancelled.set()
                raise


def solve(
    puzzle: Puzzle,
    index: DictionaryIndex,
    sink: Optional[SolutionSink] = None,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Convenience wrapper running a fresh :class:`SearchEngine`."""

    return SearchEngine(puzzle, index, config).run(sink)
