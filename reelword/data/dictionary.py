"""Pattern-keyed dictionary index built from a word list."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from ..core.exceptions import ConfigurationError, DictionaryLoadError
from ..core.pattern import Pattern, pattern, pattern_key
from ..utils.logger import get_logger
from .normalization import clean_word
from .trie import Trie

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    path: Path | str = "words.txt"
    encoding: str = "utf-8"
    min_length: int = 1
    max_length: Optional[int] = None


@dataclass
class IndexStats:
    lines_read: int = 0
    lines_skipped: int = 0
    words_discarded: int = 0
    words_kept: int = 0
    duplicates: int = 0
    build_seconds: float = 0.0


class DictionaryIndex:
    """Holds one :class:`Trie` per repeat pattern the puzzle needs.

    Words whose pattern no puzzle solution shares are dropped while the word
    list streams past, which keeps only a small slice of a large dictionary
    in memory. The index is read-only once built.
    """

    def __init__(self, patterns: Iterable[Pattern]) -> None:
        self._tries: Dict[Pattern, Trie] = {tuple(p): Trie() for p in patterns}
        self.stats = IndexStats()

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    @classmethod
    def build(
        cls,
        solutions: Iterable[Sequence[str]],
        lines: Iterable[str],
        config: Optional[DictionaryConfig] = None,
    ) -> "DictionaryIndex":
        config = config or DictionaryConfig()
        index = cls(pattern(solution) for solution in solutions)
        started = time.perf_counter()
        index._ingest(lines, config)
        index.stats.build_seconds = time.perf_counter() - started
        LOGGER.info(
            "Dictionary index built in %.2fs: %d lines, %d kept, %d discarded, %d malformed, %d patterns",
            index.stats.build_seconds,
            index.stats.lines_read,
            index.stats.words_kept,
            index.stats.words_discarded,
            index.stats.lines_skipped,
            len(index._tries),
        )
        return index

    @classmethod
    def from_path(
        cls,
        solutions: Iterable[Sequence[str]],
        config: DictionaryConfig | Path | str,
    ) -> "DictionaryIndex":
        if not isinstance(config, DictionaryConfig):
            config = DictionaryConfig(path=config)
        source = Path(config.path)
        if not source.is_file():
            raise DictionaryLoadError(f"Missing dictionary word list: {source}")

        LOGGER.info("Loading dictionary from %s", source)
        try:
            # Undecodable bytes become U+FFFD and then fail normalization.
            with source.open("r", encoding=config.encoding, errors="replace") as handle:
                return cls.build(solutions, handle, config)
        except OSError as exc:
            raise DictionaryLoadError(f"Unable to read {source}: {exc}") from exc

    def _ingest(self, lines: Iterable[str], config: DictionaryConfig) -> None:
        stats = self.stats
        for line in lines:
            stats.lines_read += 1
            word = clean_word(line)
            if word is None:
                stats.lines_skipped += 1
                if line.strip():
                    LOGGER.debug("Skipping malformed dictionary line %d: %r", stats.lines_read, line)
                continue
            if len(word) < config.min_length or (config.max_length and len(word) > config.max_length):
                stats.words_discarded += 1
                continue
            trie = self._tries.get(pattern(word))
            if trie is None:
                stats.words_discarded += 1
                continue
            if trie.contains(word):
                stats.duplicates += 1
                continue
            trie.insert(word)
            stats.words_kept += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def trie_for(self, key: Pattern) -> Trie:
        trie = self._tries.get(tuple(key))
        if trie is None:
            raise ConfigurationError(
                f"No trie for pattern {pattern_key(key)}; the index was built without it"
            )
        return trie

    def require(self, patterns: Iterable[Pattern]) -> None:
        for key in patterns:
            self.trie_for(key)

    def patterns(self) -> Tuple[Pattern, ...]:
        return tuple(self._tries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, tuple) and key in self._tries

    def __iter__(self) -> Iterator[Tuple[Pattern, Trie]]:
        return iter(self._tries.items())

    def __len__(self) -> int:
        return sum(len(trie) for trie in self._tries.values())
