"""Repeat-structure signatures for symbol and letter sequences.

A pattern replaces every element of a sequence with the index of that
element's first occurrence, so ``club star grapes seven seven`` and
``hello`` both become ``(0, 1, 2, 3, 3)``. Two sequences of the same length
share a pattern exactly when they repeat in the same positions, which lets a
symbol sequence be compared with dictionary words before any letter is known.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Tuple

Pattern = Tuple[int, ...]


def pattern(sequence: Iterable[Hashable]) -> Pattern:
    """Return the first-occurrence signature of ``sequence``."""

    order: Dict[Hashable, int] = {}
    signature = []
    for token in sequence:
        if token not in order:
            order[token] = len(order)
        signature.append(order[token])
    return tuple(signature)


def pattern_key(value: Iterable[Hashable]) -> str:
    """Render the pattern of ``value`` as a compact string, e.g. ``0.1.2.1.0``."""

    return ".".join(str(index) for index in pattern(value))


__all__ = ["Pattern", "pattern", "pattern_key"]
