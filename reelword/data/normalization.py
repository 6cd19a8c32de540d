"""Shared helpers for dictionary word normalization."""

from __future__ import annotations

import re
from typing import Optional

WORD_RE = re.compile(r"^[a-z]+$")


def clean_word(text: str) -> Optional[str]:
    """Return ``text`` trimmed and lowercased, or ``None`` if it is not a plain word.

    Only ASCII letters survive; a line holding digits, punctuation, inner
    whitespace or accented letters is rejected rather than repaired.
    """

    if not text:
        return None
    word = text.strip()
    # Some non-ASCII letters lowercase to ASCII (KELVIN SIGN -> "k").
    if not word.isascii():
        return None
    word = word.lower()
    if not WORD_RE.match(word):
        return None
    return word


__all__ = ["clean_word", "WORD_RE"]
