"""Shared constants and enumerations for the reel-word solver."""

from __future__ import annotations

import string
from enum import Enum
from typing import Tuple

# Letters are always tried in this order so search output is reproducible.
ALPHABET: Tuple[str, ...] = tuple(string.ascii_lowercase)
ALPHABET_SIZE = len(ALPHABET)
LETTER_INDEX = {letter: index for index, letter in enumerate(ALPHABET)}

# Rendering of an unbound position inside a mask.
WILDCARD = "."


class Backend(str, Enum):
    """Search strategies available from the CLI."""

    SEARCH = "search"
    CPSAT = "cpsat"
