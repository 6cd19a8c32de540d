"""Custom exception hierarchy for the reel-word solver."""


class ReelwordError(Exception):
    """Base exception for solver failures."""


class DictionaryLoadError(ReelwordError):
    """Raised when the dictionary word list cannot be read."""


class ConfigurationError(ReelwordError):
    """Raised when a puzzle pattern has no trie in the dictionary index."""


class PuzzleError(ReelwordError):
    """Raised when the puzzle table is malformed."""
