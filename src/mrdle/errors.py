"""
Errors module for mrdle.

Exception types raised by the word store, hint validation, the
terminal session and player statistics.
"""


class MrdleError(Exception):
    """Base class for all mrdle errors."""


class InconsistentWordLength(MrdleError, ValueError):
    """A word list contains words of different lengths."""

    def __init__(self, word: str, expected: int):
        super().__init__(f"Inconsistent word length: {word}")
        self.word = word
        self.expected = expected


class WordFileUnreadable(MrdleError, OSError):
    """A word list file could not be opened or decoded."""


class NotAListedWord(MrdleError, ValueError):
    """A guess is not present in the word store."""

    def __init__(self, word: str):
        super().__init__(f"Not a word: {word}")
        self.word = word


class InvalidHint(MrdleError, ValueError):
    """A hint has the wrong length or unrecognized verdict symbols."""

    def __init__(self, word: str, verdict: str):
        super().__init__(f"Invalid hint: {word} {verdict}")
        self.word = word
        self.verdict = verdict


class StatsIOFailure(MrdleError, OSError):
    """Player statistics could not be loaded or saved."""
