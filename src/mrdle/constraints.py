"""
Constraints module for mrdle.

Handles hint representation, validation, and checking a candidate word
against previously observed (guess, verdict) pairs.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import InvalidHint
from .feedback import Verdict, VERDICT_SYMBOLS, parse_verdicts, verdicts_to_string


@dataclass
class Hint:
    """
    One previously played guess and the verdicts it received.

    Attributes:
        word: The guessed word (lowercase)
        verdicts: One Verdict per letter of word
    """
    word: str
    verdicts: List[Verdict]

    def __post_init__(self):
        """Validate input"""
        if len(self.word) != len(self.verdicts):
            raise ValueError(
                f"Hint word and verdicts differ in length: "
                f"'{self.word}' vs {len(self.verdicts)} verdicts"
            )
        for i, verdict in enumerate(self.verdicts):
            if not isinstance(verdict, Verdict):
                raise TypeError(
                    f"Verdicts[{i}] must be Verdict, got {type(verdict)}: {verdict}"
                )

    @classmethod
    def parse(cls, word: str, verdict: str) -> 'Hint':
        """Build a hint from its command line form, e.g. ("crane", "!~xx!")."""
        return cls(word.lower(), parse_verdicts(verdict))

    def __str__(self) -> str:
        return f"{self.word} {verdicts_to_string(self.verdicts)}"


def validate_hints(pairs: Iterable[Tuple[str, str]], word_size: int) -> List[Hint]:
    """
    Validate raw (word, verdict) pairs and convert them to hints.

    Rules:
    1. Word and verdict string lengths must equal word_size
    2. The verdict string may only contain '!', '~' and 'x'

    Args:
        pairs: Raw (word, verdict) pairs from the command line
        word_size: Word size of the active word store

    Returns:
        List of Hint objects in input order

    Raises:
        InvalidHint: On the first offending pair
    """
    hints = []
    for word, verdict in pairs:
        if len(word) != word_size or len(verdict) != word_size:
            raise InvalidHint(word, verdict)
        if any(symbol not in VERDICT_SYMBOLS for symbol in verdict):
            raise InvalidHint(word, verdict)
        hints.append(Hint.parse(word, verdict))
    return hints


def word_matches_hint(word: str, hint: Hint) -> bool:
    """
    Determine if a word is a possible solution given one hint.

    Rules per position i (g = hint.word[i]):
    - MATCHED: word[i] must be g
    - MISSING: g must not appear anywhere in word. Duplicate letters
      that were matched or mislaid elsewhere in the same hint are not
      taken into account, so such a hint rejects every word.
    - MISLAID: word[i] must not be g, and g must appear at another position
    - UNKNOWN: no constraint

    Args:
        word: Candidate word, same length as hint.word
        hint: Hint to check against

    Returns:
        True if word is consistent with the hint
    """
    for i, (g, verdict) in enumerate(zip(hint.word, hint.verdicts)):
        if verdict is Verdict.MATCHED:
            if word[i] != g:
                return False
        elif verdict is Verdict.MISSING:
            if g in word:
                return False
        elif verdict is Verdict.MISLAID:
            # Letter can't be in this spot...
            if word[i] == g:
                return False
            # ...but must be in the word
            if not any(c == g for pos, c in enumerate(word) if pos != i):
                return False

    return True


def word_matches_hints(word: str, hints: Sequence[Hint]) -> bool:
    """True if word is consistent with every hint."""
    return all(word_matches_hint(word, hint) for hint in hints)
