"""
Feedback module for mrdle.

Compares a guess against the secret word and produces one verdict per
letter. Critical: duplicate letters are only credited as often as they
occur in the secret word.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional


class Verdict(Enum):
    """Per-letter result of a guess. Values are the display symbols."""
    MATCHED = "!"   # Letter is in the correct spot
    MISLAID = "~"   # Letter is in the word but in the wrong spot
    MISSING = "x"   # Letter is not in the word
    UNKNOWN = " "   # Not processed yet


# Symbols accepted in a hint's verdict string
VERDICT_SYMBOLS = frozenset(v.value for v in Verdict if v is not Verdict.UNKNOWN)

# Higher rank wins when aggregating verdicts per letter
_VERDICT_RANK = {
    Verdict.UNKNOWN: 0,
    Verdict.MISSING: 1,
    Verdict.MISLAID: 2,
    Verdict.MATCHED: 3,
}


def evaluate_guess(secret: str, guess: str) -> List[Verdict]:
    """
    Check a guessed word against the secret word.

    The caller is responsible for checking that guess is a listed word
    of the same length as secret.

    Pass 1 marks exact matches. Pass 2 scans the secret left to right
    for each remaining letter, skipping occurrences that are already
    matched in place or claimed by an earlier mislaid letter.

    Skipping only the matched positions is not enough: "lolly" against
    "allot" would then credit three L's against two. Tracking claims
    keeps matched plus mislaid for a letter within its count in secret.

    Example: secret "allot", guess "lolly"
    - L at 2 is matched
    - L at 0 claims the secret's L at 1 (mislaid)
    - O at 1 claims the secret's O at 3 (mislaid)
    - L at 3 finds nothing unclaimed (missing)
    - Y is missing
    Result: ~ ~ ! x x

    Args:
        secret: The secret word
        guess: The guessed word

    Returns:
        List of verdicts, one per letter of guess
    """
    n = len(secret)

    # First pass: find exact matches
    result = [
        Verdict.MATCHED if guess[i] == secret[i] else Verdict.UNKNOWN
        for i in range(n)
    ]
    claimed = [False] * n

    # Next pass: handle the rest
    for i in range(n):
        if result[i] is not Verdict.UNKNOWN:
            continue

        offset = 0
        while True:
            p = secret.find(guess[i], offset)
            if p == -1:
                result[i] = Verdict.MISSING
                break

            # Occurrence already used by an exact match or earlier guess letter
            if result[p] is Verdict.MATCHED or claimed[p]:
                offset = p + 1
                continue

            claimed[p] = True
            result[i] = Verdict.MISLAID
            break

    return result


def is_solved(verdicts: Iterable[Verdict]) -> bool:
    """True if every verdict is MATCHED."""
    verdicts = list(verdicts)
    return bool(verdicts) and all(v is Verdict.MATCHED for v in verdicts)


def verdicts_to_string(verdicts: Iterable[Verdict]) -> str:
    return "".join(v.value for v in verdicts)


def parse_verdicts(text: str) -> List[Verdict]:
    """
    Parse a verdict string such as "!~xx!".

    Raises:
        ValueError: If text contains an unrecognized symbol
    """
    verdicts = []
    for i, symbol in enumerate(text):
        if symbol not in VERDICT_SYMBOLS:
            raise ValueError(f"Unrecognized verdict symbol at {i}: '{symbol}'")
        verdicts.append(Verdict(symbol))
    return verdicts


class CharacterStates:
    """
    Best verdict seen per letter during a session.

    Used only to color the on-screen keyboard.
    """

    def __init__(self):
        self._states: Dict[str, Verdict] = {}

    def update(self, guess: str, verdicts: Iterable[Verdict]):
        """Fold a guess result into the map, keeping the best verdict per letter."""
        for letter, verdict in zip(guess, verdicts):
            current = self._states.get(letter, Verdict.UNKNOWN)
            if _VERDICT_RANK[verdict] > _VERDICT_RANK[current]:
                self._states[letter] = verdict

    def get(self, letter: str) -> Optional[Verdict]:
        return self._states.get(letter)

    def __contains__(self, letter: object) -> bool:
        return letter in self._states

    def __len__(self) -> int:
        return len(self._states)
