"""
Solver module for mrdle.

Lists the words that are still possible solutions given hints from
earlier guesses.
"""

import logging
import sys
from typing import Iterable, List, Sequence, TextIO, Tuple

from .constraints import Hint, validate_hints, word_matches_hints
from .dictionary import WordStore
from .errors import InvalidHint

log = logging.getLogger(__name__)

NO_MATCHES = "<No words matched>"


def filter_candidates(words: Iterable[str], hints: Sequence[Hint]) -> List[str]:
    """
    Filter word list to only candidates consistent with all hints.

    Args:
        words: Words to filter, in the order they should be returned
        hints: Validated hints

    Returns:
        List of words matching all hints
    """
    return [word for word in words if word_matches_hints(word, hints)]


def list_words(
    store: WordStore,
    pairs: Iterable[Tuple[str, str]] = (),
    out: TextIO | None = None
) -> int:
    """
    Print every word in the store that is consistent with the hints.

    Hints are validated up front; one bad hint aborts the listing
    before anything is printed.

    Args:
        store: Word store to list from
        pairs: Raw (word, verdict) hint pairs
        out: Output stream (default: stdout)

    Returns:
        Process exit code: 0 on success, 1 on an invalid hint
    """
    out = out or sys.stdout

    try:
        hints = validate_hints(pairs, store.word_size())
    except InvalidHint as e:
        log.error("%s", e)
        return 1

    candidates = filter_candidates(store, hints)
    log.debug("%d of %d words match %d hint(s)", len(candidates), store.count(), len(hints))

    for word in candidates:
        print(word, file=out)

    if not candidates:
        print(NO_MATCHES, file=out)

    return 0
