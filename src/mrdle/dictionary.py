"""
Dictionary module for mrdle.

Loads the word list from a file or from the built-in word blob and
answers membership and random-pick queries against it.
"""

import bisect
import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import InconsistentWordLength, WordFileUnreadable
from .word_list import DEFAULT_WORD_SIZE, DEFAULT_WORDS_BLOB

log = logging.getLogger(__name__)


def load_word_file(filepath: str | Path) -> List[str]:
    """
    Load the word list from a line-delimited text file.

    Cleaning steps:
    1. Strip whitespace
    2. Convert to lowercase
    3. Skip lines that are blank after stripping

    The first word establishes the word size. Duplicates are kept.

    Args:
        filepath: Path to the word list file

    Returns:
        List of words in file order

    Raises:
        WordFileUnreadable: If the file can't be opened or decoded
        InconsistentWordLength: If a word's length differs from the first word's
    """
    filepath = Path(filepath)
    words: List[str] = []
    word_len = 0

    try:
        with open(filepath, 'r', encoding='utf-8-sig') as f:
            for line in f:
                word = line.strip().lower()
                if not word:
                    continue

                # All words must be the same length
                if not word_len:
                    word_len = len(word)
                if len(word) != word_len:
                    raise InconsistentWordLength(word, word_len)

                words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise WordFileUnreadable(f"Failed to open word file: {filepath}") from e

    return words


def unpack_blob(blob: str, word_size: int) -> List[str]:
    """Split a blob of concatenated words into fixed-size chunks."""
    word_count = len(blob) // word_size
    return [blob[i * word_size:(i + 1) * word_size] for i in range(word_count)]


class WordStore:
    """
    Immutable, sorted collection of equal-length lowercase words.

    The list is sorted once at construction so membership is a binary
    search. Random selection uses the store's own generator.
    """

    def __init__(self, words: Sequence[str] = (), rng: Optional[random.Random] = None):
        self._words: Tuple[str, ...] = tuple(sorted(words))
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_file(
        cls,
        filepath: str | Path,
        rng: Optional[random.Random] = None
    ) -> 'WordStore':
        """
        Build a store from a word file.

        Load failures are logged and produce an empty store; callers
        check count() before starting a game.
        """
        try:
            words = load_word_file(filepath)
        except InconsistentWordLength as e:
            log.error("Invalid word file: %s", e)
            return cls((), rng)
        except WordFileUnreadable as e:
            log.error("%s", e)
            return cls((), rng)

        log.debug("Loaded %d words from %s", len(words), filepath)
        return cls(words, rng)

    @classmethod
    def from_blob(
        cls,
        blob: str = DEFAULT_WORDS_BLOB,
        word_size: int = DEFAULT_WORD_SIZE,
        rng: Optional[random.Random] = None
    ) -> 'WordStore':
        """Build a store from a concatenated word blob of known word size."""
        return cls(unpack_blob(blob, word_size), rng)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def contains(self, word: str) -> bool:
        """Return True if word is in the list. Case-sensitive."""
        i = bisect.bisect_left(self._words, word)
        return i != len(self._words) and self._words[i] == word

    def random_word(self) -> str:
        """
        Return a word chosen uniformly at random.

        Raises:
            ValueError: If the store is empty
        """
        if not self._words:
            raise ValueError("Cannot pick a word from an empty word list")
        return self._rng.choice(self._words)

    def word_size(self) -> int:
        return len(self._words[0]) if self._words else 0

    def count(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


def get_word_store(
    custom_path: str | Path | None = None,
    rng: Optional[random.Random] = None
) -> WordStore:
    """
    Get the word store, using custom path or the built-in word list.

    Args:
        custom_path: Optional path to a word list file.
                     If None, uses the built-in word blob.
        rng: Random generator owned by the caller

    Returns:
        WordStore (empty if the file could not be loaded)
    """
    if custom_path:
        return WordStore.from_file(custom_path, rng)

    return WordStore.from_blob(rng=rng)


if __name__ == "__main__":
    # Test loading
    store = get_word_store()
    print(f"Loaded {store.count()} words of size {store.word_size()}")
    print(f"First 10: {list(store.words[:10])}")
    print(f"Random: {store.random_word()}")
