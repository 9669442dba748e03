"""
Stats module for mrdle.

Letter frequency statistics for a word list, shown by --word-stats.
"""

import sys
from collections import Counter
from typing import Dict, List, Sequence, TextIO, Tuple


class LetterStats:
    """
    Computes letter frequency statistics for a word list.

    Frequencies are computed per position and across all positions.
    """

    def __init__(self, full_dictionary: Sequence[str]):
        """
        Initialize with the full dictionary.

        Args:
            full_dictionary: Complete word list, all words the same length
        """
        self.full_dictionary = list(full_dictionary)
        self.word_size = len(self.full_dictionary[0]) if self.full_dictionary else 0
        self.position_frequencies = self._compute_position_frequencies(self.full_dictionary)

    def _compute_position_frequencies(
        self,
        words: Sequence[str]
    ) -> Dict[int, Dict[str, float]]:
        """
        Compute letter frequency at each position.

        Args:
            words: List of words to analyze

        Returns:
            Dictionary mapping {position: {letter: frequency}}
            where frequency = count / total_words
        """
        if not words:
            return {pos: {} for pos in range(self.word_size)}

        total_words = len(words)
        position_counts: Dict[int, Counter] = {pos: Counter() for pos in range(self.word_size)}

        for word in words:
            for pos, letter in enumerate(word):
                position_counts[pos][letter] += 1

        return {
            pos: {letter: count / total_words for letter, count in counts.items()}
            for pos, counts in position_counts.items()
        }

    def get_overall_letter_frequency(self, words: Sequence[str]) -> Dict[str, float]:
        """
        Compute overall letter frequency across all positions.

        Args:
            words: Word list to analyze

        Returns:
            Dictionary mapping {letter: frequency}
        """
        if not words:
            return {}

        total_letters = sum(len(word) for word in words)
        letter_counts: Counter = Counter()

        for word in words:
            letter_counts.update(word)

        return {
            letter: count / total_letters
            for letter, count in letter_counts.items()
        }

    def top_letters(self, frequencies: Dict[str, float], n: int = 5) -> List[Tuple[str, float]]:
        """Most frequent letters first; ties broken alphabetically."""
        return sorted(frequencies.items(), key=lambda x: (-x[1], x[0]))[:n]

    def report(self, out: TextIO | None = None, top: int = 5):
        """Print word list statistics to out (default: stdout)."""
        out = out or sys.stdout
        fw = 15  # field width

        print(f"{'Words:':<{fw}} {len(self.full_dictionary)}", file=out)
        print(f"{'Word size:':<{fw}} {self.word_size}", file=out)
        if not self.full_dictionary:
            return

        overall = self.get_overall_letter_frequency(self.full_dictionary)
        print(f"{'Top letters:':<{fw}} {self._format_top(overall, top)}", file=out)

        print("By position:", file=out)
        for pos, frequencies in self.position_frequencies.items():
            print(f"  {pos + 1}: {self._format_top(frequencies, top)}", file=out)

    def _format_top(self, frequencies: Dict[str, float], n: int) -> str:
        return "  ".join(f"{letter} {freq:.3f}" for letter, freq in self.top_letters(frequencies, n))
