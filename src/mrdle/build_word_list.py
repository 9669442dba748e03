#!/usr/bin/env python3
"""
Word List Builder

Filters a word list down to alphabetic words of one length and writes
them as a built-in word module (the format of mrdle/word_list.py).

Usage:
    mrdle-build-word-list <input_file_path> [--word-size N] [--output FILE]

Example:
    mrdle-build-word-list wordlist.txt --output src/mrdle/word_list.py
"""

import argparse
import sys
import textwrap
from pathlib import Path
from typing import Iterable, List, Optional

# Characters per blob line in the generated module
BLOB_LINE_WIDTH = 70

MODULE_TEMPLATE = '''\
"""
Built-in word list for mrdle.

Generated by mrdle-build-word-list. Words are concatenated without
separators; every word is DEFAULT_WORD_SIZE letters long.
"""

DEFAULT_WORD_SIZE = {word_size}

DEFAULT_WORDS_BLOB = (
{blob_lines}
)
'''


def is_valid_word(word: str, word_size: int) -> bool:
    """
    Check if a word is an alphabetic word of the given size.

    Args:
        word: The word to check
        word_size: Required number of letters

    Returns:
        True if word contains exactly word_size alphabetic characters
    """
    word = word.strip()
    return len(word) == word_size and word.isascii() and word.isalpha()


def select_words(lines: Iterable[str], word_size: int) -> List[str]:
    """Lowercased, deduplicated, sorted valid words."""
    return sorted({line.strip().lower() for line in lines if is_valid_word(line, word_size)})


def pack_words(words: Iterable[str]) -> str:
    """Concatenate words into a single blob."""
    return "".join(words)


def render_module(words: List[str], word_size: int) -> str:
    """Python source for a built-in word module holding words."""
    blob = pack_words(words)
    chunk = BLOB_LINE_WIDTH - BLOB_LINE_WIDTH % word_size
    lines = textwrap.wrap(blob, chunk) or [""]
    blob_lines = "\n".join(f'    "{line}"' for line in lines)
    return MODULE_TEMPLATE.format(word_size=word_size, blob_lines=blob_lines)


def write_word_module(input_path: str | Path, output_path: str | Path, word_size: int = 5) -> int:
    """
    Filter words from input file and write the word module to output file.

    Args:
        input_path: Path to input word list file (one word per line)
        output_path: Path to the module to write
        word_size: Word length to keep

    Returns:
        Number of words written

    Raises:
        OSError: If the input can't be read or the output can't be written
    """
    with open(input_path, 'r', encoding='utf-8') as f:
        words = select_words(f, word_size)

    Path(output_path).write_text(render_module(words, word_size), encoding='utf-8')
    return len(words)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        prog="mrdle-build-word-list",
        description="Build the built-in word module from a word list.",
    )
    parser.add_argument("input", help="input word list, one word per line")
    parser.add_argument("--word-size", type=int, default=5, help="word length to keep")
    parser.add_argument("--output", default="word_list.py", help="module file to write")
    args = parser.parse_args(argv)

    if args.word_size < 1:
        print(f"Error: --word-size must be positive: {args.word_size}", file=sys.stderr)
        return 1

    print(f"Reading words from: {args.input}")
    try:
        count = write_word_module(args.input, args.output, args.word_size)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"  {args.word_size}-letter words found: {count:,}")
    print(f"  Output written to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
