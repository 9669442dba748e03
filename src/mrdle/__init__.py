"""
mrdle - a terminal-based Wordle clone and solver
=================================================

Play in the terminal, or list the words still possible after earlier
guesses.
"""

__version__ = "0.3.0"

from .constraints import Hint, validate_hints, word_matches_hint, word_matches_hints
from .dictionary import WordStore, get_word_store, load_word_file
from .feedback import CharacterStates, Verdict, evaluate_guess
from .solver import filter_candidates, list_words
