"""
UI module for mrdle.

Implements the interactive terminal game:
- Numbered prompt per guess, blank lines ignored
- Unknown words rejected without using up a guess
- Colored tiles plus a keyboard overlay showing letters still in play
- Plain text rendering with verdict symbols when color is off
"""

import logging
import random
import string
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from .colors import COLOR_MATCHED, COLOR_MISSING, VERDICT_COLORS, styled, verdict_tile
from .dictionary import WordStore
from .errors import NotAListedWord
from .feedback import CharacterStates, Verdict, evaluate_guess, verdicts_to_string
from .player_stats import PlayerStats

log = logging.getLogger(__name__)

PROGRAM_NAME = "mrdle"

# Padding between the guess and the keyboard overlay
PAD = 4

WIN_EXCLAMATIONS = ["Genius!", "Magnificent", "Impressive", "Splendid", "Great", "Phew"]

LOSE_INSULTS = [
    "Wow, that was embarrassing.",
    "At least your head can serve as a hat rack.",
    "Were you dropped on your head as a child?",
    "Stupid is as stupid does.",
    "Don't quit your day job.",
    "You are terrible at this.",
    "Sorry, you suck.",
]
# Most rolls land past the insult list and get the plain message
INSULT_ROLL = 26
PLAIN_LOSS = "You lose."

RULES_TEXT = """\
Guess the secret word in {max_guesses} tries.

Each guess must be a word from the word list, {word_size} letters long.
After each guess every letter is marked:

  {matched}  the letter is in the word and in the correct spot
  {mislaid}  the letter is in the word but in the wrong spot
  {missing}  the letter is not in the word

A letter is only marked as often as it appears in the secret word.
The alphabet to the right of each guess shows the best result seen so
far for every letter; letters known to be missing are blanked out.

Solver mode: list the words still possible after earlier guesses with
  mrdle --hint WORD RESULT [--hint WORD RESULT ...]
where RESULT uses the symbols above, e.g. --hint crane '!~xx!'
"""


def win_exclamation(guess_count: int) -> str:
    """Message for a win that took guess_count guesses."""
    if 1 <= guess_count <= len(WIN_EXCLAMATIONS):
        return WIN_EXCLAMATIONS[guess_count - 1]
    return "Meh"


def lose_insult(rng: random.Random) -> str:
    roll = rng.randrange(INSULT_ROLL)
    return LOSE_INSULTS[roll] if roll < len(LOSE_INSULTS) else PLAIN_LOSS


def format_guess(
    guess: str,
    verdicts: List[Verdict],
    char_states: CharacterStates,
    no_color: bool = False
) -> str:
    """
    Render a guess result with the keyboard overlay to its right.

    Colored: one tile per letter, then the alphabet with known letters
    colored and missing letters blanked.
    Plain: the guess over its verdict symbols, each followed by the
    alphabet and the per-letter symbols.
    """
    pad = " " * PAD

    if not no_color:
        tiles = "".join(verdict_tile(letter, verdict) for letter, verdict in zip(guess, verdicts))
        keys = []
        for c in string.ascii_lowercase:
            state = char_states.get(c)
            if state is None:
                keys.append(c)
            elif state is Verdict.MISSING:
                keys.append(" ")
            else:
                keys.append(styled(c, VERDICT_COLORS[state]))
        return tiles + pad + "".join(keys)

    letters = "".join(
        " " if char_states.get(c) is Verdict.MISSING else c
        for c in string.ascii_lowercase
    )
    codes = "".join(
        char_states.get(c).value if c in char_states else " "
        for c in string.ascii_lowercase
    )
    return (guess + pad + letters + "\n"
            + verdicts_to_string(verdicts) + pad + codes)


@dataclass
class SessionState:
    """State of one game."""
    secret_word: str = ""
    guess_number: int = 1
    guesses: List[str] = field(default_factory=list)
    char_states: CharacterStates = field(default_factory=CharacterStates)
    won: bool = False
    finished: bool = False


class TerminalSession:
    """
    One interactive game in the terminal.

    The secret word comes from the store's generator; the session's own
    generator picks the closing insult. Player stats are updated when
    the game ends.
    """

    def __init__(
        self,
        store: WordStore,
        rng: Optional[random.Random] = None,
        max_guesses: int = 6,
        no_color: bool = False,
        player_stats: Optional[PlayerStats] = None,
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None
    ):
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.max_guesses = max_guesses
        self.no_color = no_color
        self.player_stats = player_stats
        self.input_fn = input_fn
        self.out = out or sys.stdout
        self.state = SessionState()

    def _print(self, text: str = ""):
        print(text, file=self.out)

    def check_guess(self, guess: str) -> List[Verdict]:
        """
        Evaluate a guess against the secret word.

        Raises:
            NotAListedWord: If guess is not in the word store
        """
        if not self.store.contains(guess):
            raise NotAListedWord(guess)
        return evaluate_guess(self.state.secret_word, guess)

    def _read_guess(self) -> Optional[str]:
        """Prompt until a non-blank line is read. None on end of input."""
        while True:
            try:
                line = self.input_fn(f"{self.state.guess_number}: ")
            except EOFError:
                return None
            guess = line.strip().lower()
            if guess:
                return guess

    def play(self, secret_word: Optional[str] = None) -> bool:
        """
        Play one game.

        Args:
            secret_word: Word to guess (default: random word from the store)

        Returns:
            True if the player won. A loss or end of input returns False.
        """
        if self.player_stats is not None:
            self.player_stats.load()
            self.player_stats.attempt()
            self.player_stats.save()

        self.state = SessionState(secret_word=secret_word or self.store.random_word())
        log.debug("Secret word is %s", self.state.secret_word)

        while not self.state.finished:
            guess = self._read_guess()
            if guess is None:
                log.debug("End of input; quitting")
                self._print()
                return False

            try:
                verdicts = self.check_guess(guess)
            except NotAListedWord:
                self._print("Not a word")
                continue

            self.state.guesses.append(guess)
            self.state.char_states.update(guess, verdicts)
            self._print(format_guess(guess, verdicts, self.state.char_states, self.no_color))

            if guess == self.state.secret_word:
                self._finish(won=True)
            elif self.state.guess_number >= self.max_guesses:
                self._finish(won=False)
            else:
                self.state.guess_number += 1

        return self.state.won

    def _finish(self, won: bool):
        self.state.finished = True
        self.state.won = won

        if won:
            self._print(win_exclamation(self.state.guess_number))
        else:
            self._print(lose_insult(self.rng))
            self._print(f"The word was: {self.state.secret_word}")

        if self.player_stats is None:
            return

        if won:
            self.player_stats.win(self.state.guess_number)
        else:
            self.player_stats.lose()
        self.player_stats.save()

        self._print()
        self.player_stats.report(
            self.out,
            no_color=self.no_color,
            guess_highlight=self.state.guess_number if won else 0
        )


def display_rules(word_size: int, max_guesses: int, no_color: bool = False, out: TextIO | None = None):
    out = out or sys.stdout
    if no_color:
        symbols = {v.name.lower(): f" {v.value} " for v in VERDICT_COLORS}
    else:
        symbols = {v.name.lower(): styled(f" {v.value} ", back) for v, back in VERDICT_COLORS.items()}
    print(RULES_TEXT.format(word_size=word_size, max_guesses=max_guesses, **symbols), file=out)


def display_version(version: str, no_color: bool = False, out: TextIO | None = None):
    out = out or sys.stdout
    if no_color:
        print(PROGRAM_NAME, file=out)
    else:
        print("".join(
            styled(f"{c:^3}", COLOR_MISSING if c in "md" else COLOR_MATCHED)
            for c in PROGRAM_NAME
        ), file=out)
    print(f" Version {version}", file=out)
