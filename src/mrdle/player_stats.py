"""
Player statistics for mrdle.

Per-player counters kept in a small text file, one value per line:
play count, win count, current streak, max streak, last win (epoch
seconds), then one line per guess-count bucket.
"""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from .colors import COLOR_MATCHED, COLOR_MISSING, styled
from .config import DEFAULT_DATA_DIR
from .errors import StatsIOFailure

log = logging.getLogger(__name__)

# Longest bar in the guess distribution
MAX_BAR = 50


class PlayerStats:
    """
    Win/loss counters for one player and one game configuration.

    Different word sizes and guess limits are kept in separate files.
    Load and save are best effort: failures are logged and reported
    through the return value, never raised.
    """

    def __init__(
        self,
        name: str = "",
        word_size: int = 5,
        max_guesses: int = 6,
        data_dir: Optional[str | Path] = None
    ):
        self.name = name
        self.word_size = word_size
        self.max_guesses = max_guesses
        self.data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR

        self.play_count = 0
        self.win_count = 0
        self.cur_streak = 0
        self.max_streak = 0
        self.last_win = 0
        # Index N holds the number of wins in N+1 guesses
        self.guesses: List[int] = [0] * max_guesses

    def pathname(self) -> Path:
        """Stats file for this player, word size and guess limit."""
        player_dir = self.data_dir / (self.name or "default")
        return player_dir / f"stats_{self.word_size}x{self.max_guesses}.txt"

    def load(self) -> bool:
        """Load stats from file. Returns False if nothing could be loaded."""
        try:
            self._read()
        except StatsIOFailure as e:
            log.debug("%s", e)
            return False
        return True

    def save(self) -> bool:
        """Save stats to file. Returns False on failure."""
        try:
            self._write()
        except StatsIOFailure as e:
            log.debug("%s", e)
            return False
        return True

    def _read(self):
        path = self.pathname()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                values = [int(line) for line in f if line.strip()]
        except (OSError, ValueError) as e:
            raise StatsIOFailure(f"Failed to load stats from {path}: {e}") from e

        if len(values) < 5 + self.max_guesses:
            raise StatsIOFailure(f"Truncated stats file: {path}")

        (self.play_count, self.win_count, self.cur_streak,
         self.max_streak, self.last_win) = values[:5]
        self.guesses = values[5:5 + self.max_guesses]

    def _write(self):
        path = self.pathname()
        values = [self.play_count, self.win_count, self.cur_streak,
                  self.max_streak, self.last_win] + self.guesses
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.writelines(f"{value}\n" for value in values)
        except OSError as e:
            raise StatsIOFailure(f"Failed to save stats to {path}: {e}") from e

    def attempt(self):
        """Count a new game."""
        self.play_count += 1

    def win(self, guesses: int):
        """Record a win that took the given number of guesses."""
        self.last_win = int(time.time())
        self.win_count += 1
        self.cur_streak += 1
        self.max_streak = max(self.max_streak, self.cur_streak)

        if 0 < guesses <= len(self.guesses):
            self.guesses[guesses - 1] += 1

    def lose(self):
        """Record a loss."""
        self.cur_streak = 0

    def win_percent(self) -> int:
        if not self.play_count:
            return 0
        return int(self.win_count / self.play_count * 100 + 0.5)

    def report(self, out: TextIO | None = None, no_color: bool = False, guess_highlight: int = 0):
        """
        Print the stats.

        Args:
            out: Output stream (default: stdout)
            no_color: Plain bars instead of colored ones
            guess_highlight: Guess count bucket to highlight (1-based, 0 = none)
        """
        out = out or sys.stdout
        fw = 15  # field width

        print(f"{'Played:':<{fw}} {self.play_count}", file=out)
        if not self.play_count:
            return

        print(f"{'Win %:':<{fw}} {self.win_percent()}", file=out)
        if self.win_count:
            last_win = datetime.fromtimestamp(self.last_win).strftime("%Y-%m-%d %H:%M:%S")
        else:
            last_win = "Never. So sad."
        print(f"{'Last win:':<{fw}} {last_win}", file=out)
        print(f"{'Current Streak:':<{fw}} {self.cur_streak}", file=out)
        print(f"{'Max Streak:':<{fw}} {self.max_streak}", file=out)

        print("Guess distribution:", file=out)

        # Bar length is proportional to the largest bucket
        max_item = max(self.guesses, default=0)
        for idx, count in enumerate(self.guesses, start=1):
            n = int(count / max_item * MAX_BAR) if max_item else 0
            bar = " " * (n + 1) + f"{count} "
            if not no_color:
                bar = styled(bar, COLOR_MATCHED if idx == guess_highlight else COLOR_MISSING)
            print(f"{idx} {bar}", file=out)
