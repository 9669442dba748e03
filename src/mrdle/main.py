"""
Main entry point for mrdle.

Parses the command line and dispatches to play, list, rules, version
and statistics displays.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from . import __version__
from .config import load_settings
from .dictionary import get_word_store
from .errors import MrdleError
from .player_stats import PlayerStats
from .solver import list_words
from .stats import LetterStats
from .ui import PROGRAM_NAME, TerminalSession, display_rules, display_version
from .word_list import DEFAULT_WORD_SIZE

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = -1


class CommandLineError(Exception):
    """Raised instead of exiting when the command line can't be parsed."""


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise CommandLineError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=PROGRAM_NAME,
        description="A terminal-based Wordle clone and solver.",
    )
    parser.add_argument("--play", action="store_true",
                        help="play a game (default)")
    parser.add_argument("--list", action="store_true",
                        help="list words, filtered by any --hint")
    parser.add_argument("--rules", action="store_true",
                        help="display the rules")
    parser.add_argument("--player-stats", action="store_true",
                        help="display player statistics")
    parser.add_argument("--word-stats", action="store_true",
                        help="display letter statistics for the word list")
    parser.add_argument("--secret-word", metavar="WORD",
                        help="play with this secret word instead of a random one")
    parser.add_argument("--word-file", metavar="FILE",
                        help="word list file, one word per line (default: built-in list)")
    parser.add_argument("--hint", nargs=2, action="append", default=[],
                        metavar=("WORD", "VERDICT"),
                        help="a previous guess and its result, e.g. crane '!~xx!' "
                             "(repeatable, implies --list)")
    parser.add_argument("--player", metavar="NAME",
                        help="player name for statistics")
    parser.add_argument("--max-guesses", type=int, metavar="N",
                        help="guesses allowed per game")
    parser.add_argument("--config", metavar="FILE",
                        help="settings file (default: $MRDLE_CONFIG or ~/.mrdle/config.json)")
    parser.add_argument("--no-color", action="store_true",
                        help="don't use colorized output")
    parser.add_argument("--verbose", action="store_true",
                        help="log debug messages")
    parser.add_argument("--version", action="store_true",
                        help="display version information")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and normalize the command line.

    Raises:
        CommandLineError: On unknown or malformed arguments
    """
    args = build_parser().parse_args(argv)

    if args.max_guesses is not None and args.max_guesses < 1:
        raise CommandLineError(f"--max-guesses must be positive: {args.max_guesses}")

    # Convert any input words to lower case
    if args.secret_word:
        args.secret_word = args.secret_word.strip().lower()
    args.hint = [(word.lower(), verdict) for word, verdict in args.hint]

    # Any --hint implies --list
    if args.hint:
        args.list = True

    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run mrdle. Returns the process exit code."""
    just_fix_windows_console()

    try:
        args = parse_args(argv)
    except CommandLineError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=f"{PROGRAM_NAME}: %(message)s",
    )

    settings = load_settings(args.config)
    no_color = args.no_color or settings.no_color
    max_guesses = args.max_guesses or settings.max_guesses
    player = args.player if args.player is not None else settings.player
    word_file = args.word_file or settings.word_file

    if args.version:
        display_version(__version__, no_color)
        return EXIT_OK

    try:
        rng = random.Random()
        store = get_word_store(word_file, rng)
        # Rules and player stats don't need any words
        word_size = store.word_size() or DEFAULT_WORD_SIZE

        if args.rules:
            display_rules(word_size, max_guesses, no_color)
            return EXIT_OK

        player_stats = PlayerStats(player, word_size, max_guesses, settings.data_dir)

        if args.player_stats:
            player_stats.load()
            player_stats.report(no_color=no_color)
            return EXIT_OK

        if not store.count():
            # Load failures have been logged already
            log.error("No words to play with")
            return EXIT_FAILURE

        if args.word_stats:
            LetterStats(store.words).report()
            return EXIT_OK
        if args.list:
            return list_words(store, args.hint)

        if args.secret_word and len(args.secret_word) != store.word_size():
            log.error("Invalid secret word length: %s (expected %d letters)",
                      args.secret_word, store.word_size())
            return EXIT_FAILURE

        session = TerminalSession(
            store,
            rng,
            max_guesses=max_guesses,
            no_color=no_color,
            player_stats=player_stats,
        )
        session.play(args.secret_word)
    except MrdleError as e:
        log.error("Well this is embarrassing: %s", e)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
