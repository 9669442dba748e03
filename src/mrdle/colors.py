"""
Terminal colors for mrdle.

Maps verdicts to colorama background colors.
"""

from colorama import Back, Fore, Style

from .feedback import Verdict

COLOR_MATCHED = Back.GREEN
COLOR_MISLAID = Back.YELLOW
COLOR_MISSING = Back.LIGHTBLACK_EX

VERDICT_COLORS = {
    Verdict.MATCHED: COLOR_MATCHED,
    Verdict.MISLAID: COLOR_MISLAID,
    Verdict.MISSING: COLOR_MISSING,
}


def styled(text: str, back: str) -> str:
    """White text on the given background, reset afterwards."""
    return f"{Fore.WHITE}{back}{text}{Style.RESET_ALL}"


def verdict_tile(letter: str, verdict: Verdict) -> str:
    """A letter centered in a three-column tile colored by verdict."""
    back = VERDICT_COLORS.get(verdict, Back.RESET)
    return styled(f"{letter:^3}", back)
