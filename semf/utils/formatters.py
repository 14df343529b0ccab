"""Formatting helpers for scores and answers."""

import math
from typing import Iterable

from semf.utils.constants import QuestionConstants


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round a value with halves going up, e.g. 2.5 -> 3 and 0.25 -> 0.3.

    Python's built-in round() uses banker's rounding, which would report
    12.5% as 12%; the report always rounds halves up.

    Args:
        value: Number to round
        decimals: Number of decimal places to keep

    Returns:
        float: Rounded value
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_percentage(part: float, whole: float) -> int:
    """Whole-number percentage of part over whole (0 when whole is 0)."""
    if not whole:
        return 0
    return int(round_half_up(part / whole * 100))


def format_ordering_answer(letters: Iterable[str]) -> str:
    """Serialize an ordered list of sentence letters the way it is graded.

    Args:
        letters: Sentence letters in the chosen order, e.g. ["B", "C", "D", "A"]

    Returns:
        str: Comma-space delimited sequence, e.g. "B, C, D, A"
    """
    return QuestionConstants.ORDERING_SEPARATOR.join(letter.strip() for letter in letters)
