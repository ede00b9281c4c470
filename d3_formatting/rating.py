"""
Score ratings

Maps an audit score and display mode to the rating label renderers use for
colouring.
"""

from enum import Enum
from typing import Optional

from d1_normalizer.types import ScoreDisplayMode


class Rating(str, Enum):
    """Rating labels"""

    PASS = "pass"
    AVERAGE = "average"
    FAIL = "fail"
    ERROR = "error"


PASS_THRESHOLD = 0.9
AVERAGE_THRESHOLD = 0.5

ALWAYS_PASSING_MODES = {ScoreDisplayMode.MANUAL.value, ScoreDisplayMode.NOT_APPLICABLE.value}


def calculate_rating(score: Optional[float], score_display_mode: Optional[str] = None) -> str:
    """Get the rating label for a score between 0 and 1"""
    if score_display_mode in ALWAYS_PASSING_MODES:
        return Rating.PASS.value
    if score_display_mode == ScoreDisplayMode.ERROR.value:
        return Rating.ERROR.value
    if score is None:
        return Rating.FAIL.value

    if score >= PASS_THRESHOLD:
        return Rating.PASS.value
    if score >= AVERAGE_THRESHOLD:
        return Rating.AVERAGE.value
    return Rating.FAIL.value
