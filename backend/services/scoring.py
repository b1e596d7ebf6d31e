"""ATS score blending."""

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() is banker's)."""
    return math.floor(value + 0.5)


def percent_of(part: int, whole: int) -> int:
    """Integer percentage, 0 when the denominator is 0."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def compute_ats_score(
    hard_percent: int,
    soft_percent: int,
    present_sections: int,
    total_sections: int,
) -> int:
    """Blend skill match and section coverage into a 0-100 score.

    Skills and sections each weigh half; the skills half is the mean of the
    hard and soft percentages.
    """
    skills_score = (hard_percent + soft_percent) / 2
    if total_sections > 0:
        sections_score = present_sections / total_sections * 100
    else:
        sections_score = 0.0
    score = round_half_up((skills_score + sections_score) / 2)
    return min(100, max(0, score))
