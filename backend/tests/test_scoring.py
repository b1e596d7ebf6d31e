import pytest

from services.scoring import compute_ats_score, percent_of, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, 0), (0.49, 0), (0.5, 1), (2.5, 3), (81.25, 81), (99.5, 100)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_percent_of():
    assert percent_of(3, 4) == 75
    assert percent_of(2, 3) == 67
    assert percent_of(0, 5) == 0


def test_percent_of_zero_denominator():
    assert percent_of(0, 0) == 0
    assert percent_of(3, 0) == 0


def test_compute_ats_score_blend():
    # skills (75 + 100) / 2 = 87.5, sections 6/8 = 75 -> 81.25
    assert compute_ats_score(75, 100, 6, 8) == 81


def test_compute_ats_score_bounds():
    assert compute_ats_score(100, 100, 8, 8) == 100
    assert compute_ats_score(0, 0, 0, 8) == 0
    assert compute_ats_score(100, 100, 0, 8) == 50


def test_compute_ats_score_no_sections():
    assert compute_ats_score(100, 100, 0, 0) == 50
