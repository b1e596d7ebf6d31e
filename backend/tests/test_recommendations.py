import pytest

from config import AnalysisLimits
from models.responses import SkillMatch
from services.recommendations import (
    FALLBACK_RECOMMENDATION,
    build_overview,
    build_recommendations,
    score_band,
)


def _match(percent: int, missing: list[str] | None = None) -> SkillMatch:
    missing = missing or []
    return SkillMatch(present=0, total=len(missing) or 1, percent=percent, missing_skills=missing)


@pytest.mark.parametrize(
    "score, band",
    [
        (0, "Needs Improvement"),
        (39, "Needs Improvement"),
        (40, "Good"),
        (59, "Good"),
        (60, "Very Good"),
        (79, "Very Good"),
        (80, "Excellent"),
        (100, "Excellent"),
    ],
)
def test_score_band(score, band):
    assert score_band(score) == band


def test_build_overview_full(limits):
    hard = _match(25, ["SQL", "Docker", "Kubernetes", "Go"])
    overview = build_overview(
        45, hard, _match(50), ["Projects", "Languages", "Certifications"], limits
    )
    assert overview.startswith("Your resume has an ATS compatibility score of 45/100 (Good).")
    assert "25% match on required technical skills and 50% on soft skills" in overview
    assert "Key missing skills: SQL, Docker, Kubernetes." in overview
    assert "Kubernetes, Go" not in overview
    assert overview.endswith("Consider adding the following sections: Projects, Languages.")


def test_build_overview_nothing_missing(limits):
    overview = build_overview(90, _match(100), _match(100), [], limits)
    assert "Key missing skills" not in overview
    assert overview.endswith("Your resume covers all important sections.")


def test_build_recommendations_rule_order(limits):
    hard = _match(0, ["Python", "Docker", "SQL", "Go"])
    recs = build_recommendations(
        hard, _match(0), ["Professional Summary", "Certifications", "Projects"], limits
    )
    assert recs == [
        "Add more technical skills. Missing: Python, Docker, SQL",
        "Highlight soft skills like leadership, communication, and problem-solving",
        "Add a professional summary at the top of your resume",
        "Include any relevant certifications or courses",
        "Add a projects section showcasing your best work",
    ]


def test_build_recommendations_strong_skills(limits):
    recs = build_recommendations(_match(80), _match(100), [], limits)
    assert recs == [
        "Your technical skills are strong - focus on quantifying your achievements"
    ]


def test_build_recommendations_fallback(limits):
    # 65% is neither weak nor strong and no sections are missing
    recs = build_recommendations(_match(65), _match(100), ["Languages"], limits)
    assert recs == [FALLBACK_RECOMMENDATION]


def test_build_recommendations_respects_limit():
    limits = AnalysisLimits(max_recommendations=2)
    recs = build_recommendations(
        _match(0, ["Python"]), _match(0), ["Professional Summary", "Projects"], limits
    )
    assert len(recs) == 2
    assert recs[0].startswith("Add more technical skills")


def test_build_recommendations_custom_thresholds():
    limits = AnalysisLimits(weak_skills_percent=90, strong_skills_percent=95)
    recs = build_recommendations(_match(80, ["Go"]), _match(100), [], limits)
    assert recs == ["Add more technical skills. Missing: Go"]
