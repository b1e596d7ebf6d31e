"""Template-based overview and recommendation generation.

Deterministic rules engine: every message is derived from the score, the
skill matches and the missing sections. No state is kept between calls.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from config import AnalysisLimits
from models.responses import SkillMatch

logger = logging.getLogger(__name__)

FALLBACK_RECOMMENDATION = (
    "Your resume looks good! Focus on highlighting key achievements with metrics."
)


@dataclass(frozen=True)
class RecommendationContext:
    hard: SkillMatch
    soft: SkillMatch
    missing_sections: list[str]
    limits: AnalysisLimits


def score_band(score: int) -> str:
    if score < 40:
        return "Needs Improvement"
    if score < 60:
        return "Good"
    if score < 80:
        return "Very Good"
    return "Excellent"


def build_overview(
    ats_score: int,
    hard: SkillMatch,
    soft: SkillMatch,
    missing_sections: list[str],
    limits: AnalysisLimits,
) -> str:
    """Generate the narrative paragraph shown above the report."""
    parts = [
        f"Your resume has an ATS compatibility score of {ats_score}/100 ({score_band(ats_score)}).",
        f"You have {hard.percent}% match on required technical skills "
        f"and {soft.percent}% on soft skills.",
    ]

    if hard.missing_skills:
        top = hard.missing_skills[: limits.overview_missing_skills]
        parts.append(f"Key missing skills: {', '.join(top)}.")

    if missing_sections:
        top = missing_sections[: limits.overview_missing_sections]
        parts.append(f"Consider adding the following sections: {', '.join(top)}.")
    else:
        parts.append("Your resume covers all important sections.")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Recommendation rules, evaluated in order
# ---------------------------------------------------------------------------

def _weak_hard_skills(ctx: RecommendationContext) -> str | None:
    if ctx.hard.percent < ctx.limits.weak_skills_percent:
        top = ctx.hard.missing_skills[: ctx.limits.recommendation_missing_skills]
        return f"Add more technical skills. Missing: {', '.join(top)}"
    return None


def _weak_soft_skills(ctx: RecommendationContext) -> str | None:
    if ctx.soft.percent < ctx.limits.weak_skills_percent:
        return "Highlight soft skills like leadership, communication, and problem-solving"
    return None


def _missing_summary(ctx: RecommendationContext) -> str | None:
    if "Professional Summary" in ctx.missing_sections:
        return "Add a professional summary at the top of your resume"
    return None


def _missing_certifications(ctx: RecommendationContext) -> str | None:
    if "Certifications" in ctx.missing_sections:
        return "Include any relevant certifications or courses"
    return None


def _missing_projects(ctx: RecommendationContext) -> str | None:
    if "Projects" in ctx.missing_sections:
        return "Add a projects section showcasing your best work"
    return None


def _strong_hard_skills(ctx: RecommendationContext) -> str | None:
    if ctx.hard.percent >= ctx.limits.strong_skills_percent:
        return "Your technical skills are strong - focus on quantifying your achievements"
    return None


RECOMMENDATION_RULES: list[Callable[[RecommendationContext], str | None]] = [
    _weak_hard_skills,
    _weak_soft_skills,
    _missing_summary,
    _missing_certifications,
    _missing_projects,
    _strong_hard_skills,
]


def build_recommendations(
    hard: SkillMatch,
    soft: SkillMatch,
    missing_sections: list[str],
    limits: AnalysisLimits,
) -> list[str]:
    """Generate between one and ``limits.max_recommendations`` suggestions."""
    ctx = RecommendationContext(
        hard=hard, soft=soft, missing_sections=missing_sections, limits=limits
    )
    recs: list[str] = []
    for rule in RECOMMENDATION_RULES:
        if len(recs) >= limits.max_recommendations:
            break
        message = rule(ctx)
        if message:
            recs.append(message)

    if not recs:
        recs.append(FALLBACK_RECOMMENDATION)
    logger.debug("Generated %d recommendations", len(recs))
    return recs
