"""Taxonomy-based skill matching between a resume and a job description."""

from models.responses import SkillMatch
from models.schemas.taxonomy import SkillTaxonomy
from services.scoring import percent_of


def mentioned_skills(text: str, skills: tuple[str, ...]) -> list[str]:
    """Skills whose lowercase form occurs in the text, in taxonomy order."""
    text_lower = text.lower()
    return [s for s in skills if s.lower() in text_lower]


def match_skills(resume_text: str, job_text: str, skills: tuple[str, ...]) -> SkillMatch:
    """Compare one skill category.

    When the job description requires nothing from the category the match
    is vacuously complete (percent 100) and ``total`` reports the size of
    the category instead of zero.
    """
    in_resume = set(mentioned_skills(resume_text, skills))
    required = mentioned_skills(job_text, skills)

    matched = [s for s in required if s in in_resume]
    missing = [s for s in required if s not in in_resume]

    if required:
        percent = percent_of(len(matched), len(required))
    else:
        percent = 100

    return SkillMatch(
        present=len(matched),
        total=len(required) or len(skills),
        percent=percent,
        present_skills=matched,
        missing_skills=missing,
    )


def match_categories(
    resume_text: str, job_text: str, taxonomy: SkillTaxonomy
) -> tuple[SkillMatch, SkillMatch]:
    """Return (hard, soft) skill matches."""
    hard = match_skills(resume_text, job_text, taxonomy.hard_skills)
    soft = match_skills(resume_text, job_text, taxonomy.soft_skills)
    return hard, soft
