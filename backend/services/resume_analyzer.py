"""Report assembly: rule-based resume analysis pipeline.

Pipeline:
1. Canonical section detection (presence of section headers)
2. Skill matching against the taxonomy (hard + soft, resume vs JD)
3. ATS score blending (skills + section coverage)
4. Overview and recommendations (template rules)

Field extraction (``parse``) runs on the resume alone and is independent of
the job description.
"""

import logging

from config import AnalysisLimits, settings
from models.responses import AnalysisResult
from models.schemas.resume_data import ResumeData
from models.schemas.taxonomy import SkillTaxonomy
from services.field_extractor import parse_resume
from services.recommendations import build_overview, build_recommendations
from services.scoring import compute_ats_score
from services.section_parser import detect_sections
from services.skill_matcher import match_categories
from services.taxonomy import get_taxonomy

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """Stateless analysis engine bound to one taxonomy and one set of limits.

    Both collaborators are frozen, so a single instance can serve concurrent
    calls without coordination.
    """

    def __init__(
        self,
        taxonomy: SkillTaxonomy | None = None,
        limits: AnalysisLimits | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_taxonomy()
        self.limits = limits or settings.limits

    def parse(self, resume_text: str | None) -> ResumeData:
        """Extract structured fields from resume text."""
        return parse_resume(resume_text or "", self.taxonomy, self.limits)

    def analyze(self, resume_text: str | None, job_description: str | None) -> AnalysisResult:
        """Compare a resume against a job description."""
        resume_text = resume_text or ""
        job_description = job_description or ""

        # --- Layer 1: Section presence ---
        present_sections, missing_sections = detect_sections(resume_text, self.taxonomy)

        # --- Layer 2: Skill matching ---
        hard, soft = match_categories(resume_text, job_description, self.taxonomy)

        # --- Layer 3: Score ---
        ats_score = compute_ats_score(
            hard.percent,
            soft.percent,
            len(present_sections),
            len(self.taxonomy.sections),
        )
        logger.debug(
            "ATS score %d (hard %d%%, soft %d%%, sections %d/%d)",
            ats_score,
            hard.percent,
            soft.percent,
            len(present_sections),
            len(self.taxonomy.sections),
        )

        # --- Layer 4: Narrative ---
        overview = build_overview(ats_score, hard, soft, missing_sections, self.limits)
        recommendations = build_recommendations(hard, soft, missing_sections, self.limits)

        return AnalysisResult(
            ats_score=ats_score,
            overview=overview,
            hard_skills_match=hard,
            soft_skills_match=soft,
            missing_sections=missing_sections,
            present_sections=present_sections,
            recommendations=recommendations,
        )


_default_analyzer: ResumeAnalyzer | None = None


def get_analyzer() -> ResumeAnalyzer:
    """Process-wide analyzer using the default taxonomy and configured limits."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = ResumeAnalyzer()
    return _default_analyzer


def analyze(resume_text: str, job_description: str) -> AnalysisResult:
    return get_analyzer().analyze(resume_text, job_description)


def parse(resume_text: str) -> ResumeData:
    return get_analyzer().parse(resume_text)
