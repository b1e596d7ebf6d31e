"""Internal data contracts shared between engine stages."""

from models.schemas.resume_data import (
    NOT_FOUND,
    EducationItem,
    ExperienceItem,
    ProjectItem,
    ResumeData,
)
from models.schemas.taxonomy import SkillTaxonomy

__all__ = [
    "NOT_FOUND",
    "EducationItem",
    "ExperienceItem",
    "ProjectItem",
    "ResumeData",
    "SkillTaxonomy",
]
