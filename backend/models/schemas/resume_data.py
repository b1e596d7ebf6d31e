"""Structured fields extracted from a resume."""

from pydantic import BaseModel

NOT_FOUND = "Not Found"


class ExperienceItem(BaseModel):
    """A single work experience entry."""
    model_config = {"frozen": True}

    title: str = ""
    company: str = ""
    duration: str = ""  # "YYYY - YYYY" or "YYYY - present", empty if unknown
    description: str = ""


class EducationItem(BaseModel):
    """A single education entry."""
    model_config = {"frozen": True}

    degree: str = ""
    institution: str = NOT_FOUND
    year: str = NOT_FOUND
    details: str | None = None  # field of study


class ProjectItem(BaseModel):
    """A single project entry."""
    model_config = {"frozen": True}

    name: str = ""
    description: str = ""
    technologies: list[str] = []


class ResumeData(BaseModel):
    """Everything the field extractor pulls out of one resume.

    Scalar fields fall back to NOT_FOUND; list fields fall back to empty.
    """
    model_config = {"frozen": True}

    name: str = NOT_FOUND
    email: str = NOT_FOUND
    phone: str = NOT_FOUND
    experience: list[ExperienceItem] = []
    education: list[EducationItem] = []
    skills: list[str] = []
    summary: str = ""
    certifications: list[str] = []
    projects: list[ProjectItem] = []
