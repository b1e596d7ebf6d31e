"""Shared test fixtures."""

import pytest

from config import AnalysisLimits
from services.resume_analyzer import ResumeAnalyzer
from services.taxonomy import DEFAULT_TAXONOMY


SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567

Professional Summary
Backend engineer focused on Python services and clear communication with product teams.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
Built REST API services on AWS with Docker
Mentored four engineers

Software Engineer - StartupXYZ
2018 - 2021
Developed data pipelines in Python and PostgreSQL

Education
B.S. in Computer Science
State University
2018

Skills
Python, Django, PostgreSQL, Docker, AWS, Git, Leadership

Certifications
AWS Certified Solutions Architect
PMP Certification

Projects
Resume Parser: Extracts structured fields from plain text resumes
Tech Stack: Python, FastAPI, Docker
Budget Tracker: Personal finance dashboard
Built with React, Firebase
"""

SAMPLE_JD = """Senior Backend Engineer
We need strong Python, SQL and Docker skills, plus Kubernetes experience.
Leadership and communication are essential.
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def limits() -> AnalysisLimits:
    return AnalysisLimits()


@pytest.fixture
def taxonomy():
    return DEFAULT_TAXONOMY


@pytest.fixture
def analyzer(taxonomy, limits) -> ResumeAnalyzer:
    return ResumeAnalyzer(taxonomy=taxonomy, limits=limits)
