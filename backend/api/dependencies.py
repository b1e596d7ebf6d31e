"""Shared dependencies for API routes."""

from services.resume_analyzer import ResumeAnalyzer, get_analyzer


def get_resume_analyzer() -> ResumeAnalyzer:
    return get_analyzer()
