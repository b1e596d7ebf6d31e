import os

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class AnalysisLimits(BaseModel):
    """Product-tuning constants for extraction and recommendations."""

    model_config = {"frozen": True}

    max_entries: int = 5  # experience, education, projects, certifications
    experience_description_chars: int = 200
    summary_chars: int = 300
    fallback_summary_chars: int = 200
    project_description_chars: int = 150
    min_block_chars: int = 10

    overview_missing_skills: int = 3
    overview_missing_sections: int = 2
    recommendation_missing_skills: int = 3
    max_recommendations: int = Field(5, ge=1, le=5)

    weak_skills_percent: int = 60  # below this, ask for more skills
    strong_skills_percent: int = 70  # at or above, ask to quantify achievements


class Settings(BaseSettings):
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000
    rate_limit: str = "30/minute"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    limits: AnalysisLimits = AnalysisLimits()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
