from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Field names on the wire are camelCase; Python code uses snake_case.
_WIRE_CONFIG = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class SkillMatch(BaseModel):
    """Match summary for one skill category (hard or soft)."""
    model_config = _WIRE_CONFIG

    present: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    percent: int = Field(100, ge=0, le=100)
    present_skills: list[str] = []
    missing_skills: list[str] = []


class AnalysisResult(BaseModel):
    model_config = _WIRE_CONFIG

    ats_score: int = Field(0, ge=0, le=100)
    overview: str = ""
    hard_skills_match: SkillMatch = SkillMatch()
    soft_skills_match: SkillMatch = SkillMatch()
    missing_sections: list[str] = []
    present_sections: list[str] = []
    recommendations: list[str] = Field(default_factory=list, max_length=5)


class HealthResponse(BaseModel):
    status: str = "ok"
    taxonomy: dict[str, int] = {}
