"""Canonical skill and section catalog used as matching targets."""

from pydantic import BaseModel


class SkillTaxonomy(BaseModel):
    """Read-only catalog of canonical names.

    Order is significant: matched/missing lists and section lists are
    reported in taxonomy order.
    """
    model_config = {"frozen": True}

    hard_skills: tuple[str, ...] = ()
    soft_skills: tuple[str, ...] = ()
    sections: tuple[str, ...] = ()

    @property
    def all_skills(self) -> tuple[str, ...]:
        return self.hard_skills + self.soft_skills

    def sizes(self) -> dict[str, int]:
        return {
            "hard_skills": len(self.hard_skills),
            "soft_skills": len(self.soft_skills),
            "sections": len(self.sections),
        }
