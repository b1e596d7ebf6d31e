"""Default canonical skill and section catalog.

Built once at import time. SkillTaxonomy is frozen, so the same instance is
shared by every analysis call.
"""

from models.schemas.taxonomy import SkillTaxonomy

HARD_SKILLS: tuple[str, ...] = (
    # Frontend
    "React", "Angular", "Vue.js", "TypeScript", "JavaScript", "HTML", "CSS",
    "Tailwind CSS", "Next.js", "Redux",
    # Backend
    "Node.js", "Express", "Python", "Django", "FastAPI", "Java", "C#", ".NET",
    "Go", "Rust", "PHP", "Laravel",
    # Databases
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "Firebase", "DynamoDB", "SQL",
    "NoSQL",
    # Cloud & DevOps
    "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes", "CI/CD", "Jenkins",
    "GitHub Actions", "EC2", "S3", "Lambda", "Serverless",
    # Tools & version control
    "Git", "GitHub", "GitLab", "Bitbucket", "Postman", "Jira", "Linux",
    "Windows Server",
    # Other tech
    "REST API", "GraphQL", "WebSocket", "Microservices", "AI",
    "Machine Learning", "TensorFlow", "PyTorch", "NLTK",
)

SOFT_SKILLS: tuple[str, ...] = (
    "Communication", "Teamwork", "Leadership", "Problem Solving",
    "Time Management", "Attention to Detail", "Collaboration", "Adaptability",
    "Critical Thinking", "Decision Making", "Creativity", "Analytical Skills",
    "Organization", "Accountability", "Interpersonal Skills", "Mentoring",
    "Project Management", "Documentation",
)

RESUME_SECTIONS: tuple[str, ...] = (
    "Contact Information",
    "Professional Summary",
    "Experience",
    "Education",
    "Skills",
    "Certifications",
    "Projects",
    "Languages",
)

DEFAULT_TAXONOMY = SkillTaxonomy(
    hard_skills=HARD_SKILLS,
    soft_skills=SOFT_SKILLS,
    sections=RESUME_SECTIONS,
)


def get_taxonomy() -> SkillTaxonomy:
    return DEFAULT_TAXONOMY
