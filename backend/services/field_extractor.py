"""Heuristic field extraction from plain-text resumes.

Scalar fields (name, email, phone) are driven by ordered rule lists: each
rule is a (pattern, extractor) pair, the first pattern that matches wins and
NOT_FOUND is returned when none do. List fields are built per section from
the output of the section parser and capped by AnalysisLimits.
"""

import logging
import re
from typing import Callable

from config import AnalysisLimits
from models.schemas.resume_data import (
    NOT_FOUND,
    EducationItem,
    ExperienceItem,
    ProjectItem,
    ResumeData,
)
from models.schemas.taxonomy import SkillTaxonomy
from services.section_parser import find_section, segment_sections

logger = logging.getLogger(__name__)

Rule = tuple[re.Pattern, Callable[[re.Match], str]]


def _group(index: int) -> Callable[[re.Match], str]:
    return lambda m: m.group(index).strip()


def _first_match(rules: list[Rule], text: str) -> str:
    for pattern, extract in rules:
        match = pattern.search(text)
        if match:
            value = extract(match)
            if value:
                return value
    return NOT_FOUND


# ---------------------------------------------------------------------------
# Contact fields
# ---------------------------------------------------------------------------

NAME_RULES: list[Rule] = [
    # "Jane Doe" at the start of a line
    (re.compile(r"^([A-Z][a-z]+[ \t]+[A-Z][a-z]+)", re.MULTILINE), _group(1)),
    # "Name: Jane Doe"
    (re.compile(r"Name[ \t]*:[ \t]*([A-Z][A-Za-z \t]+)", re.IGNORECASE), _group(1)),
    # "JANE DOE" at the start of a line
    (re.compile(r"^([A-Z]{2,}[A-Z \t]{3,})", re.MULTILINE), _group(1)),
]

EMAIL_RULES: list[Rule] = [
    (re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z0-9_-]+"), _group(0)),
]

PHONE_RULES: list[Rule] = [
    # (555) 123-4567, 555.123.4567, +1 555 123 4567
    (
        re.compile(r"(?:\+?\d{1,3}[-. \t]?)?\(?\d{3}\)?[-. \t]?\d{3}[-. \t]?\d{4}"),
        _group(0),
    ),
    # +44 2071234567
    (re.compile(r"\+\d{1,3}[-. \t]?\d{1,14}"), _group(0)),
]


def extract_name(text: str) -> str:
    return _first_match(NAME_RULES, text)


def extract_email(text: str) -> str:
    return _first_match(EMAIL_RULES, text)


def extract_phone(text: str) -> str:
    return _first_match(PHONE_RULES, text)


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

DURATION_RE = re.compile(r"(\d{4})\s*[-–]\s*(\d{4}|present)", re.IGNORECASE)
_DATE_ONLY_RE = re.compile(
    r"^[\s(]*\d{4}\s*[-–]\s*(?:\d{4}|present)[\s)]*$", re.IGNORECASE
)
_YEAR_START_RE = re.compile(r"^\s*\d{4}\b")

# Lines that open a new experience entry
ENTRY_START_PATTERNS: list[re.Pattern] = [
    re.compile(r"^[A-Z][^\n]*?\s[-–•]\s"),  # "Engineer - Acme"
    re.compile(r"\w+\s*\|\s*\w+"),  # "Engineer | Acme"
]

TITLE_SEPARATOR_RE = re.compile(r"\s+at\s+|\s*[@•–|]\s*|\s+-\s+")


def _is_date_only(line: str) -> bool:
    return bool(_DATE_ONLY_RE.match(line))


def _split_experience_blocks(section: str) -> list[list[str]]:
    """Group section lines into entries.

    A title-looking line opens a new entry once the current one has a
    non-date line. A line starting with a year opens a new entry only when
    the current one already has a body, so "Title\\n2019 - 2021" stays
    together while year-first layouts still split.
    """
    blocks: list[list[str]] = []
    current: list[str] = []

    for raw in section.split("\n"):
        line = raw.strip()
        if not line:
            continue

        has_title = any(not _is_date_only(l) for l in current)
        if _YEAR_START_RE.match(line):
            starts_entry = len(current) >= 2
        else:
            starts_entry = has_title and any(p.search(line) for p in ENTRY_START_PATTERNS)

        if starts_entry and current:
            blocks.append(current)
            current = []
        current.append(line)

    if current:
        blocks.append(current)
    return blocks


def _format_duration(match: re.Match) -> str:
    end = match.group(2)
    if end.lower() == "present":
        end = "present"
    return f"{match.group(1)} - {end}"


def _parse_experience_block(lines: list[str], limits: AnalysisLimits) -> ExperienceItem | None:
    block = "\n".join(lines)
    if len(block) < limits.min_block_chars:
        return None

    body = [l for l in lines if not _is_date_only(l)]
    if not body:
        return None
    first_line, rest = body[0], body[1:]

    parts = TITLE_SEPARATOR_RE.split(first_line, maxsplit=1)
    title = parts[0].strip()
    company = parts[1].strip() if len(parts) > 1 else ""

    duration_match = DURATION_RE.search(block)
    duration = _format_duration(duration_match) if duration_match else ""
    if duration_match and company:
        # "Engineer | Acme | 2019 - 2021" leaves the dates on the company
        company = DURATION_RE.sub("", company).strip(" \t|,•–-()")

    if not title:
        return None

    description = " ".join(rest)[: limits.experience_description_chars]
    return ExperienceItem(
        title=title,
        company=company,
        duration=duration,
        description=description,
    )


def extract_experience(section: str, limits: AnalysisLimits) -> list[ExperienceItem]:
    items: list[ExperienceItem] = []
    for lines in _split_experience_blocks(section):
        item = _parse_experience_block(lines, limits)
        if item is not None:
            items.append(item)
    return items[: limits.max_entries]


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

DEGREE_PATTERNS: list[re.Pattern] = [
    # Abbreviations; case-sensitive so "ma" inside words is not a degree
    re.compile(
        r"\b(?:B\.?S\.?|B\.?A\.?|M\.?S\.?|M\.?A\.?|Ph\.?D\.?|B\.?Tech|M\.?Tech|MBA)"
        r"(?![A-Za-z])[ \t]*(?:in[ \t]+|of[ \t]+)?([A-Za-z \t]*)"
    ),
    re.compile(
        r"\b(?:Bachelor|Master|Doctor|Associate|Diploma)(?:'?s)?\b"
        r"[ \t]*(?:of[ \t]+|in[ \t]+)?([A-Za-z \t]*)",
        re.IGNORECASE,
    ),
]

GRAD_YEAR_RE = re.compile(r"\b(20\d{2})\b")


def _institution_after(lines: list[str], degree: str) -> str:
    for i, line in enumerate(lines):
        if degree in line:
            for following in lines[i + 1:]:
                if following.strip():
                    return following.strip()
            break
    return NOT_FOUND


def extract_education(section: str, limits: AnalysisLimits) -> list[EducationItem]:
    """One entry per degree mention.

    Overlapping patterns may report the same degree twice; that is kept.
    """
    if not section:
        return []

    lines = section.split("\n")
    year_match = GRAD_YEAR_RE.search(section)
    year = year_match.group(1) if year_match else NOT_FOUND

    items: list[EducationItem] = []
    for pattern in DEGREE_PATTERNS:
        for match in pattern.finditer(section):
            degree = match.group(0).strip()
            field = match.group(1).strip()
            items.append(
                EducationItem(
                    degree=degree,
                    institution=_institution_after(lines, degree),
                    year=year,
                    details=field or "General",
                )
            )
    return items[: limits.max_entries]


# ---------------------------------------------------------------------------
# Skills, summary, certifications
# ---------------------------------------------------------------------------

def extract_skills(text: str, taxonomy: SkillTaxonomy) -> list[str]:
    """Every taxonomy skill mentioned anywhere in the text."""
    text_lower = text.lower()
    found = [s for s in taxonomy.all_skills if s.lower() in text_lower]
    return list(dict.fromkeys(found))


def extract_summary(text: str, limits: AnalysisLimits) -> str:
    summary = find_section(text, "summary")
    if summary:
        return summary[: limits.summary_chars]
    first_paragraph = re.split(r"\n[ \t]*\n", text.strip(), maxsplit=1)[0]
    return first_paragraph.strip()[: limits.fallback_summary_chars]


CERTIFICATION_PATTERNS: list[re.Pattern] = [
    re.compile(r"\bAWS[ \t]+(?:Certified[ \t]+)?[A-Za-z \t]+", re.IGNORECASE),
    re.compile(r"\bGoogle[ \t]+(?:Cloud[ \t]+)?Certified[ \t]+[A-Za-z \t]+", re.IGNORECASE),
    re.compile(r"(?:Certified[ \t]+)?[A-Z][A-Za-z \t]+?[ \t]+Certification\b"),
    re.compile(r"[A-Z]{2,}[ \t]+\(Certified\)"),
]


def extract_certifications(section: str, limits: AnalysisLimits) -> list[str]:
    found: list[str] = []
    for pattern in CERTIFICATION_PATTERNS:
        for match in pattern.finditer(section):
            found.append(match.group(0).strip())
    return list(dict.fromkeys(found))[: limits.max_entries]


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

PROJECT_START_RE = re.compile(r"^(?:[A-Z][A-Za-z ]+:|\d+[.)]|•|-)")
_PROJECT_LABEL_RE = re.compile(r"^[\s\d•.)*-]*([^:]+?)\s*:\s*(.*)$")
_LEADING_MARKER_RE = re.compile(r"^[\s\d•.)*:-]+")
TECHNOLOGIES_RE = re.compile(
    r"\b(?:technolog(?:y|ies)|tech(?:\s+stack)?|stack)\s*[:\-]\s*(.*)"
    r"|\bbuilt\s+(?:with|using)\s*:?\s*(.*)",
    re.IGNORECASE,
)


def _is_project_start(line: str) -> bool:
    if not PROJECT_START_RE.match(line):
        return False
    # "Tech Stack: ..." belongs to the project above it
    return not TECHNOLOGIES_RE.match(_LEADING_MARKER_RE.sub("", line))


def _split_project_blocks(section: str) -> list[list[str]]:
    blocks: list[list[str]] = []
    current: list[str] = []
    for raw in section.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if _is_project_start(line) and current:
            blocks.append(current)
            current = []
        current.append(line)
    if current:
        blocks.append(current)
    return blocks


def _technologies(block: str) -> list[str]:
    match = TECHNOLOGIES_RE.search(block)
    if not match:
        return []
    listed = match.group(1) if match.group(1) is not None else match.group(2)
    return [t.strip(" .") for t in re.split(r"[,•]", listed) if t.strip(" .")]


def _parse_project_block(lines: list[str], limits: AnalysisLimits) -> ProjectItem | None:
    block = "\n".join(lines)
    if len(block) < limits.min_block_chars:
        return None

    first_line, rest = lines[0], lines[1:]
    label = _PROJECT_LABEL_RE.match(first_line)
    if label:
        name = label.group(1).strip()
        if label.group(2).strip():
            rest = [label.group(2).strip()] + rest
    else:
        name = _LEADING_MARKER_RE.sub("", first_line).strip()

    if not name or name.lower() == "projects":
        return None

    return ProjectItem(
        name=name,
        description=" ".join(rest)[: limits.project_description_chars],
        technologies=_technologies(block),
    )


def extract_projects(section: str, limits: AnalysisLimits) -> list[ProjectItem]:
    items: list[ProjectItem] = []
    for lines in _split_project_blocks(section):
        item = _parse_project_block(lines, limits)
        if item is not None:
            items.append(item)
    return items[: limits.max_entries]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def parse_resume(text: str, taxonomy: SkillTaxonomy, limits: AnalysisLimits) -> ResumeData:
    """Extract every structured field from resume text."""
    sections = segment_sections(text)
    data = ResumeData(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        experience=extract_experience(sections["experience"], limits),
        education=extract_education(sections["education"], limits),
        skills=extract_skills(text, taxonomy),
        summary=extract_summary(text, limits),
        certifications=extract_certifications(sections["certifications"], limits),
        projects=extract_projects(sections["projects"], limits),
    )
    logger.debug(
        "Parsed resume: %d experience, %d education, %d projects, %d skills",
        len(data.experience),
        len(data.education),
        len(data.projects),
        len(data.skills),
    )
    return data


def summarize_resume(data: ResumeData) -> str:
    """Short human-readable digest of a parsed resume."""
    return "\n".join([
        "Resume Summary:",
        f"- Name: {data.name}",
        f"- Email: {data.email}",
        f"- Phone: {data.phone}",
        f"- Work Experience: {len(data.experience)} entries",
        f"- Education: {len(data.education)} entries",
        f"- Skills: {len(data.skills)} skills identified",
        f"- Certifications: {len(data.certifications)}",
        f"- Projects: {len(data.projects)}",
    ])
