"""Resume section segmentation and canonical section detection."""

import logging
import re

from models.schemas.taxonomy import SkillTaxonomy

logger = logging.getLogger(__name__)

# Header alternatives per section, in priority order.
SECTION_HEADERS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional)\s+experience",
        r"experience",
        r"(?:work|employment)\s+history",
    ],
    "education": [
        r"education",
        r"academic\s+(?:background|history|qualifications)",
        r"academics?",
    ],
    "skills": [
        r"technical\s+skills",
        r"skills",
    ],
    "certifications": [
        r"certifications?",
    ],
    "projects": [
        r"projects?",
    ],
    "summary": [
        r"professional\s+summary",
        r"summary",
        r"(?:career\s+)?objective",
    ],
}

# Sections whose body also ends at the first blank line.
_PARAGRAPH_SECTIONS = {"summary"}


def _header_alternation(names: list[str]) -> str:
    alts = [alt for name in names for alt in SECTION_HEADERS[name]]
    return "|".join(alts)


def _build_patterns(section: str) -> list[re.Pattern]:
    """Compile the ordered header patterns for one section.

    The first pattern wants the header alone on its line. The second finds
    the header anywhere, which covers inline headers like "Skills: Python, Go".
    Both stop at a line that opens with another header, alone or followed by
    a colon. The inline pattern also stops at "Header:" mid-line.
    """
    own = "|".join(SECTION_HEADERS[section])
    others = _header_alternation([s for s in SECTION_HEADERS if s != section])
    paragraph_stop = r"|\n[ \t]*\n" if section in _PARAGRAPH_SECTIONS else ""
    header_line = rf"^[ \t]*(?:{others})[ \t]*(?::|$)"

    line_header = re.compile(
        rf"^[ \t]*(?:{own})[ \t]*:?[ \t]*$\s*"
        rf"(.*?)"
        rf"(?={header_line}{paragraph_stop}|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )
    inline_header = re.compile(
        rf"\b(?:{own})\b[ \t]*:?"
        rf"(.*?)"
        rf"(?={header_line}|\b(?:{others})\b[ \t]*:{paragraph_stop}|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )
    return [line_header, inline_header]


_COMPILED: dict[str, list[re.Pattern]] = {
    section: _build_patterns(section) for section in SECTION_HEADERS
}


def find_section(text: str, section: str) -> str:
    """Return the body of one section, or "" if no header pattern matches."""
    for pattern in _COMPILED[section]:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return ""


def segment_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Every known section is present in the result; unmatched sections map to
    "". Bodies may overlap when headers appear out of the usual order.
    """
    sections = {section: find_section(text, section) for section in SECTION_HEADERS}
    logger.debug(
        "Segmented sections: %s",
        sorted(name for name, body in sections.items() if body),
    )
    return sections


def detect_sections(text: str, taxonomy: SkillTaxonomy) -> tuple[list[str], list[str]]:
    """Split the canonical section headers into (present, missing).

    A header counts as present when it appears anywhere in the text,
    case-insensitively. Both lists keep taxonomy order.
    """
    text_lower = text.lower()
    present = [s for s in taxonomy.sections if s.lower() in text_lower]
    missing = [s for s in taxonomy.sections if s not in present]
    return present, missing
