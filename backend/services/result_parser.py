"""Parsing of analysis JSON produced outside the rule engine.

An upstream collaborator (for example an LLM-backed variant of the engine)
may return its analysis as text. A reply that cannot be turned into an
AnalysisResult is reported as AnalysisParseError, never as an empty result.
"""

import json
import logging
import re

from pydantic import ValidationError

from models.responses import AnalysisResult

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class AnalysisParseError(ValueError):
    """The external analysis text could not be parsed into an AnalysisResult."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_analysis_json(raw: str | None) -> AnalysisResult:
    """Parse external analysis text into an AnalysisResult.

    Accepts bare JSON, JSON wrapped in markdown code fences, or JSON embedded
    in surrounding prose (the outermost ``{...}`` is used).
    """
    if not raw or not raw.strip():
        raise AnalysisParseError("failed to parse analysis: empty response", raw or "")

    text = _strip_code_fences(raw)
    match = _JSON_OBJECT_RE.search(text)
    if match is None:
        logger.error("No JSON object found in analysis response")
        raise AnalysisParseError("failed to parse analysis: no JSON object found", raw)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse analysis response as JSON: %s", e)
        raise AnalysisParseError(f"failed to parse analysis: {e}", raw) from e

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        logger.error("Analysis response does not match the result schema: %s", e)
        raise AnalysisParseError("failed to parse analysis: invalid result shape", raw) from e
