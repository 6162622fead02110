"""
Parse free-text provider replies into StructuredSummary records.
"""

import json
import re

from app.models.schemas import StructuredSummary
from app.utils.logger import logging

DEFAULT_TITLE = "Video Summary"
FALLBACK_TAGS = ["General"]

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def _fallback(content: str) -> StructuredSummary:
    return StructuredSummary(title=DEFAULT_TITLE, summary=content, tags=list(FALLBACK_TAGS))


def parse_summary_response(content: str) -> StructuredSummary:
    """
    Extract {title, summary, tags} from a provider reply.

    The widest brace-delimited span is parsed as JSON. Missing fields fall back
    individually; anything unparseable degrades to the whole reply as the
    summary. Never raises.

    Args:
        content: Raw text returned by the provider

    Returns:
        StructuredSummary
    """
    content = content or ""
    match = _JSON_OBJECT.search(content)
    if not match:
        return _fallback(content)

    try:
        parsed = json.loads(match.group(0))
    except ValueError as e:
        logging.warning(f"Failed to parse AI response as JSON: {str(e)}")
        return _fallback(content)

    if not isinstance(parsed, dict):
        return _fallback(content)

    title = parsed.get("title")
    summary = parsed.get("summary")
    tags = parsed.get("tags")

    return StructuredSummary(
        title=title if isinstance(title, str) and title else DEFAULT_TITLE,
        summary=summary if isinstance(summary, str) and summary else content,
        tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
    )
