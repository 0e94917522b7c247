"""Interpretation of model replies.

Breakdown replies are parsed strictly into Subtask items; any structural
problem falls back to the raw reply text. Freeform replies pass through.
"""

import json
import logging
import re

from pydantic import TypeAdapter, ValidationError

from board_insights.agents.insight_types import BreakdownResult, Subtask
from board_insights.errors import ParseError
from board_insights.logging import InsightsLogger

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```\s*$")

_SUBTASK_LIST = TypeAdapter(list[Subtask])


def strip_code_fence(text: str) -> str:
    """Remove a leading ``` or ```lang marker and a trailing ``` marker."""
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_subtasks(reply: str) -> list[Subtask]:
    """
    Parse a breakdown reply into Subtask items.

    One malformed item rejects the whole reply.

    Raises:
        ParseError: reply is not JSON, not a non-empty array, or an item
            lacks a string ``task``, ``description`` or ``estimatedTime``
    """
    if not isinstance(reply, str):
        raise ParseError(f"Expected text reply, got {type(reply).__name__}", raw_text=reply)

    try:
        data = json.loads(strip_code_fence(reply))
    except json.JSONDecodeError as e:
        raise ParseError(f"Reply is not valid JSON: {e}", raw_text=reply)

    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array, got {type(data).__name__}", raw_text=reply)
    if not data:
        raise ParseError("Reply contained no subtasks", raw_text=reply)

    try:
        return _SUBTASK_LIST.validate_python(data)
    except ValidationError as e:
        raise ParseError(f"Subtask items do not match schema: {e.error_count()} error(s)", raw_text=reply)


def parse_breakdown(reply: str, events: InsightsLogger = None) -> BreakdownResult:
    """Parse a breakdown reply, falling back to the original text on any structural failure."""
    try:
        return BreakdownResult.structured(parse_subtasks(reply))
    except ParseError as e:
        logger.warning(f"Falling back to raw breakdown text: {e}")
        if events is not None:
            events.parse_fallback(str(e), len(reply) if isinstance(reply, str) else 0)
        return BreakdownResult.fallback(reply)


def parse_freeform(reply: str) -> str:
    """Freeform replies (board health, suggestions) are shown as-is."""
    return reply
