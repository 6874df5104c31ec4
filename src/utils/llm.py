"""Helpers for reading structured output from LLM responses."""

import json
import logging

from json_repair import repair_json

logger = logging.getLogger(__name__)


def _extract_json_block(content: str) -> str:
    if "```json" in content:
        return content.split("```json")[1].split("```")[0]
    if "```" in content:
        return content.split("```")[1].split("```")[0]
    if "{" in content and "}" in content:
        # Drop any prose around the object
        return content[content.index("{"):content.rindex("}") + 1]
    return content


def parse_json_from_content(content: str) -> dict | None:
    """Parse a JSON object from LLM response content.

    Handles plain JSON, JSON in markdown code blocks, and JSON with
    surrounding text. Slightly malformed JSON (trailing commas, missing
    quotes or brackets) is repaired before giving up.

    Args:
        content: Raw content string from LLM

    Returns:
        Parsed JSON dict, or None if no object can be recovered
    """
    if not content:
        return None

    candidate = _extract_json_block(content).strip()
    try:
        parsed = json.loads(candidate)
    except (json.JSONDecodeError, ValueError):
        parsed = repair_json(candidate, return_objects=True)
        if parsed:
            logger.debug("Repaired malformed JSON from LLM", extra={
                "content_preview": content[:200],
            })

    if not isinstance(parsed, dict):
        logger.debug("LLM content is not a JSON object", extra={
            "content_preview": content[:200],
        })
        return None
    return parsed
