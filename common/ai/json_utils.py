"""
Helpers for pulling JSON out of free-form LLM replies.

Models often wrap JSON in a markdown code fence or surround it with prose.
"""

import json
import re
from typing import Any, Dict

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL)


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse the first JSON object found in an LLM reply.

    Looks for a fenced code block first, then for the outermost pair of
    braces, and finally tries the whole text.

    Args:
        text: Raw model output

    Returns:
        The decoded JSON object

    Raises:
        ValueError: If no JSON object can be decoded
    """
    if not text or not text.strip():
        raise ValueError("Empty response")

    candidate = text.strip()

    fenced = _FENCED_BLOCK.search(candidate)
    if fenced:
        candidate = fenced.group(1).strip()
    else:
        start = candidate.find("{")
        end = candidate.rfind("}") + 1
        if start != -1 and end > start:
            candidate = candidate[start:end]

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ValueError(f"Response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ValueError("Response is not a JSON object")

    return parsed
