# utils/json_utils.py
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


def try_parse_structured(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Parse a roadmap object out of an LLM response.
    - First tries the whole string.
    - Then the slice from the first '{' to the last '}' (drops chatty preambles/suffixes).
    Returns None when neither yields a JSON object. No repair is attempted.
    """
    if not raw or not isinstance(raw, str):
        return None

    parsed = _loads_object(raw)
    if parsed is not None:
        return parsed

    start = raw.find("{")
    end = raw.rfind("}")
    if start != -1 and end != -1 and end > start:
        parsed = _loads_object(raw[start:end + 1])
        if parsed is not None:
            logger.debug(f"Extracted JSON object from chars {start}..{end}")
            return parsed

    truncated = raw[:200] + "..." if len(raw) > 200 else raw
    logger.warning(f"No JSON object found in response. Raw (truncated): {truncated}")
    return None
