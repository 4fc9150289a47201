# levelgen/planners/response_parser.py
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

def _balanced_span(text: str, start: int) -> Optional[str]:
    # walk from the opening brace at `start`, ignoring braces inside string literals
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None

def extract_candidate(raw_text: Any) -> Optional[Dict[str, Any]]:
    """Pull the first balanced {...} object out of free-form model output.

    Prose or code fences around the object are ignored. Returns None when there is
    no complete object or it does not decode to a JSON object; never raises.
    """
    if not isinstance(raw_text, str):
        return None
    start = raw_text.find("{")
    if start < 0:
        logger.debug("no object in response (%d chars)", len(raw_text))
        return None
    span = _balanced_span(raw_text, start)
    if span is None:
        logger.debug("unbalanced object in response")
        return None
    try:
        candidate = json.loads(span)
    except (ValueError, RecursionError) as e:
        logger.debug("object span did not decode: %s", e)
        return None
    if not isinstance(candidate, dict):
        return None
    return candidate
