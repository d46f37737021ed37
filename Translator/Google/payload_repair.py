"""
Repair and parse the elision-compressed nested arrays returned by the translate endpoint.

The backend drops redundant nulls, so `[a,,,b]` and `[,a]` show up in place of
`[a,null,null,b]` and `[null,a]`. The repaired text is plain JSON.
"""
import json
from typing import Any, List
from Translator.Exception.TranslateError import PayloadParseError

import logging
logger = logging.getLogger(__name__)


def repair_payload(text: str) -> str:
    """Insert `null` for every elided element; string literals are copied untouched."""
    parts = []
    in_string = False
    escaped = False
    previous = ""
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "," and previous in (",", "["):
            parts.append("null")
        parts.append(char)
        previous = char
    return "".join(parts)


def parse_raw_payload(text: str) -> List[Any]:
    if not isinstance(text, str):
        raise PayloadParseError(f"Expected payload text, got {type(text).__name__}")
    repaired = repair_payload(text)
    try:
        parsed = json.loads(repaired)
    except ValueError as e:
        logger.debug("Repaired payload still invalid: %s", repaired[:200])
        raise PayloadParseError(f"Unparseable translation payload: {e}") from e
    if not isinstance(parsed, list):
        raise PayloadParseError("Translation payload is not a nested array")
    return parsed
