"""JSON extraction from model replies"""

import json
import re
from typing import Any

from core.exceptions import ParseError
from utils.log import create_logger

logger = create_logger(__name__)

# First object or array span; greedy to the last matching bracket
JSON_SPAN = re.compile(r"(\{[\s\S]*\}|\[[\s\S]*\])")


def extract_json(raw: Any) -> Any:
    """
    Return the JSON value carried by a model reply

    Already decoded values (dicts, lists) are returned unchanged. Text is
    searched for the first bracketed span, which must parse as JSON.

    Raises:
        ParseError: If no span is found or it is not valid JSON
    """
    if not isinstance(raw, str):
        return raw

    match = JSON_SPAN.search(raw)
    if not match:
        logger.error("Failed to parse JSON - no JSON found in the output")
        raise ParseError("Failed to parse JSON: No valid JSON found in the output.", raw)

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON - {e}")
        raise ParseError(f"Failed to parse JSON: {e}", raw) from e
