"""
Helpers for values stored as serialized JSON text.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def parse_json_field(raw: Any) -> Any:
    """
    Decode a JSON text column.

    Empty values and undecodable text both come back as an empty list.
    """
    if raw is None or raw == "":
        return []
    if not isinstance(raw, (str, bytes, bytearray)):
        # Drivers with native JSON support hand back decoded values
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to parse JSON field: {e}")
        return []


def parse_json_list(raw: Any) -> list:
    """Like parse_json_field, but anything that is not a list becomes []."""
    value = parse_json_field(raw)
    return value if isinstance(value, list) else []


def dump_json(value: Any) -> str:
    return json.dumps(value, default=str)
