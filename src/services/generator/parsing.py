"""Helpers for reading JSON out of model completions."""

import json
from typing import Any

JSON_FENCE = "```json"
FENCE = "```"


def strip_code_fence(text: str) -> str:
    """
    Remove one optional markdown code fence around a payload.

    At most one leading ```json (or bare ```) and one trailing ``` are
    removed. Whitespace is trimmed before and after.
    """
    stripped = text.strip()
    if stripped.startswith(JSON_FENCE):
        stripped = stripped[len(JSON_FENCE):]
    elif stripped.startswith(FENCE):
        stripped = stripped[len(FENCE):]
    if stripped.endswith(FENCE):
        stripped = stripped[:-len(FENCE)]
    return stripped.strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_json_payload(text: str) -> Any:
    """
    Strip an optional code fence and parse the rest as strict JSON.

    NaN, Infinity and -Infinity are rejected the same way as any other
    invalid JSON, by raising json.JSONDecodeError.
    """
    payload = strip_code_fence(text)
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except json.JSONDecodeError:
        raise
    except ValueError as e:
        raise json.JSONDecodeError(str(e), payload, 0) from e
