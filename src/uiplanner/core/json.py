"""JSON helpers for model replies and client payloads."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json
from returns.result import Result, Success, Failure


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def find_object_span(text: str) -> str | None:
    """
    Slice ``text`` from its first ``{`` to its last ``}``.

    Prose and markdown fences around the object fall outside the slice.
    Returns None when there is no such pair in order.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def _decode(candidate: str, repair: bool) -> Any:
    try:
        return msgspec.json.decode(candidate)
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    # json_repair returns "" for input it cannot salvage
    repaired = repair_json(candidate)
    if not repaired:
        raise JSONParseError("Invalid JSON: repair produced nothing")
    try:
        return msgspec.json.decode(repaired)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"JSON repair failed: {e}", e) from e


def extract_json(text: str, repair: bool = False) -> dict[str, Any]:
    """
    Extract and parse the JSON object embedded in model output.

    Args:
        text: Raw model reply
        repair: Let json_repair fix near-miss JSON (trailing commas, quotes)

    Returns:
        Parsed JSON object

    Raises:
        JSONParseError: No object span, invalid JSON, or a non-object value
    """
    candidate = find_object_span(text.strip())
    if candidate is None:
        raise JSONParseError("No JSON object found in text")

    result = _decode(candidate, repair)
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result


def parse_json_object(text: str, repair: bool = False) -> Result[dict[str, Any], JSONParseError]:
    """
    Extract a JSON object from text (Result pattern version).

    A Failure here is a syntactic outcome only; schema checks happen later.
    """
    try:
        return Success(extract_json(text, repair=repair))
    except JSONParseError as e:
        return Failure(e)


def safe_json_dumps(obj: Any, indent: int | None = None) -> str:
    """
    Encode to a JSON string, keeping non-ASCII text as-is.

    orjson handles compact and two-space output; anything it rejects
    (other indents, integers beyond 64 bits) goes through the stdlib.
    """
    option = orjson.OPT_INDENT_2 if indent == 2 else 0
    if indent in (None, 2):
        try:
            return orjson.dumps(obj, option=option).decode("utf-8")
        except TypeError:
            pass

    return json.dumps(obj, indent=indent, ensure_ascii=False)


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Reject encoded JSON larger than ``max_size`` UTF-8 bytes.

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 64) -> None:
    """
    Reject containers nested deeper than ``max_depth``.

    Iterative, so hostile payloads cannot exhaust the interpreter stack.

    Raises:
        JSONParseError: If depth exceeds limit
    """
    stack = [(obj, 0)]
    while stack:
        value, depth = stack.pop()
        if depth > max_depth:
            raise JSONParseError(f"JSON nesting depth {depth} exceeds maximum {max_depth}")
        if isinstance(value, dict):
            stack.extend((child, depth + 1) for child in value.values())
        elif isinstance(value, list):
            stack.extend((child, depth + 1) for child in value)
