"""JSON helper tests with property-based testing."""

import json

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success

from uiplanner.core import (
    JSONParseError,
    extract_json,
    parse_json_object,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)


@pytest.mark.unit
def test_extract_json_clean():
    """Test extracting clean JSON."""
    assert extract_json('{"title": "Test", "count": 42}') == {"title": "Test", "count": 42}


@pytest.mark.unit
def test_extract_json_with_markdown():
    """Test extracting JSON from markdown code blocks."""
    text = 'Here it is:\n```json\n{"title": "Test"}\n```\nDone!'
    assert extract_json(text) == {"title": "Test"}


@pytest.mark.unit
def test_extract_json_with_surrounding_prose():
    """Test first-brace to last-brace extraction."""
    text = 'Sure! {"root": {"id": "r"}} Hope that helps.'
    assert extract_json(text) == {"root": {"id": "r"}}


@pytest.mark.unit
@pytest.mark.parametrize("text", ["no json here", "} backwards {", "{ not: json }", ""])
def test_extract_json_invalid(text):
    """Test errors on missing or malformed objects."""
    with pytest.raises(JSONParseError):
        extract_json(text)


@pytest.mark.unit
def test_extract_json_rejects_two_objects():
    """Test text with two separate objects is not valid JSON between the outer braces."""
    with pytest.raises(JSONParseError):
        extract_json('{"a": 1} and {"b": 2}')


@pytest.mark.unit
def test_extract_json_repair():
    """Test optional repair of trailing commas."""
    text = '{"title": "Test", "items": [1, 2,],}'
    with pytest.raises(JSONParseError):
        extract_json(text, repair=False)
    assert extract_json(text, repair=True) == {"title": "Test", "items": [1, 2]}


@pytest.mark.unit
def test_parse_json_object_result():
    """Test Result wrapping of extraction."""
    ok = parse_json_object('{"a": 1}')
    bad = parse_json_object("nothing")

    assert isinstance(ok, Success)
    assert ok.unwrap() == {"a": 1}
    assert isinstance(bad, Failure)
    assert isinstance(bad.failure(), JSONParseError)


@pytest.mark.unit
def test_safe_json_dumps_with_indent():
    """Test indented serialization keeps non-ASCII text."""
    result = safe_json_dumps({"title": "Café"}, indent=2)
    assert json.loads(result) == {"title": "Café"}
    assert "\n" in result
    assert "Café" in result


@pytest.mark.unit
def test_validate_json_size():
    """Test JSON size validation."""
    validate_json_size('{"test": "data"}', 1000)
    with pytest.raises(JSONParseError):
        validate_json_size("x" * 1_000_000, 1000)


@pytest.mark.unit
def test_validate_json_depth():
    """Test JSON depth validation."""
    validate_json_depth({"a": {"b": {"c": 1}}}, max_depth=5)

    deep = current = {}
    for _ in range(25):
        current["nested"] = {}
        current = current["nested"]
    with pytest.raises(JSONParseError):
        validate_json_depth(deep, max_depth=20)


json_keys = st.text(st.characters(blacklist_categories=("Cs",)), min_size=1)
int64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


@given(st.dictionaries(json_keys, int64))
def test_dumps_then_extract(data):
    """Property test: compact dumps are recovered by extraction."""
    assert extract_json(safe_json_dumps(data)) == data
