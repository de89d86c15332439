"""Tests for extracting the story array from model text."""

import pytest

from newsscript.errors import ParseError
from newsscript.parser import extract_array, parse_stories


def test_extract_array_wrapped_in_prose() -> None:
    """Test that the array is found inside surrounding text."""
    text = 'Sure! ```json\n[{"title": "a"}]\n``` Hope this helps.'
    assert extract_array(text) == '[{"title": "a"}]'


def test_extract_array_is_greedy() -> None:
    """Test that the span runs from the first "[" to the last "]"."""
    assert extract_array("x [1] y [2] z") == "[1] y [2]"


def test_extract_array_none_without_brackets() -> None:
    """Test that text without brackets yields no span."""
    assert extract_array("no stories today") is None
    assert extract_array("") is None


def test_parse_stories_success() -> None:
    """Test that records are decoded as-is without field checks."""
    res = parse_stories('Here: [{"title": "T"}, {"other": 1}]')
    assert res.ok
    assert res.records == [{"title": "T"}, {"other": 1}]
    assert res.unwrap() == res.records


def test_parse_stories_empty_array() -> None:
    """Test that an empty array is a successful parse."""
    res = parse_stories("[]")
    assert res.ok and res.records == []


def test_parse_stories_no_array() -> None:
    """Test that missing brackets is a failure carrying the raw text."""
    res = parse_stories("I could not find any news.")
    assert not res.ok
    assert res.records is None
    assert res.raw == "I could not find any news."
    with pytest.raises(ParseError) as exc:
        res.unwrap()
    assert exc.value.raw == "I could not find any news."
    assert exc.value.payload() == {
        "error": "Gemini returned non-JSON",
        "raw": "I could not find any news.",
    }


def test_parse_stories_invalid_json() -> None:
    """Test that a bracketed span that is not JSON fails without raising."""
    res = parse_stories('[{"title": "T",}] and [more]')
    assert not res.ok
    assert res.error and res.error.startswith("invalid JSON")


def test_parse_stories_truncated_output() -> None:
    """Test that truncated output with no closing bracket fails."""
    res = parse_stories('[{"title": "T"}, {"title": "U"')
    assert not res.ok


def test_parse_stories_deep_nesting() -> None:
    """Test that pathologically nested output fails without raising."""
    text = "[" * 100000 + "]" * 100000
    res = parse_stories(text)
    assert not res.ok
    with pytest.raises(ParseError):
        res.unwrap()
