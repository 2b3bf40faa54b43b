# tests/test_recommendation_parser.py
"""Tests for extracting and repairing JSON from LLM output."""
from __future__ import annotations

import json

import pytest

from ai.recommendation_parser import (
    extract_json_candidate,
    parse_recommendations,
    repair_json_text,
)
from services.errors import ExtractionError, RecommendationParseError

VALID = {
    "summary": "Budget trip to Paris",
    "activities": [
        {"id": "a1", "title": "Louvre", "description": "Museum", "category": "Culture",
         "price": 17, "rating": 4.8, "location": "1st arrondissement"},
    ],
    "hotels": [
        {"id": "h1", "name": "Hostel", "description": "Cheap", "pricePerNight": 30,
         "rating": 4.1, "location": "Montmartre", "amenities": ["WiFi"]},
    ],
    "restaurants": [],
}


def test_remove_trailing_commas():
    assert json.loads(repair_json_text('{"a": 1, "b": 2,}')) == {"a": 1, "b": 2}


def test_remove_trailing_commas_in_arrays():
    assert json.loads(repair_json_text('{"items": [1, 2, 3,]}')) == {"items": [1, 2, 3]}


def test_nested_trailing_commas():
    text = '{"a": {"b": [1, {"c": 2,},],},}'
    assert json.loads(repair_json_text(text)) == {"a": {"b": [1, {"c": 2}]}}


def test_whitespace_collapsed():
    assert repair_json_text('  {\n  "a":\t\t1\n}  ') == '{ "a": 1 }'


def test_extract_from_markdown_fence():
    text = 'Here you go:\n```json\n{"a": 1}\n```\nEnjoy!'
    assert extract_json_candidate(text) == '{"a": 1}'


def test_extract_without_markdown():
    text = 'Sure! {"a": {"b": 2}} Hope that helps.'
    assert extract_json_candidate(text) == '{"a": {"b": 2}}'


def test_fence_wins_over_bare_braces():
    text = 'Ignore {"x": 0}\n```json\n{"a": 1}\n```'
    assert extract_json_candidate(text) == '{"a": 1}'


def test_no_json_raises_extraction_error():
    with pytest.raises(ExtractionError, match="No JSON found"):
        parse_recommendations("I could not come up with anything, sorry.")


def test_unparseable_json_raises_parse_error():
    with pytest.raises(RecommendationParseError) as exc_info:
        parse_recommendations('{"summary": "oops", "activities": [ {"id": 1 ]}')
    assert "Failed to parse JSON" in str(exc_info.value)
    assert exc_info.value.candidate.startswith('{"summary"')


def test_fenced_json_with_trailing_commas_matches_clean_json():
    messy = json.dumps(VALID, indent=2).replace("]", ",]").replace("}", ",}")
    text = f"Here are your recommendations:\n```json\n{messy}\n```"
    assert parse_recommendations(text) == VALID


def test_plain_json_passes_through():
    assert parse_recommendations(json.dumps(VALID)) == VALID


def test_partial_object_passed_through_as_is():
    assert parse_recommendations('{"activities": []}') == {"activities": []}


def test_fenced_array_rejected():
    with pytest.raises(RecommendationParseError):
        parse_recommendations("```json\n[1, 2, 3]\n```")
