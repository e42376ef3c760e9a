"""
Unit tests for code fence stripping and JSON payload parsing.
"""

import json

import pytest

from src.services.generator.parsing import parse_json_payload, strip_code_fence

PAYLOAD = '{"title": "T", "subtitle": "S", "slides": [], "theme": {}}'


class TestStripCodeFence:
    """Tests for strip_code_fence."""

    def test_json_fence(self):
        assert strip_code_fence(f"```json\n{PAYLOAD}\n```") == PAYLOAD

    def test_bare_fence(self):
        assert strip_code_fence(f"```\n{PAYLOAD}\n```") == PAYLOAD

    def test_no_fence(self):
        assert strip_code_fence(PAYLOAD) == PAYLOAD

    def test_surrounding_whitespace(self):
        assert strip_code_fence(f"  \n```json\n{PAYLOAD}\n```\n\n ") == PAYLOAD

    def test_leading_fence_only(self):
        assert strip_code_fence(f"```json\n{PAYLOAD}") == PAYLOAD

    def test_trailing_fence_only(self):
        assert strip_code_fence(f"{PAYLOAD}\n```") == PAYLOAD

    def test_removes_only_one_fence(self):
        assert strip_code_fence("``````json\n{}\n``````") == "```json\n{}\n```"

    def test_idempotent_on_unfenced(self):
        once = strip_code_fence(f"```json\n{PAYLOAD}\n```")
        assert strip_code_fence(once) == once


class TestParseJsonPayload:
    """Tests for parse_json_payload."""

    @pytest.mark.parametrize(
        "raw",
        [
            PAYLOAD,
            f"```json\n{PAYLOAD}\n```",
            f"```\n{PAYLOAD}\n```",
            f"\n\n{PAYLOAD}\n",
        ],
    )
    def test_same_result_with_or_without_fence(self, raw):
        assert parse_json_payload(raw) == json.loads(PAYLOAD)

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            parse_json_payload("```json\n{not json}\n```")

    def test_prose_is_not_json(self):
        with pytest.raises(json.JSONDecodeError):
            parse_json_payload("Here you go: {}")

    @pytest.mark.parametrize(
        "raw",
        [
            '{"value": NaN}',
            '{"value": Infinity}',
            '```json\n[-Infinity]\n```',
        ],
    )
    def test_non_standard_constants_rejected(self, raw):
        with pytest.raises(json.JSONDecodeError, match="non-standard JSON constant"):
            parse_json_payload(raw)

    def test_constant_names_inside_strings_allowed(self):
        assert parse_json_payload('{"value": "NaN"}') == {"value": "NaN"}
