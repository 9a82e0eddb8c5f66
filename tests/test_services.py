"""Unit tests for prompt building and reply reshaping helpers."""

from __future__ import annotations

import json

import httpx
import pytest

from wordlens.app import config
from wordlens.app.prompts import build_translation_prompt
from wordlens.app.services import (
    build_completion_payload,
    build_upstream_headers,
    extract_json_payload,
    extract_reply_content,
    read_error_body,
)


def test_prompt_names_target_and_source_language() -> None:
    prompt = build_translation_prompt("piece of cake", "French", "English")

    assert prompt.startswith("You are a language learning assistant. Translate the following text to French from English")
    assert 'Text to translate: "piece of cake"' in prompt
    assert '"targetLanguage": "French"' in prompt
    assert "ALL explanations and grammatical roles must be written in French, not English" in prompt
    assert "Return ONLY the JSON object, no additional text" in prompt


@pytest.mark.parametrize("source_language", [None, ""])
def test_prompt_omits_missing_source_language(source_language: str | None) -> None:
    prompt = build_translation_prompt("hello", "German", source_language)

    assert "Translate the following text to German and provide" in prompt
    assert " from " not in prompt.splitlines()[0]


def test_prompt_describes_nested_sub_word_schema() -> None:
    prompt = build_translation_prompt("ice cream", "Italian")

    for key in ("originalText", "translatedText", "sourceLanguage", "wordAnalysis", "subWords", "role", "explanation"):
        assert f'"{key}"' in prompt


def test_prompt_embeds_text_with_braces_literally() -> None:
    text = "use {name} and {{double}}"
    prompt = build_translation_prompt(text, "Spanish")

    assert f'Text to translate: "{text}"' in prompt


def test_completion_payload_uses_configured_model(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "TRANSLATION_MODEL", "test/model")
    monkeypatch.setattr(config, "TRANSLATION_TEMPERATURE", 0.7)
    monkeypatch.setattr(config, "TRANSLATION_MAX_TOKENS", 512)

    payload = build_completion_payload("prompt text")

    assert payload == {
        "model": "test/model",
        "messages": [{"role": "user", "content": "prompt text"}],
        "temperature": 0.7,
        "max_tokens": 512,
    }


def test_upstream_headers_carry_bearer_token() -> None:
    headers = build_upstream_headers("secret", referer="http://example.test/")

    assert headers["Authorization"] == "Bearer secret"
    assert headers["Content-Type"] == "application/json"
    assert headers["HTTP-Referer"] == "http://example.test/"
    assert headers["X-Title"] == config.APP_TITLE


def test_extract_reply_content_reads_first_choice() -> None:
    data = {"choices": [{"message": {"content": "first"}}, {"message": {"content": "second"}}]}

    assert extract_reply_content(data) == "first"


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        {},
        {"choices": None},
        {"choices": []},
        {"choices": ["oops"]},
        {"choices": [{}]},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": ""}}]},
        {"choices": [{"message": {"content": None}}]},
    ],
)
def test_extract_reply_content_missing_returns_none(data: object) -> None:
    assert extract_reply_content(data) is None


def test_extract_json_payload_spans_first_to_last_brace() -> None:
    content = 'Here you go:\n{"outer": {"inner": [1, 2]}}\nEnjoy!'

    assert extract_json_payload(content) == {"outer": {"inner": [1, 2]}}


def test_extract_json_payload_without_braces_parses_whole_reply() -> None:
    assert extract_json_payload("[1, 2, 3]") == [1, 2, 3]


@pytest.mark.parametrize("content", ["no json here", '{"a": 1} {"b": 2}', "{broken"])
def test_extract_json_payload_invalid_raises(content: str) -> None:
    with pytest.raises(json.JSONDecodeError):
        extract_json_payload(content)


def test_read_error_body_prefers_json() -> None:
    assert read_error_body(httpx.Response(status_code=401, json={"error": "bad key"})) == {"error": "bad key"}
    assert read_error_body(httpx.Response(status_code=503, text="unavailable")) == "unavailable"


@pytest.mark.parametrize("content", ['{"score": NaN}', '{"score": Infinity}', '{"score": -Infinity}'])
def test_extract_json_payload_rejects_non_standard_constants(content: str) -> None:
    with pytest.raises(ValueError, match="is not valid JSON"):
        extract_json_payload(content)
