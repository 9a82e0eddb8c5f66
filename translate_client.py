import argparse
import json
import os
import sys
from typing import Any

import requests
from pydantic import ValidationError

from wordlens.app.schemas import Language, TranslationResponse, WordAnalysis

WORDLENS_URL = os.getenv("WORDLENS_URL", "http://127.0.0.1:8000")

ROLE_CATEGORIES = (
    "noun",
    "verb",
    "adjective",
    "adverb",
    "pronoun",
    "preposition",
    "conjunction",
    "article",
)


class TranslateClientError(Exception):
    pass


def translate(text: str, target_language: str, source_language: str | None = None) -> dict[str, Any]:
    if not text.strip():
        raise TranslateClientError("Please enter some text to translate")

    body: dict[str, Any] = {"text": text, "targetLanguage": target_language}
    if source_language:
        body["sourceLanguage"] = source_language

    response = requests.post(f"{WORDLENS_URL}/api/translate", json=body, timeout=180)
    try:
        data = response.json()
    except ValueError:
        data = {}
    if not response.ok:
        message = data.get("error") if isinstance(data, dict) else None
        raise TranslateClientError(message or "Translation failed")
    return data


def list_languages() -> list[Language]:
    response = requests.get(f"{WORDLENS_URL}/api/languages", timeout=10)
    response.raise_for_status()
    return [Language.model_validate(item) for item in response.json()]


def role_category(role: str) -> str:
    lower_role = role.lower()
    for category in ROLE_CATEGORIES:
        if category in lower_role:
            return category
    return "default"


def render_word(analysis: WordAnalysis) -> list[str]:
    lines = [
        f"{analysis.word} -> {analysis.translation}  [{analysis.role}] ({role_category(analysis.role)})",
        f"    {analysis.explanation}",
    ]
    if analysis.sub_words:
        lines.append("    Word breakdown:")
        for sub_word in analysis.sub_words:
            lines.append(f"      {sub_word.word} -> {sub_word.translation}  [{sub_word.role}]")
            lines.append(f"        {sub_word.explanation}")
    return lines


def render_translation(body: Any) -> str:
    try:
        result = TranslationResponse.model_validate(body)
    except ValidationError:
        # The service passes model output through unchecked.
        return json.dumps(body, ensure_ascii=False, indent=2)

    lines = [
        f"{result.source_language} -> {result.target_language}",
        f"Original:    {result.original_text}",
        f"Translation: {result.translated_text}",
    ]
    if result.word_analysis:
        lines.append("")
        lines.append("Word-by-word analysis:")
        for analysis in result.word_analysis:
            lines.extend(render_word(analysis))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Translate text with a word-by-word analysis.")
    parser.add_argument("text", nargs="?", help="text to translate")
    parser.add_argument("-t", "--to", dest="target_language", default="es", help="target language (default: es)")
    parser.add_argument("-f", "--from", dest="source_language", default=None, help="source language (optional)")
    parser.add_argument("--languages", action="store_true", help="list the languages offered by the service")
    args = parser.parse_args(argv)

    if args.languages:
        try:
            languages = list_languages()
        except (requests.RequestException, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        for language in languages:
            print(f"{language.code}\t{language.name}")
        return 0

    try:
        body = translate(args.text or "", args.target_language, args.source_language)
    except (TranslateClientError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render_translation(body))
    return 0


if __name__ == "__main__":
    sys.exit(main())
