import json
import re
from typing import Any

import httpx

from . import config
from .schemas import Language

JSON_OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)

LANGUAGES: list[Language] = [
    Language(code="en", name="English"),
    Language(code="es", name="Spanish"),
    Language(code="fr", name="French"),
    Language(code="de", name="German"),
    Language(code="it", name="Italian"),
    Language(code="pt", name="Portuguese"),
    Language(code="ru", name="Russian"),
    Language(code="ja", name="Japanese"),
    Language(code="ko", name="Korean"),
    Language(code="zh", name="Chinese"),
    Language(code="ar", name="Arabic"),
    Language(code="hi", name="Hindi"),
    Language(code="nl", name="Dutch"),
    Language(code="pl", name="Polish"),
    Language(code="tr", name="Turkish"),
]


def build_upstream_headers(api_key: str, referer: str = "") -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": referer,
        "X-Title": config.APP_TITLE,
    }


def build_completion_payload(prompt: str) -> dict[str, Any]:
    return {
        "model": config.TRANSLATION_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": config.TRANSLATION_TEMPERATURE,
        "max_tokens": config.TRANSLATION_MAX_TOKENS,
    }


def read_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def extract_reply_content(data: Any) -> str | None:
    """Return ``choices[0].message.content`` from a chat-completion body, or None when absent."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    if not isinstance(content, str) or not content:
        return None
    return content


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def extract_json_payload(content: str) -> Any:
    """Parse the JSON object embedded in a free-form model reply.

    Takes everything from the first ``{`` to the last ``}``, or the whole reply
    when there is no such span. Several separate objects in one reply yield an
    invalid span and a ``json.JSONDecodeError``. The non-standard constants
    ``NaN``, ``Infinity`` and ``-Infinity`` raise ``ValueError``.
    """
    match = JSON_OBJECT_SPAN.search(content)
    json_string = match.group(0) if match else content
    return json.loads(json_string, parse_constant=_reject_constant)
