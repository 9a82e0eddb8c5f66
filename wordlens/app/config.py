import os

from dotenv import load_dotenv

load_dotenv()

OPENROUTER_API_URL = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1/chat/completions")
TRANSLATION_MODEL = os.getenv("TRANSLATION_MODEL", "deepseek/deepseek-chat-v3.1")
TRANSLATION_TEMPERATURE = float(os.getenv("TRANSLATION_TEMPERATURE", "0.3"))
TRANSLATION_MAX_TOKENS = int(os.getenv("TRANSLATION_MAX_TOKENS", "16000"))
TRANSLATION_TIMEOUT_SECONDS = float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "120"))
APP_TITLE = os.getenv("APP_TITLE", "Translation Learning App")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "false").lower() in {"1", "true", "yes"}


def get_openrouter_api_key() -> str | None:
    # Read per request so a missing key fails the call, not the startup.
    return os.getenv("OPENROUTER_API_KEY") or None
