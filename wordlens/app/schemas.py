from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE = {"alias_generator": to_camel, "populate_by_name": True}

MAX_TEXT_LENGTH = 5000


class TranslateRequest(BaseModel):
    """Inbound translation request.

    ``text`` length is counted in UTF-16 code units, the way browser clients
    measure it, so an emoji counts as two.
    """

    text: str = Field(..., min_length=1)
    target_language: str = Field(..., min_length=2)
    source_language: str | None = None

    model_config = CAMEL_CASE

    @field_validator("text")
    @classmethod
    def text_within_limit(cls, value: str) -> str:
        if len(value.encode("utf-16-le", "surrogatepass")) // 2 > MAX_TEXT_LENGTH:
            raise ValueError(f"Text is too long (max {MAX_TEXT_LENGTH} UTF-16 code units)")
        return value


class SubWord(BaseModel):
    word: str
    translation: str
    role: str
    explanation: str


class WordAnalysis(BaseModel):
    word: str
    translation: str
    role: str
    explanation: str
    sub_words: list[SubWord] | None = None

    model_config = CAMEL_CASE


class TranslationResponse(BaseModel):
    original_text: str
    translated_text: str
    source_language: str
    target_language: str
    word_analysis: list[WordAnalysis] = Field(default_factory=list)

    model_config = CAMEL_CASE


class Language(BaseModel):
    code: str
    name: str


class ErrorResponse(BaseModel):
    error: str
    details: Any = None
