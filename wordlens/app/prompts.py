"""Prompt template asking the model for a translation plus a word-by-word analysis."""

TRANSLATION_PROMPT = """You are a language learning assistant. Translate the following text to {target_language}{source_clause} and provide a detailed word-by-word analysis to help the user learn.

Text to translate: "{text}"

Please respond with a JSON object in this exact format:
{{
  "originalText": "the original text",
  "translatedText": "the complete translation",
  "sourceLanguage": "detected or provided source language",
  "targetLanguage": "{target_language}",
  "wordAnalysis": [
    {{
      "word": "original word or phrase (group multiple words if they should be translated together)",
      "translation": "translation of this word/phrase",
      "role": "grammatical role in {target_language} (e.g., noun phrase, verb phrase, adjective, etc.)",
      "explanation": "brief explanation of the phrase/word as a unit IN {target_language}",
      "subWords": [
        {{
          "word": "individual word within the phrase",
          "translation": "translation of this individual word",
          "role": "grammatical role of this specific word in {target_language}",
          "explanation": "explanation of this individual word IN {target_language}"
        }}
      ]
    }}
  ]
}}

Important:
- ALL explanations and grammatical roles must be written in {target_language}, not English
- Group words together when they form idiomatic expressions, compound nouns, phrasal verbs, or should be translated as a unit
- For single words, you can omit the "subWords" array or leave it empty
- For phrases (multiple words grouped together), ALWAYS include "subWords" array with breakdown of each word
- Each subWord should explain the individual word's meaning and role
- Provide the grammatical role for each unit and subunit in {target_language}
- Include helpful context about word usage in {target_language}
- Ensure the JSON is valid and properly formatted
- Return ONLY the JSON object, no additional text

Examples of when to group words:
- Phrasal verbs: "give up", "look after"
- Compound nouns: "ice cream", "bus stop"
- Idiomatic expressions: "piece of cake", "break a leg"
- Fixed phrases: "buenos días", "s'il vous plaît"
- Article + noun combinations in languages where they're inseparable"""


def build_translation_prompt(text: str, target_language: str, source_language: str | None = None) -> str:
    source_clause = f" from {source_language}" if source_language else ""
    return TRANSLATION_PROMPT.format(
        text=text,
        target_language=target_language,
        source_clause=source_clause,
    )
