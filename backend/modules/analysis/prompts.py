"""Prompt and structured-output schema for word/phrase analysis."""

from textwrap import dedent

_WORD_PHRASE_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "translation": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["text", "translation"],
    "additionalProperties": False,
}

WORD_CAPTURE_SCHEMA = {
    "type": "object",
    "properties": {
        "words": {"type": "array", "items": _WORD_PHRASE_SCHEMA},
        "phrases": {"type": "array", "items": _WORD_PHRASE_SCHEMA},
    },
    "required": ["words", "phrases"],
    "additionalProperties": False,
}

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "WordCaptureResponse",
        "strict": True,
        "schema": WORD_CAPTURE_SCHEMA,
    },
}


_CAPTURE_PROMPT = dedent(
    """
    You are a linguist. Analyze the following {language} text:
    "{text}"
    Split it into useful phrases and words for a learner.
    Return:
    - A list of unique single words that appear in the text.
    - A list of useful multi-word phrases that are meaningful for learners. Include full sentences as well as shorter phrases if they are meaningful.
    - For each word or phrase, return a translation into English.
    - Avoid duplicates.
    - Do not include names, places, or numbers unless they are linguistically relevant.

    Only use information from the input text.
    Translate accurately and concisely.
    Return the response in JSON format.
    """
).strip()


def build_capture_prompt(text: str, language: str) -> str:
    """Build the linguist prompt for a text in the given language."""
    return _CAPTURE_PROMPT.format(language=language, text=text)
