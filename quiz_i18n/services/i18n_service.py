"""
Multilingual content resolution.

Collapses canonical (or semi-canonical) content trees to a single language
for API responses, and picks a response language from an Accept-Language
header. Every function here is total: unknown languages and malformed input
fall back to the default language or an empty string.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel

from quiz_i18n.core.constants import (
    DEFAULT_LANGUAGE,
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
)

logger = logging.getLogger(__name__)


def is_supported(language: Any) -> bool:
    """Check whether a language code is supported."""
    return isinstance(language, str) and language in SUPPORTED_LANGUAGES


def get_language_name(language: str) -> str:
    """Get the language name in its native script."""
    return LANGUAGE_NAMES.get(language, LANGUAGE_NAMES[DEFAULT_LANGUAGE])


def is_multilingual_content(obj: Any) -> bool:
    """
    A dict carrying at least one language key is a leaf to resolve.

    Detection only tests `en`/`hi`; once matched, any other language key in
    the same dict can be requested.
    """
    return isinstance(obj, dict) and ("en" in obj or "hi" in obj)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def _resolve_leaf(content: Dict[str, Any], language: str) -> Any:
    value = content.get(language)
    if value is None:
        value = content.get(DEFAULT_LANGUAGE)
    if value is None:
        value = ""

    # A present-but-empty translation counts as missing
    if _is_empty(value) and language != DEFAULT_LANGUAGE:
        fallback = content.get(DEFAULT_LANGUAGE)
        return "" if fallback is None else fallback

    return value


def extract_content(content: Any, language: str = DEFAULT_LANGUAGE) -> Any:
    """
    Extract content in the preferred language, recursively.

    Fallback chain for every multilingual leaf:
    requested language -> default language ('en') -> ''.

    Args:
        content: Any JSON-like value (dicts, lists, scalars) or pydantic model
        language: Preferred language code

    Returns:
        A new tree of the same shape with each multilingual leaf collapsed.
        The input is never mutated.

    Example:
        extract_content({"title": {"en": "Hello", "hi": ""}}, "hi")
        # -> {"title": "Hello"}
    """
    if content is None:
        return None

    if isinstance(content, BaseModel):
        content = content.model_dump()

    if is_multilingual_content(content):
        return _resolve_leaf(content, language or DEFAULT_LANGUAGE)

    if isinstance(content, (list, tuple)):
        return [extract_content(item, language) for item in content]

    if isinstance(content, dict):
        return {key: extract_content(value, language) for key, value in content.items()}

    return content


def _parse_quality(params: List[str]) -> float:
    for param in params:
        name, _, value = param.strip().partition("=")
        if name.strip().lower() == "q":
            try:
                return float(value)
            except ValueError:
                return math.nan
    return 1.0


def parse_accept_language(accept_language: str) -> List[Tuple[str, float]]:
    """
    Parse an Accept-Language header into (base code, quality) pairs.

    Sorted by quality, highest first. Entries with a malformed quality sort
    last; the sort is stable so equal qualities keep header order.

    Example:
        parse_accept_language("en-US,en;q=0.9,hi;q=0.8")
        # -> [("en", 1.0), ("en", 0.9), ("hi", 0.8)]
    """
    entries: List[Tuple[str, float]] = []

    for part in accept_language.split(","):
        code, *params = part.split(";")
        code = code.strip().lower().replace("_", "-").split("-")[0]
        if not code:
            continue
        entries.append((code, _parse_quality(params)))

    entries.sort(key=lambda entry: math.inf if math.isnan(entry[1]) else -entry[1])
    return entries


def detect_language(accept_language: Optional[str] = None) -> str:
    """
    Detect language from an Accept-Language header.

    Returns the highest-quality supported language, or the default language
    when the header is absent or names nothing supported.
    """
    if not accept_language or not isinstance(accept_language, str):
        return DEFAULT_LANGUAGE

    for code, _ in parse_accept_language(accept_language):
        if is_supported(code):
            return code

    logger.debug(f"No supported language in Accept-Language {accept_language!r}")
    return DEFAULT_LANGUAGE


def to_legacy_quiz(quiz: Any, language: str = DEFAULT_LANGUAGE) -> Dict[str, Any]:
    """
    Convert a normalized quiz into the old single-language format.

    Options become `[{id: "a", text}, ...]` and the correct answer a letter
    id, for clients that predate the bilingual structure.
    """
    data = quiz.model_dump() if isinstance(quiz, BaseModel) else (quiz if isinstance(quiz, dict) else {})

    legacy_questions = []
    for idx, question in enumerate(data.get("questions") or []):
        question = question if isinstance(question, dict) else {}
        options = extract_content(question.get("options") or {}, language)
        if not isinstance(options, list):
            options = []
        correct = question.get("correctIndex")
        if isinstance(correct, bool) or not isinstance(correct, int) or not 0 <= correct < len(options):
            correct = 0

        legacy_questions.append({
            "questionId": question.get("questionId") or f"q{idx + 1}",
            "text": extract_content(question.get("question") or "", language),
            "options": [{"id": chr(97 + i), "text": text} for i, text in enumerate(options)],
            "correctAnswerId": chr(97 + correct),
            "explanation": extract_content(question.get("explanation") or "", language),
            "difficulty": question.get("difficulty"),
            "points": question.get("points"),
        })

    return {
        "quizId": data.get("quizId"),
        "title": extract_content(data.get("title") or "", language),
        "description": extract_content(data.get("description") or "", language),
        "subjectId": data.get("subjectId"),
        "topicId": data.get("topicId"),
        "subTopicId": data.get("subTopicId"),
        "timeLimit": data.get("timeLimit"),
        "questions": legacy_questions,
    }
