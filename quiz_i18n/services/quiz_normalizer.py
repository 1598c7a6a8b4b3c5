"""
Quiz normalizer.

Turns loosely-typed quiz payloads (legacy single-language questions,
array-of-option shapes, combined "English / हिंदी" strings and per-language
maps) into the canonical bilingual `NormalizedQuiz`.

Runs as two independent passes:
1. Shape normalization: always total, every text field ends up with both keys.
2. Content classification: language availability is decided by script
   (Devanagari or not), never by which keys are present, because shape
   normalization duplicates single-language strings into both keys.

Nothing here raises for malformed input; bad fields degrade to defaults.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from quiz_i18n.core.constants import (
    ANSWER_LETTER_MAP,
    BILINGUAL_SEPARATOR,
    DEFAULT_POINTS,
    DEFAULT_TIME_LIMIT,
    DEVANAGARI_END,
    DEVANAGARI_START,
    IMPORTED_QUIZ_TITLE,
    Lang,
    normalize_difficulty,
)
from quiz_i18n.schemas.quiz import (
    BilingualStringList,
    BilingualText,
    NormalizedQuestion,
    NormalizedQuiz,
    QuizSettings,
)

logger = logging.getLogger(__name__)


class Shape(str, Enum):
    """Recognized shapes of an incoming text/options field."""
    MISSING = "missing"
    PLAIN_STRING = "plain_string"
    LANGUAGE_MAP = "language_map"
    LEGACY_ARRAY = "legacy_array"


def classify(value: Any) -> Shape:
    """Discriminate the shape of a raw field."""
    if isinstance(value, dict):
        return Shape.LANGUAGE_MAP
    if isinstance(value, (list, tuple)):
        return Shape.LEGACY_ARRAY
    if isinstance(value, str) and value.strip():
        return Shape.PLAIN_STRING
    return Shape.MISSING


def has_devanagari(text: Any) -> bool:
    """True if the string contains any code point in U+0900..U+097F."""
    if not isinstance(text, str):
        return False
    return any(DEVANAGARI_START <= ord(ch) <= DEVANAGARI_END for ch in text)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false are not numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# ============================================================================
# Shape normalization
# ============================================================================

def _split_bilingual(text: str) -> BilingualText:
    """Split a combined 'English / हिंदी' string, or duplicate a single one."""
    if text.count(BILINGUAL_SEPARATOR) == 1:
        first, second = (part.strip() for part in text.split(BILINGUAL_SEPARATOR))
        if has_devanagari(first):
            return BilingualText(hi=first, en=second)
        return BilingualText(en=first, hi=second)

    # Single language: duplicate so every consumer sees both keys
    return BilingualText(en=text, hi=text)


def normalize_text(value: Any) -> BilingualText:
    """
    Normalize a text field into `{en, hi}`.

    Examples:
        normalize_text("Hello")              -> {en: "Hello", hi: "Hello"}
        normalize_text("नमस्ते / Hello")       -> {en: "Hello", hi: "नमस्ते"}
        normalize_text({"en": "Hi", "es": ""}) -> {en: "Hi", hi: ""}
        normalize_text(None)                 -> {en: "", hi: ""}
    """
    shape = classify(value)

    if shape == Shape.LANGUAGE_MAP:
        return BilingualText(en=_as_str(value.get("en")), hi=_as_str(value.get("hi")))

    if shape == Shape.PLAIN_STRING:
        return _split_bilingual(value)

    return BilingualText()


def _option_text(option: Any) -> Any:
    if isinstance(option, dict):
        return option.get("text")
    if isinstance(option, str):
        return option
    return None


def normalize_options(value: Any) -> BilingualStringList:
    """
    Normalize an options field into parallel `{en: [...], hi: [...]}` lists.

    Legacy `[{id, text}, ...]` keeps the original order (no id lookup);
    a language map is passed through side by side without repairing
    mismatched lengths.
    """
    shape = classify(value)

    if shape == Shape.LEGACY_ARRAY:
        en: List[str] = []
        hi: List[str] = []
        for option in value:
            text = normalize_text(_option_text(option))
            en.append(text.en)
            hi.append(text.hi)
        return BilingualStringList(en=en, hi=hi)

    if shape == Shape.LANGUAGE_MAP:
        return BilingualStringList(
            en=[_as_str(item) for item in value.get("en")] if isinstance(value.get("en"), list) else [],
            hi=[_as_str(item) for item in value.get("hi")] if isinstance(value.get("hi"), list) else [],
        )

    return BilingualStringList()


def _letter_to_index(letter: str) -> Optional[int]:
    return ANSWER_LETTER_MAP.get(letter.strip().lower())


def resolve_correct_index(question: Dict[str, Any]) -> int:
    """
    Resolve the zero-based index of the correct option.

    Order: numeric `correctAnswer`, letter `correctAnswerId` (a-d),
    numeric `correctIndex`, string `correctAnswer` (digits or letter).
    Anything unresolvable falls back to 0.
    """
    answer = question.get("correctAnswer")
    if _is_number(answer) and answer >= 0:
        return int(answer)

    answer_id = question.get("correctAnswerId")
    if isinstance(answer_id, str) and answer_id.strip():
        index = _letter_to_index(answer_id)
        if index is None:
            # TODO: surface an "unresolved" sentinel instead once admin import can report it
            logger.warning(f"Unrecognized correctAnswerId {answer_id!r}, defaulting to option 0")
            return 0
        return index

    correct_index = question.get("correctIndex")
    if _is_number(correct_index) and correct_index >= 0:
        return int(correct_index)

    if isinstance(answer, str) and answer.strip():
        answer = answer.strip()
        # int() rejects non-ASCII digits like "²" and over-long digit strings
        if answer.isascii() and answer.isdigit():
            try:
                return int(answer)
            except ValueError:
                logger.warning(f"Unusable correctAnswer of {len(answer)} digits, defaulting to option 0")
                return 0
        index = _letter_to_index(answer)
        if index is not None:
            return index
        logger.warning(f"Unrecognized correctAnswer {answer!r}, defaulting to option 0")

    return 0


def _question_text_source(question: Dict[str, Any]) -> Any:
    value = question.get("question")
    if classify(value) in (Shape.LANGUAGE_MAP, Shape.PLAIN_STRING):
        return value
    return question.get("text")


def normalize_question(raw: Any, index: int) -> NormalizedQuestion:
    """Normalize one question. `index` is only used for a fallback id."""
    question = raw if isinstance(raw, dict) else {}

    question_id = question.get("questionId")
    if question_id is None or question_id == "":
        question_id = question.get("id")
    if question_id is None or question_id == "":
        question_id = f"q{index + 1}"

    points = question.get("points")
    hint = question.get("hint")

    return NormalizedQuestion(
        questionId=str(question_id),
        question=normalize_text(_question_text_source(question)),
        options=normalize_options(question.get("options")),
        correctIndex=resolve_correct_index(question),
        explanation=normalize_text(question.get("explanation")),
        hint=normalize_text(hint) if classify(hint) != Shape.MISSING else None,
        points=int(points) if _is_number(points) else DEFAULT_POINTS,
        difficulty=normalize_difficulty(question.get("difficulty")),
    )


# ============================================================================
# Content classification
# ============================================================================

def collect_content_strings(quiz: NormalizedQuiz) -> List[str]:
    """Flatten every human-readable string of a normalized quiz."""
    strings: List[str] = [quiz.title.en, quiz.title.hi, quiz.description.en, quiz.description.hi]

    for question in quiz.questions:
        strings.extend([question.question.en, question.question.hi])
        strings.extend(question.options.en)
        strings.extend(question.options.hi)
        strings.extend([question.explanation.en, question.explanation.hi])
        if question.hint is not None:
            strings.extend([question.hint.en, question.hint.hi])

    return strings


def detect_available_languages(quiz: NormalizedQuiz) -> List[str]:
    """
    Languages with at least one content string, decided by script.

    A non-blank string without Devanagari is English content; a string with
    Devanagari is Hindi content. Never returns an empty list.
    """
    has_en = False
    has_hi = False

    for text in collect_content_strings(quiz):
        if not text or not text.strip():
            continue
        if has_devanagari(text):
            has_hi = True
        else:
            has_en = True
        if has_en and has_hi:
            break

    languages: List[str] = []
    if has_en:
        languages.append(Lang.EN.value)
    if has_hi:
        languages.append(Lang.HI.value)

    return languages or [Lang.EN.value]


# ============================================================================
# Entry point
# ============================================================================

def _normalize_settings(value: Any) -> QuizSettings:
    if not isinstance(value, dict):
        return QuizSettings()
    try:
        return QuizSettings.model_validate(value)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid quiz settings: {e.error_count()} error(s)")
        return QuizSettings()


def _normalize_time_limit(value: Any) -> int:
    if _is_number(value) and value > 0:
        return int(value)
    return DEFAULT_TIME_LIMIT


def normalize_incoming_quiz(
    payload: Any,
    subject_id: Optional[str] = None,
    topic_id: Optional[str] = None,
    sub_topic_id: Optional[str] = None,
) -> NormalizedQuiz:
    """
    Normalize any incoming quiz JSON (array or object) into a `NormalizedQuiz`.

    A bare list is treated as the questions of an "Imported Quiz" with an
    empty description. `availableLanguages`, `defaultLanguage`,
    `isMultilingual` and `totalPoints` are always derived, never copied.
    """
    if isinstance(payload, list):
        data: Dict[str, Any] = {"title": IMPORTED_QUIZ_TITLE, "description": "", "questions": payload}
    elif isinstance(payload, dict):
        data = payload
    else:
        logger.warning(f"Unexpected quiz payload type {type(payload).__name__}, using empty quiz")
        data = {}

    raw_questions = data.get("questions")
    if not isinstance(raw_questions, list):
        raw_questions = []

    questions = [normalize_question(q, idx) for idx, q in enumerate(raw_questions)]

    quiz_id = data.get("quizId")
    tags = data.get("tags")

    # Pass 1: shape
    fields: Dict[str, Any] = {
        "quizId": str(quiz_id) if quiz_id not in (None, "") else None,
        "title": normalize_text(data.get("title")),
        "description": normalize_text(data.get("description")),
        "subjectId": subject_id,
        "topicId": topic_id,
        "subTopicId": sub_topic_id,
        "timeLimit": _normalize_time_limit(data.get("timeLimit")),
        "totalPoints": sum(q.points for q in questions),
        "tags": [t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
        "settings": _normalize_settings(data.get("settings")),
        "questions": questions,
    }

    # Pass 2: content classification
    languages = detect_available_languages(NormalizedQuiz(**fields))

    quiz = NormalizedQuiz(
        **fields,
        availableLanguages=languages,
        defaultLanguage=Lang.EN.value if Lang.EN.value in languages else Lang.HI.value,
        isMultilingual=len(languages) == 2,
    )

    logger.debug(
        f"Normalized quiz: {len(questions)} questions, "
        f"languages={languages}, totalPoints={quiz.totalPoints}"
    )
    return quiz
