"""Schemas package."""

from .quiz import (
    BilingualText,
    BilingualStringList,
    QuizSettings,
    NormalizedQuestion,
    NormalizedQuiz,
)
from .responses import (
    LanguageInfo,
    LanguagesResponse,
    ResolvedContentResponse,
    ValidationErrorResponse,
)

__all__ = [
    # Quiz
    "BilingualText",
    "BilingualStringList",
    "QuizSettings",
    "NormalizedQuestion",
    "NormalizedQuiz",
    # Responses
    "LanguageInfo",
    "LanguagesResponse",
    "ResolvedContentResponse",
    "ValidationErrorResponse",
]
