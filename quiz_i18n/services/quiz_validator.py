"""
Strict checks for normalized quizzes.

Normalization is best-effort and never rejects input; callers that must refuse
bad admin submissions run these checks on the normalized output.
"""

import logging
from typing import List

from quiz_i18n.core.exceptions import QuizValidationError
from quiz_i18n.schemas.quiz import NormalizedQuiz

logger = logging.getLogger(__name__)

MIN_OPTIONS = 2


def find_problems(quiz: NormalizedQuiz) -> List[str]:
    """Return human-readable problems; an empty list means the quiz is acceptable."""
    problems: List[str] = []
    lang = quiz.defaultLanguage

    if not getattr(quiz.title, lang).strip():
        problems.append(f"Quiz title is empty in default language '{lang}'")

    if not quiz.questions:
        problems.append("At least one question is required")

    for i, question in enumerate(quiz.questions):
        label = f"Question {i + 1} ({question.questionId})"

        if not getattr(question.question, lang).strip():
            problems.append(f"{label} has no text in '{lang}'")

        options = getattr(question.options, lang)
        if len(options) < MIN_OPTIONS:
            problems.append(f"{label} needs at least {MIN_OPTIONS} options in '{lang}', found {len(options)}")
        elif question.correctIndex >= len(options):
            problems.append(
                f"{label} correctIndex {question.correctIndex} is out of range for {len(options)} options"
            )

    return problems


def validate_normalized_quiz(quiz: NormalizedQuiz) -> NormalizedQuiz:
    """
    Raise `QuizValidationError` if the quiz is not fit to be saved.

    Returns the quiz unchanged so it can be used inline.
    """
    problems = find_problems(quiz)
    if problems:
        logger.info(f"Quiz validation failed with {len(problems)} problem(s)", extra={"quiz_id": quiz.quizId})
        raise QuizValidationError(f"Quiz failed validation: {problems[0]}", problems=problems)

    logger.debug(f"✅ Validated {len(quiz.questions)} questions")
    return quiz
