import pytest

from quiz_i18n.core.exceptions import QuizValidationError
from quiz_i18n.services.quiz_normalizer import normalize_incoming_quiz
from quiz_i18n.services.quiz_validator import find_problems, validate_normalized_quiz


def make_quiz(**overrides):
    payload = {
        "title": "Motion",
        "questions": [{
            "text": "Unit of force?",
            "options": [{"id": "a", "text": "Joule"}, {"id": "b", "text": "Newton"}],
            "correctAnswerId": "b",
        }],
    }
    payload.update(overrides)
    return normalize_incoming_quiz(payload)


def test_valid_quiz_passes():
    quiz = make_quiz()
    assert find_problems(quiz) == []
    assert validate_normalized_quiz(quiz) is quiz


def test_quiz_without_questions():
    with pytest.raises(QuizValidationError) as exc_info:
        validate_normalized_quiz(make_quiz(questions=[]))
    assert "At least one question is required" in exc_info.value.problems


def test_quiz_without_title():
    problems = find_problems(make_quiz(title=None))
    assert problems == ["Quiz title is empty in default language 'en'"]


def test_correct_index_out_of_range():
    quiz = make_quiz(questions=[{"text": "Q", "options": ["A", "B"], "correctAnswer": 3}])
    problems = find_problems(quiz)
    assert len(problems) == 1
    assert "out of range" in problems[0]


def test_too_few_options_and_missing_text():
    quiz = make_quiz(questions=[{"options": ["Only"]}])
    problems = find_problems(quiz)
    assert len(problems) == 2
    assert "has no text" in problems[0]
    assert "at least 2 options" in problems[1]


def test_hindi_only_quiz_is_checked_in_hindi():
    quiz = normalize_incoming_quiz({
        "title": {"hi": "गति"},
        "questions": [{"question": {"hi": "बल की इकाई?"}, "options": {"hi": ["जूल", "न्यूटन"]}, "correctAnswer": 1}],
    })
    assert quiz.defaultLanguage == "hi"
    assert find_problems(quiz) == []
