"""
Custom exceptions for the quiz content engine.

The normalizer and resolver never raise for malformed content; these types are
used by the layers built on top of them (strict validation, file loading).
"""

from typing import List, Optional


class QuizI18nException(Exception):
    """Base exception for all quiz content engine errors."""
    pass


class QuizValidationError(QuizI18nException):
    """Raised when a normalized quiz fails strict validation."""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or []
        super().__init__(message)


class PayloadParseError(QuizI18nException):
    """Raised when a quiz payload file cannot be read or parsed."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)
