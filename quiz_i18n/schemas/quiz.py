"""
Canonical multilingual quiz schemas.

Every human-readable field carries exactly the `en` and `hi` keys once
normalized, whatever shape the source payload used.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from quiz_i18n.core.constants import Difficulty, Lang, DEFAULT_LANGUAGE, DEFAULT_POINTS, DEFAULT_TIME_LIMIT


class BilingualText(BaseModel):
    """Text field in both canonical languages (either may be empty)."""
    en: str = ""
    hi: str = ""


class BilingualStringList(BaseModel):
    """Per-language option lists. Lengths may differ."""
    en: List[str] = Field(default_factory=list)
    hi: List[str] = Field(default_factory=list)


class QuizSettings(BaseModel):
    """Presentation flags passed through from the admin payload."""
    instantFeedback: Optional[bool] = None
    shuffleQuestions: Optional[bool] = None
    shuffleOptions: Optional[bool] = None
    showCorrectAnswers: Optional[bool] = None

    class Config:
        extra = "ignore"


class NormalizedQuestion(BaseModel):
    """Individual quiz question in canonical bilingual shape."""
    questionId: str
    question: BilingualText = Field(default_factory=BilingualText)
    options: BilingualStringList = Field(default_factory=BilingualStringList)
    correctIndex: int = Field(default=0, ge=0)
    explanation: BilingualText = Field(default_factory=BilingualText)
    hint: Optional[BilingualText] = None
    points: int = DEFAULT_POINTS
    difficulty: Difficulty = Difficulty.MEDIUM

    class Config:
        use_enum_values = True


class NormalizedQuiz(BaseModel):
    """Complete quiz in canonical bilingual shape, ready for persistence."""
    quizId: Optional[str] = None
    title: BilingualText = Field(default_factory=BilingualText)
    description: BilingualText = Field(default_factory=BilingualText)
    subjectId: Optional[str] = None
    topicId: Optional[str] = None
    subTopicId: Optional[str] = None

    # Derived from content, never taken from input
    availableLanguages: List[Lang] = Field(default_factory=lambda: [Lang.EN])
    defaultLanguage: Lang = Lang(DEFAULT_LANGUAGE)
    isMultilingual: bool = False

    timeLimit: int = DEFAULT_TIME_LIMIT
    totalPoints: int = 0
    tags: List[str] = Field(default_factory=list)
    settings: QuizSettings = Field(default_factory=QuizSettings)
    questions: List[NormalizedQuestion] = Field(default_factory=list)

    class Config:
        use_enum_values = True
