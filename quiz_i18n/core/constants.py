"""
Centralized constants and enums for the quiz content engine.

Single source of truth for supported languages, difficulty levels and the
defaults the normalizer falls back to. Adding a new difficulty synonym only
requires editing this file.
"""

from enum import Enum
from typing import Dict, List, Optional


# ============================================================================
# Languages
# ============================================================================

class Lang(str, Enum):
    """Canonical content languages."""
    EN = "en"
    HI = "hi"


SUPPORTED_LANGUAGES: List[str] = [lang.value for lang in Lang]
DEFAULT_LANGUAGE: str = Lang.EN.value

LANGUAGE_NAMES: Dict[str, str] = {
    Lang.EN.value: "English",
    Lang.HI.value: "हिन्दी",
}

# Devanagari Unicode block, used as the "this text is Hindi" heuristic
DEVANAGARI_START = 0x0900
DEVANAGARI_END = 0x097F

# Combined strings look like "English / हिंदी" or "हिंदी / English"
BILINGUAL_SEPARATOR = " / "


# ============================================================================
# Difficulty
# ============================================================================

class Difficulty(str, Enum):
    """Question difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DEFAULT_DIFFICULTY: str = Difficulty.MEDIUM.value


def normalize_difficulty(value: Optional[str]) -> str:
    """Map various terms to the 3 core difficulty levels."""
    if not isinstance(value, str):
        return DEFAULT_DIFFICULTY

    value = value.lower().strip()

    mapping = {
        # Easy mappings
        "easy": Difficulty.EASY.value,
        "simple": Difficulty.EASY.value,
        "basic": Difficulty.EASY.value,
        "beginner": Difficulty.EASY.value,

        # Medium mappings
        "medium": Difficulty.MEDIUM.value,
        "normal": Difficulty.MEDIUM.value,
        "moderate": Difficulty.MEDIUM.value,
        "intermediate": Difficulty.MEDIUM.value,

        # Hard mappings
        "hard": Difficulty.HARD.value,
        "difficult": Difficulty.HARD.value,
        "advanced": Difficulty.HARD.value,
        "expert": Difficulty.HARD.value,
    }

    return mapping.get(value, DEFAULT_DIFFICULTY)


# ============================================================================
# Questions & Quizzes
# ============================================================================

# Legacy single-letter answer ids
ANSWER_LETTER_MAP: Dict[str, int] = {"a": 0, "b": 1, "c": 2, "d": 3}

DEFAULT_POINTS = 10
DEFAULT_TIME_LIMIT = 30  # minutes

IMPORTED_QUIZ_TITLE = "Imported Quiz"
