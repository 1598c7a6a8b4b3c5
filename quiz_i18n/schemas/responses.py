"""Response schemas."""

from pydantic import BaseModel, Field
from typing import Any, List


class LanguageInfo(BaseModel):
    code: str
    name: str


class LanguagesResponse(BaseModel):
    languages: List[LanguageInfo]
    default: str


class ResolvedContentResponse(BaseModel):
    """Content tree collapsed to a single language."""
    language: str
    content: Any = None


class ValidationErrorResponse(BaseModel):
    """Error response when a normalized quiz fails strict validation."""
    error_type: str = Field(default="quiz_validation")
    message: str
    problems: List[str] = Field(default_factory=list)
