from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query
from typing import Any, Optional
import logging

from quiz_i18n.core.config import settings
from quiz_i18n.core.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from quiz_i18n.core.exceptions import QuizValidationError
from quiz_i18n.schemas import (
    LanguageInfo,
    LanguagesResponse,
    NormalizedQuiz,
    ResolvedContentResponse,
    ValidationErrorResponse,
)
from quiz_i18n.services.i18n_service import (
    detect_language,
    extract_content,
    get_language_name,
    is_supported,
    to_legacy_quiz,
)
from quiz_i18n.services.quiz_normalizer import normalize_incoming_quiz
from quiz_i18n.services.quiz_validator import validate_normalized_quiz

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_STR, tags=["multilingual"])


def get_request_language(
    lang: Optional[str] = Query(None, description="Explicit language code, overrides Accept-Language"),
    accept_language: Optional[str] = Header(None),
) -> str:
    """Explicit ?lang= wins when supported, otherwise the Accept-Language header decides."""
    if lang and is_supported(lang.lower()):
        return lang.lower()
    return detect_language(accept_language)


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    return LanguagesResponse(
        languages=[LanguageInfo(code=code, name=get_language_name(code)) for code in SUPPORTED_LANGUAGES],
        default=DEFAULT_LANGUAGE,
    )


@router.post("/quizzes/normalize", response_model=NormalizedQuiz)
async def normalize_quiz(
    payload: Any = Body(...),
    subjectId: Optional[str] = Query(None),
    topicId: Optional[str] = Query(None),
    subTopicId: Optional[str] = Query(None),
    strict: bool = Query(False, description="Reject quizzes that fail validation with 422"),
):
    """
    Normalize a raw quiz payload (object or bare question array) into the
    canonical bilingual structure. Nothing is persisted.
    """
    quiz = normalize_incoming_quiz(payload, subjectId, topicId, subTopicId)

    if strict:
        try:
            validate_normalized_quiz(quiz)
        except QuizValidationError as e:
            logger.warning(f"Rejected quiz payload: {len(e.problems)} validation problem(s)")
            raise HTTPException(
                status_code=422,
                detail=ValidationErrorResponse(message=str(e), problems=e.problems).model_dump(),
            )

    return quiz


@router.post("/content/resolve", response_model=ResolvedContentResponse)
async def resolve_content(
    content: Any = Body(...),
    language: str = Depends(get_request_language),
):
    """Collapse every multilingual leaf of a content tree to one language."""
    return ResolvedContentResponse(language=language, content=extract_content(content, language))


@router.post("/quizzes/legacy")
async def legacy_quiz(
    payload: Any = Body(...),
    language: str = Depends(get_request_language),
):
    """Normalize a payload and render it in the old single-language format."""
    quiz = normalize_incoming_quiz(payload)
    return to_legacy_quiz(quiz, language)
