"""
Survey router.

Endpoints for categories, questions, answers, sessions and generate payloads.
Handlers only translate between HTTP and SurveyService; errors raised by the
service are mapped to plain-text responses by the application.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import FileResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from dsa_survey.core.errors import AnswerValidationError, NotFoundError
from dsa_survey.core.identity import ActorIdentity
from dsa_survey.services.survey_service import SurveyService

router = APIRouter()


def get_survey_service(request: Request) -> SurveyService:
    return request.app.state.survey_service


# ========================================
# Request/Response Models
# ========================================


class ActorRequest(BaseModel):
    """Identifies the actor: exactly one of userId or sessionId."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId", min_length=1)
    session_id: Optional[str] = Field(None, alias="sessionId", min_length=1)

    def identity(self) -> ActorIdentity:
        if self.user_id and self.session_id:
            raise AnswerValidationError("Provide either userId or sessionId, not both")
        if self.session_id:
            return ActorIdentity.session(self.session_id)
        if self.user_id:
            return ActorIdentity.external(self.user_id)
        raise AnswerValidationError("userId or sessionId is required")


class AnswerRequest(ActorRequest):
    """A single answer submission."""

    category: Optional[str] = Field(None, description="Category name (ignored for general answers)")
    question: str = Field(..., description="Question text, exactly as served")
    answer: str = Field(..., description="Free-text answer")
    is_general: bool = Field(False, alias="isGeneral")


class GenerateRequest(ActorRequest):
    """Request for a generate payload."""

    category: str


class QuestionsResponse(BaseModel):
    category: str
    questions: List[str]


class AnswersResponse(BaseModel):
    category: str
    general: Dict[str, str]
    answers: Dict[str, str]


class GenerateResponse(BaseModel):
    id: str
    category: str
    general: Dict[str, str]
    answers: Dict[str, str]
    questions: List[str]


class GeneralQuestionsResponse(BaseModel):
    questions: List[str]


# ========================================
# Session & Question Endpoints
# ========================================


@router.post("/session", summary="Issue a new session")
def create_session(service: SurveyService = Depends(get_survey_service)) -> dict[str, str]:
    return {"sessionId": service.create_session()}


@router.get("/categories", response_model=List[str], summary="List award categories")
def list_categories(service: SurveyService = Depends(get_survey_service)) -> List[str]:
    return service.bank.list_categories()


@router.get("/questions/{category}", response_model=QuestionsResponse, summary="Questions for a category")
def get_questions(
    category: str,
    service: SurveyService = Depends(get_survey_service),
) -> QuestionsResponse:
    return QuestionsResponse(category=category, questions=service.bank.get_questions(category))


@router.get("/general-questions", response_model=GeneralQuestionsResponse, summary="Organization-wide questions")
def get_general_questions(
    service: SurveyService = Depends(get_survey_service),
) -> GeneralQuestionsResponse:
    return GeneralQuestionsResponse(questions=service.general_questions())


@router.get("/needs-general/{category}", summary="Does the category use general answers")
def needs_general(
    category: str,
    service: SurveyService = Depends(get_survey_service),
) -> Dict[str, Any]:
    return {"category": category, "needsGeneral": service.needs_general(category)}


# ========================================
# Answer Endpoints
# ========================================


@router.post("/answers", summary="Record one answer")
def submit_answer(
    req: AnswerRequest,
    service: SurveyService = Depends(get_survey_service),
) -> Response:
    """
    Record an answer for a user or session.

    - **userId** / **sessionId**: exactly one actor identifier
    - **category**: required unless **isGeneral** is true
    - **question**: must match a question served for the category

    Users are created on first write; sessions must come from POST /session.
    """
    identity = req.identity()
    service.record_answer(
        identity,
        category=req.category or "",
        question=req.question,
        answer=req.answer,
        is_general=req.is_general,
    )
    return Response(status_code=200)


@router.get("/answers/{actor_id}/{category}", response_model=AnswersResponse, summary="Answers so far")
def get_answers(
    actor_id: str,
    category: str,
    service: SurveyService = Depends(get_survey_service),
) -> AnswersResponse:
    view = service.get_answers(actor_id, category)
    return AnswersResponse(category=view.category, general=view.general, answers=view.answers)


@router.post("/generate", response_model=GenerateResponse, summary="Assemble a generate payload")
def generate(
    req: GenerateRequest,
    service: SurveyService = Depends(get_survey_service),
) -> GenerateResponse:
    """
    Bundle the category questions with the actor's answers.

    Returns 404 until at least one answer is recorded for the category.
    """
    identity = req.identity()
    payload = service.generate(identity.actor_id, req.category)
    return GenerateResponse(**payload.to_dict())


# ========================================
# Static
# ========================================


@router.get("/openapi.yaml", include_in_schema=False)
def openapi_yaml(request: Request) -> FileResponse:
    path = request.app.state.settings.openapi_path
    if not path.exists():
        logger.warning(f"OpenAPI document missing at {path}")
        raise NotFoundError("OpenAPI document not found")
    return FileResponse(path, media_type="application/yaml")
