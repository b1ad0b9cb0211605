"""
FastAPI application for the design system awards survey.

Provides REST API for:
- Award categories and their question bank
- Session issuing and answer recording
- Generate payloads for downstream document rendering
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

from config import Settings, get_settings
from dsa_survey import __version__
from dsa_survey.core.errors import QuestionBankError, SurveyError
from dsa_survey.core.log_config import configure_logging
from dsa_survey.core.question_bank import load_question_bank
from dsa_survey.services.survey_service import SurveyService
from dsa_survey.storage.answer_store import AnswerStore


def build_service(settings: Settings, mirror_questions: bool = True) -> SurveyService:
    """
    Load the question bank and open the answer store.

    The server mirrors the bank into the document on startup; read-only
    callers pass ``mirror_questions=False`` so the document is left alone.

    Raises:
        QuestionBankError: Question source missing or malformed.
        PersistenceError: Answer document unreadable or unwritable.
    """
    bank = load_question_bank(settings.questions_path)
    store = AnswerStore(settings.db_path)
    if mirror_questions:
        store.mirror_questions(bank)
    return SurveyService(
        bank=bank,
        store=store,
        categories_requiring_general=settings.categories_requiring_general,
        general_questions=settings.general_questions,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; startup fails if the question bank cannot be loaded."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown events."""
        configure_logging(settings)
        logger.info("Starting dsa-survey service...")
        try:
            app.state.survey_service = build_service(settings)
        except QuestionBankError as e:
            logger.error(f"Cannot serve traffic without a question bank: {e}")
            raise
        logger.info(f"Service ready on {settings.host}:{settings.port}")

        yield

        logger.info("Shutting down dsa-survey service...")

    app = FastAPI(
        title="DSA Survey API",
        description="""
    Question bank and answer collection for design system award entries.

    ## Flow

    ```
    POST /session            -> sessionId
    GET  /questions/{cat}    -> questions to ask
    POST /answers            -> one answer at a time
    POST /generate           -> questions + answers for document generation
    ```
    """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SurveyError)
    async def survey_error_handler(request: Request, exc: SurveyError) -> PlainTextResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.get("/health", tags=["Health"])
    def health_check(request: Request) -> dict[str, Any]:
        """Service status with question bank and store counts."""
        service: SurveyService = request.app.state.survey_service
        return {
            "status": "healthy",
            "version": __version__,
            "categories": len(service.bank),
            "actors": len(service.store.list_actors()),
            "config": settings.get_survey_config(),
        }

    from dsa_survey.api.routers import survey_router

    app.include_router(survey_router.router, tags=["Survey"])
    return app


app = create_app()
