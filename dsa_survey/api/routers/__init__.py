"""API routers for dsa-survey."""

from dsa_survey.api.routers import survey_router

__all__ = ["survey_router"]
