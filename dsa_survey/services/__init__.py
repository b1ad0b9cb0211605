"""Survey aggregation services."""

from .survey_service import AnswerView, GeneratePayload, SurveyService

__all__ = ["AnswerView", "GeneratePayload", "SurveyService"]
