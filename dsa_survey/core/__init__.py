"""Core survey model: question bank, actor identity, errors."""

from .errors import (
    AnswerValidationError,
    NotFoundError,
    PersistenceError,
    QuestionBankError,
    SurveyError,
)
from .identity import ActorIdentity, ActorKind
from .question_bank import QuestionBank, load_question_bank

__all__ = [
    "ActorIdentity",
    "ActorKind",
    "AnswerValidationError",
    "NotFoundError",
    "PersistenceError",
    "QuestionBank",
    "QuestionBankError",
    "SurveyError",
    "load_question_bank",
]
