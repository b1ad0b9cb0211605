"""Exceptions raised by the survey core and mapped to HTTP responses by the API."""


class SurveyError(Exception):
    """Base class for survey service errors."""

    status_code = 500


class NotFoundError(SurveyError):
    """Unknown category, unknown actor, or no answers recorded yet."""

    status_code = 404


class AnswerValidationError(SurveyError):
    """Submitted answer references a category or question outside the bank."""

    status_code = 400


class PersistenceError(SurveyError):
    """The answer document could not be written to disk."""

    status_code = 500


class QuestionBankError(SurveyError):
    """Question source is missing or malformed. Fatal at startup."""
