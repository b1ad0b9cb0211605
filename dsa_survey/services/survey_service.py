"""
Survey aggregation service.

Composes the question bank and the answer store into the payloads served by
the API: per-category answer views and the generate bundle handed to
downstream document renderers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

from loguru import logger

from dsa_survey.core.errors import AnswerValidationError, NotFoundError
from dsa_survey.core.identity import ActorIdentity, ActorKind
from dsa_survey.core.question_bank import QuestionBank
from dsa_survey.storage.answer_store import AnswerStore


@dataclass
class AnswerView:
    """What an actor has answered so far for one category."""

    category: str
    general: dict[str, str]
    answers: dict[str, str]


@dataclass
class GeneratePayload:
    """Questions paired with recorded answers for one actor and category."""

    id: str
    category: str
    general: dict[str, str]
    answers: dict[str, str]
    questions: list[str]

    def to_dict(self) -> dict:
        return asdict(self)


class SurveyService:
    """Read/write operations over the question bank and answer store."""

    def __init__(
        self,
        bank: QuestionBank,
        store: AnswerStore,
        categories_requiring_general: Iterable[str],
        general_questions: Iterable[str],
    ):
        self.bank = bank
        self.store = store
        self._requires_general = frozenset(categories_requiring_general)
        self._general_questions = tuple(general_questions)

    # ========================================
    # Configuration lookups
    # ========================================

    def needs_general(self, category: str) -> bool:
        return category in self._requires_general

    def general_questions(self) -> list[str]:
        return list(self._general_questions)

    # ========================================
    # Answers
    # ========================================

    def create_session(self) -> str:
        return self.store.create_session()

    def validate_answer(self, category: str, question: str, is_general: bool) -> None:
        """
        Reject answers that reference something outside the question bank.

        General answers are checked against the general question list; the
        category is not required for them.
        """
        if is_general:
            if question not in self._general_questions:
                raise AnswerValidationError(f"Unknown general question: {question}")
            return

        if not self.bank.has_category(category):
            raise AnswerValidationError(f"Unknown category: {category}")
        if not self.bank.has_question(category, question):
            raise AnswerValidationError(
                f"Question not found in category '{category}': {question}"
            )

    def record_answer(
        self,
        identity: ActorIdentity,
        category: str,
        question: str,
        answer: str,
        is_general: bool = False,
    ) -> None:
        """
        Validate and store an answer.

        External users are created on first write. Sessions must have been
        issued by ``create_session`` first. Users and sessions share one id
        namespace, so a user id that names an existing session is refused.

        Raises:
            AnswerValidationError: Unknown category or question, or a user id
                that collides with a session.
            NotFoundError: Session identifier was never issued.
            PersistenceError: The document could not be flushed.
        """
        self.validate_answer(category, question, is_general)

        existing = self.store.kind_of(identity.actor_id)
        if identity.kind is ActorKind.SESSION:
            if existing is not ActorKind.SESSION:
                raise NotFoundError("Session not found")
        elif existing is ActorKind.SESSION:
            raise AnswerValidationError(
                f"Identifier '{identity.actor_id}' belongs to a session; send it as sessionId"
            )
        elif existing is None:
            self.store.ensure_actor(identity)
            logger.info(f"Registered user {identity.actor_id}")

        self.store.record_answer(identity, category, question, answer, is_general)

    def get_answers(self, actor_id: str, category: str) -> AnswerView:
        """
        Answers recorded so far for a category, with the general answers.

        A category with nothing recorded, including one outside the question
        bank, yields an empty ``answers`` map.

        Raises:
            NotFoundError: Unknown actor.
        """
        record = self.store.get_record(actor_id)
        if record is None:
            raise NotFoundError("Actor not found")

        return AnswerView(
            category=category,
            general=dict(record.general),
            answers=record.answers_for(category),
        )

    # ========================================
    # Generate
    # ========================================

    def generate(self, actor_id: str, category: str) -> GeneratePayload:
        """
        Assemble the generate payload for an actor and category.

        Raises:
            NotFoundError: No answers recorded for that category.
        """
        answers = self.store.get_answers(actor_id, category)
        if not answers:
            raise NotFoundError("No answers found for that category.")

        logger.info(f"Generating payload for {actor_id} [{category}] ({len(answers)} answers)")
        return GeneratePayload(
            id=actor_id,
            category=category,
            general=self.store.get_general(actor_id),
            answers=answers,
            questions=self.bank.get_questions(category),
        )
