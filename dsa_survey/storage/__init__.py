"""Answer persistence (single JSON document, rewritten on every write)."""

from .answer_store import ActorRecord, AnswerStore

__all__ = ["ActorRecord", "AnswerStore"]
