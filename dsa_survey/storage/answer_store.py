"""
Answer persistence for survey actors.

All state lives in a single JSON document:

    {
      "users":     {"<userId>":    {"general": {...}, "categories": {...}}},
      "sessions":  {"<sessionId>": {"general": {...}, "categories": {...}}},
      "questions": {"<category>":  ["question", ...]}
    }

The document is held in memory and rewritten wholesale after every mutation.
Each read-modify-flush cycle runs under one lock, so concurrent writes from
the API threadpool cannot interleave inside a single process.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
import threading
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from loguru import logger

from dsa_survey.core.errors import PersistenceError
from dsa_survey.core.identity import ActorIdentity, ActorKind
from dsa_survey.core.question_bank import QuestionBank

COLLECTIONS = ("users", "sessions")


@dataclass
class ActorRecord:
    """Answers recorded for one actor."""

    general: dict[str, str] = field(default_factory=dict)
    categories: dict[str, dict[str, str]] = field(default_factory=dict)

    def answers_for(self, category: str) -> dict[str, str]:
        return dict(self.categories.get(category, {}))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ActorRecord":
        """Create from dictionary."""
        return cls(
            general=dict(data.get("general", {})),
            categories={k: dict(v) for k, v in data.get("categories", {}).items()},
        )


def _empty_document() -> dict:
    return {"users": {}, "sessions": {}, "questions": {}}


class AnswerStore:
    """
    Manages the answer document.

    Records are created lazily: on first answer for an external user, or
    when a session is issued.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data = self._read()

    # ------------------------------------------------------------------
    # Disk I/O
    # ------------------------------------------------------------------

    def _read(self) -> dict:
        if not self.path.exists():
            logger.info(f"No answer document at {self.path}, starting empty")
            return _empty_document()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Cannot read answer document {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceError(f"Answer document {self.path} is not a JSON object")

        for key, default in _empty_document().items():
            data.setdefault(key, default)
        return data

    def _flush(self) -> None:
        """Rewrite the whole document. Caller must hold the lock."""
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".db-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise PersistenceError(f"Failed to write answer document {self.path}: {e}") from e

    def _mutate(self, apply) -> None:
        """Apply a change and flush; the in-memory document is restored if the flush fails."""
        with self._lock:
            snapshot = copy.deepcopy(self._data)
            apply(self._data)
            try:
                self._flush()
            except PersistenceError:
                self._data = snapshot
                raise

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find(self, actor_id: str) -> Optional[dict]:
        for collection in ("sessions", "users"):
            record = self._data[collection].get(actor_id)
            if record is not None:
                return record
        return None

    def exists(self, identity: ActorIdentity) -> bool:
        return identity.actor_id in self._data[identity.kind.collection]

    def kind_of(self, actor_id: str) -> Optional[ActorKind]:
        """Which collection holds the actor, sessions first; None if unknown."""
        with self._lock:
            for kind in (ActorKind.SESSION, ActorKind.USER):
                if actor_id in self._data[kind.collection]:
                    return kind
        return None

    def get_record(self, actor_id: str) -> Optional[ActorRecord]:
        """Return a copy of the actor's record, or None if unknown."""
        with self._lock:
            record = self._find(actor_id)
            return ActorRecord.from_dict(record) if record is not None else None

    def get_general(self, actor_id: str) -> dict[str, str]:
        record = self.get_record(actor_id)
        return dict(record.general) if record else {}

    def get_answers(self, actor_id: str, category: str) -> dict[str, str]:
        record = self.get_record(actor_id)
        return record.answers_for(category) if record else {}

    def list_actors(self, kind: ActorKind | None = None) -> list[str]:
        with self._lock:
            collections = [kind.collection] if kind else list(COLLECTIONS)
            return [actor_id for c in collections for actor_id in self._data[c]]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def ensure_actor(self, identity: ActorIdentity) -> None:
        """Create an empty record for the actor if none exists."""
        if self.exists(identity):
            return

        def apply(data: dict) -> None:
            data[identity.kind.collection].setdefault(identity.actor_id, ActorRecord().to_dict())

        self._mutate(apply)

    def create_session(self) -> str:
        """Issue a new session identifier with an empty record."""
        identity = ActorIdentity.generated()

        def apply(data: dict) -> None:
            data["sessions"][identity.actor_id] = ActorRecord().to_dict()

        self._mutate(apply)
        logger.info(f"Created session {identity.actor_id}")
        return identity.actor_id

    def record_answer(
        self,
        identity: ActorIdentity,
        category: str,
        question: str,
        answer: str,
        is_general: bool,
    ) -> None:
        """Store one answer. The same call repeated overwrites, never duplicates."""

        def apply(data: dict) -> None:
            record = data[identity.kind.collection].setdefault(
                identity.actor_id, ActorRecord().to_dict()
            )
            if is_general:
                record.setdefault("general", {})[question] = answer
            else:
                record.setdefault("categories", {}).setdefault(category, {})[question] = answer

        self._mutate(apply)
        scope = "general" if is_general else category
        logger.debug(f"Recorded answer for {identity.actor_id} [{scope}]: {question!r}")

    def mirror_questions(self, bank: QuestionBank) -> None:
        """Overwrite the question mirror with the bank loaded at startup."""

        def apply(data: dict) -> None:
            data["questions"] = bank.to_dict()

        self._mutate(apply)
