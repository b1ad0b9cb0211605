"""
Actor identities.

An actor is whoever answers the survey. Callers either bring their own
identifier (``userId``) or ask the server for a session (``sessionId``).
Both kinds share one flat namespace in the answer store.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum


class ActorKind(str, Enum):
    """Where an actor identifier came from."""

    USER = "user"
    SESSION = "session"

    @property
    def collection(self) -> str:
        """Top-level key of the answer document holding this kind."""
        return "users" if self is ActorKind.USER else "sessions"


@dataclass(frozen=True)
class ActorIdentity:
    actor_id: str
    kind: ActorKind

    @classmethod
    def external(cls, actor_id: str) -> "ActorIdentity":
        """Caller-supplied opaque identifier."""
        return cls(actor_id=actor_id, kind=ActorKind.USER)

    @classmethod
    def generated(cls) -> "ActorIdentity":
        """Fresh server-issued session identifier (random 128-bit token)."""
        return cls(actor_id=uuid.uuid4().hex, kind=ActorKind.SESSION)

    @classmethod
    def session(cls, actor_id: str) -> "ActorIdentity":
        """Reference to a previously issued session."""
        return cls(actor_id=actor_id, kind=ActorKind.SESSION)

    def __str__(self) -> str:
        return self.actor_id
