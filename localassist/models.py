"""Chat sessions and messages."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: str) -> "ChatRole":
        """Return the role stored as ``value``; raise ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown chat role: {value!r}") from None


@dataclass
class Session:
    """A conversation with its title and timestamps."""

    id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(cls, title: str) -> "Session":
        """Create a session with a fresh id, stamped with the current time."""
        now = _utcnow()
        return cls(id=uuid.uuid4(), title=title, created_at=now, updated_at=now)


@dataclass
class ChatMessage:
    """One message belonging to a session."""

    id: uuid.UUID
    session_id: uuid.UUID
    role: ChatRole
    content: str
    created_at: datetime

    @classmethod
    def new(cls, session_id: uuid.UUID, role: ChatRole, content: str) -> "ChatMessage":
        """Create a message with a fresh id, stamped with the current time."""
        return cls(
            id=uuid.uuid4(),
            session_id=session_id,
            role=role,
            content=content,
            created_at=_utcnow(),
        )