"""Session management on top of the session store.

Storage failures are logged and softened: reads fall back to empty
results and writes are dropped, so callers keep working without storage.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from typing import List, Optional, Union

from .database import Database, DatabaseNotInitialized
from .models import ChatMessage, Session

log = logging.getLogger(__name__)

DEFAULT_TITLE = "New Chat"

_STORAGE_ERRORS = (DatabaseNotInitialized, sqlite3.Error)


def _parse_id(value: Union[str, uuid.UUID]) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class SessionService:
    """Creates, lists, renames and deletes chat sessions and their messages."""

    def __init__(self, database: Optional[Database]) -> None:
        self._database = database

    def _db(self) -> Database:
        if self._database is None:
            raise DatabaseNotInitialized("Database not initialized")
        return self._database

    def create_session(self, title: Optional[str] = None) -> Session:
        """Create a session, persisting it when possible."""
        session = Session.new(DEFAULT_TITLE if title is None else title)
        try:
            self._db().create_session(session)
        except _STORAGE_ERRORS as exc:
            log.warning("Error creating session in database: %s", exc)
        return session

    def get_sessions(self) -> List[Session]:
        """Return all sessions, or an empty list if storage fails."""
        try:
            return self._db().get_all_sessions()
        except _STORAGE_ERRORS as exc:
            log.warning("Error loading sessions: %s", exc)
            return []

    def get_session(self, session_id: Union[str, uuid.UUID]) -> Optional[Session]:
        """Return the session with this id, or None."""
        parsed = _parse_id(session_id)
        if parsed is None:
            return None
        return next((s for s in self.get_sessions() if s.id == parsed), None)

    def delete_session(self, session_id: Union[str, uuid.UUID]) -> None:
        """Delete a session; raises ValueError for a malformed id."""
        parsed = _parse_id(session_id)
        if parsed is None:
            raise ValueError("Invalid session ID")
        try:
            self._db().delete_session(parsed)
        except _STORAGE_ERRORS as exc:
            log.warning("Error deleting session: %s", exc)

    def update_session_title(self, session_id: Union[str, uuid.UUID], title: str) -> None:
        """Rename a session; raises ValueError for a malformed id."""
        parsed = _parse_id(session_id)
        if parsed is None:
            raise ValueError("Invalid session ID")
        try:
            self._db().update_session_title(parsed, title)
        except _STORAGE_ERRORS as exc:
            log.warning("Error updating session title: %s", exc)

    def save_message(self, message: ChatMessage) -> None:
        """Persist a message when possible."""
        try:
            self._db().save_message(message)
        except _STORAGE_ERRORS as exc:
            log.warning("Error saving message: %s", exc)

    def get_session_messages(self, session_id: Union[str, uuid.UUID]) -> List[ChatMessage]:
        """Return a session's messages, or an empty list."""
        parsed = _parse_id(session_id)
        if parsed is None:
            return []
        try:
            return self._db().get_session_messages(parsed)
        except _STORAGE_ERRORS as exc:
            log.warning("Error loading messages: %s", exc)
            return []