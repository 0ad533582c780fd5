"""SQLite persistence for sessions and messages."""

from __future__ import annotations

import logging
import re
import sqlite3
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .models import ChatMessage, ChatRole, Session

log = logging.getLogger(__name__)

_PROJECT_MARKER = "pyproject.toml"
_MAX_ROOT_DEPTH = 10
_DB_FILENAME = "assistant.db"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS sessions (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS messages (
        id TEXT PRIMARY KEY,
        session_id TEXT NOT NULL,
        role TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL,
        FOREIGN KEY (session_id) REFERENCES sessions(id) ON DELETE CASCADE
    )""",
    "CREATE INDEX IF NOT EXISTS idx_messages_session ON messages(session_id)",
)

_FRACTION = re.compile(r"\.(\d{6})\d+")


class DatabaseNotInitialized(RuntimeError):
    """Raised when the database is used before it is open or after it is closed."""


def _format_ts(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _parse_ts(text: str) -> datetime:
    text = _FRACTION.sub(r".\1", text.strip())
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        raise ValueError(f"timestamp without offset: {text!r}")
    return moment.astimezone(timezone.utc)


def find_project_root(start: Union[str, Path]) -> Path:
    """Walk up from ``start`` looking for a project marker file.

    Falls back to the current working directory when none is found
    within ten levels.
    """
    path = Path(start).absolute()
    for _ in range(_MAX_ROOT_DEPTH):
        if (path / _PROJECT_MARKER).exists():
            return path
        if path.parent == path:
            break
        path = path.parent
    return Path.cwd()


def open_database(data_dir: Optional[Union[str, Path]] = None) -> "Database":
    """Create ``data_dir`` if needed and open the assistant database in it.

    Without a directory, the ``data`` folder of the project root is used.
    """
    if data_dir is None:
        data_dir = find_project_root(Path.cwd()) / "data"
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    db_path = data_dir / _DB_FILENAME
    log.info("Initializing database: %s", db_path)
    return Database(db_path)


class Database:
    """A thread-safe connection to the session store."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
            str(self.path), check_same_thread=False
        )
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    def close(self) -> None:
        """Close the connection; further use raises DatabaseNotInitialized."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            if self._conn is None:
                raise DatabaseNotInitialized("Database not initialized")
            with self._conn:
                yield self._conn

    def create_session(self, session: Session) -> None:
        """Insert a new session; raises sqlite3.IntegrityError on a duplicate id."""
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO sessions (id, title, created_at, updated_at) VALUES (?, ?, ?, ?)",
                (
                    str(session.id),
                    session.title,
                    _format_ts(session.created_at),
                    _format_ts(session.updated_at),
                ),
            )

    def get_all_sessions(self) -> List[Session]:
        """Return all sessions, most recently updated first."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT id, title, created_at, updated_at FROM sessions "
                "ORDER BY updated_at DESC"
            ).fetchall()
        sessions = []
        for id_str, title, created_str, updated_str in rows:
            try:
                sessions.append(
                    Session(
                        id=uuid.UUID(id_str),
                        title=title,
                        created_at=_parse_ts(created_str),
                        updated_at=_parse_ts(updated_str),
                    )
                )
            except (ValueError, TypeError, AttributeError):
                continue
        return sessions

    def update_session_title(self, session_id: uuid.UUID, title: str) -> None:
        """Rename a session and stamp it as updated now."""
        with self._transaction() as conn:
            conn.execute(
                "UPDATE sessions SET title = ?, updated_at = ? WHERE id = ?",
                (title, _format_ts(datetime.now(timezone.utc)), str(session_id)),
            )

    def delete_session(self, session_id: uuid.UUID) -> None:
        """Delete a session together with all of its messages."""
        with self._transaction() as conn:
            conn.execute("DELETE FROM messages WHERE session_id = ?", (str(session_id),))
            conn.execute("DELETE FROM sessions WHERE id = ?", (str(session_id),))

    def save_message(self, message: ChatMessage) -> None:
        """Store or replace a message and touch its session's update time."""
        with self._transaction() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO messages "
                "(id, session_id, role, content, created_at) VALUES (?, ?, ?, ?, ?)",
                (
                    str(message.id),
                    str(message.session_id),
                    ChatRole(message.role).value,
                    message.content,
                    _format_ts(message.created_at),
                ),
            )
            conn.execute(
                "UPDATE sessions SET updated_at = ? WHERE id = ?",
                (_format_ts(datetime.now(timezone.utc)), str(message.session_id)),
            )

    def get_session_messages(self, session_id: uuid.UUID) -> List[ChatMessage]:
        """Return the messages of a session, oldest first."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT id, session_id, role, content, created_at FROM messages "
                "WHERE session_id = ? ORDER BY created_at ASC",
                (str(session_id),),
            ).fetchall()
        messages = []
        for id_str, session_str, role_str, content, created_str in rows:
            try:
                messages.append(
                    ChatMessage(
                        id=uuid.UUID(id_str),
                        session_id=uuid.UUID(session_str),
                        role=ChatRole.parse(role_str),
                        content=content,
                        created_at=_parse_ts(created_str),
                    )
                )
            except (ValueError, TypeError, AttributeError):
                continue
        return messages