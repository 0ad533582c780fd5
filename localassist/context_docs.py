"""Plain-text documents kept in a folder as retrieval context."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

log = logging.getLogger(__name__)

_TEXT_SUFFIXES = {".md", ".txt", ".json"}
_PREVIEW_CHARS = 100


@dataclass(frozen=True)
class ContextFile:
    """A context document's name, size in bytes and a short preview."""

    name: str
    size: int
    preview: str


def sanitize_title(title: str) -> str:
    """Replace every character other than letters, digits, '-' and '_' with '_'."""
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in title)


def _check_filename(filename: str) -> None:
    if ".." in filename or "/" in filename:
        raise ValueError("Invalid filename")


def _preview(content: str) -> str:
    preview = content[:_PREVIEW_CHARS]
    if len(content.encode("utf-8")) > _PREVIEW_CHARS:
        preview += "..."
    return preview


class ContextStore:
    """Lists, adds, reads and deletes context documents in one directory."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def list_files(self) -> List[ContextFile]:
        """Return the Markdown, text and JSON files, sorted by name."""
        self._ensure_directory()
        files = []
        for path in self.directory.iterdir():
            if not path.is_file() or path.suffix not in _TEXT_SUFFIXES:
                continue
            try:
                size = path.stat().st_size
            except OSError:
                size = 0
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                content = ""
            files.append(ContextFile(name=path.name, size=size, preview=_preview(content)))
        files.sort(key=lambda f: f.name)
        return files

    def add_document(self, title: str, content: str) -> Path:
        """Save ``content`` under a file name derived from ``title``."""
        self._ensure_directory()
        filename = sanitize_title(title)
        if not filename.endswith((".md", ".txt")):
            filename += ".md"
        path = self.directory / filename
        path.write_text(content, encoding="utf-8", newline="")
        log.info("Added context document: %s", path)
        return path

    def delete_document(self, filename: str) -> None:
        """Remove a document; raises ValueError for a path-like name."""
        _check_filename(filename)
        path = self.directory / filename
        path.unlink()
        log.info("Deleted context document: %s", path)

    def get_document(self, filename: str) -> str:
        """Return a document's text; raises ValueError for a path-like name."""
        _check_filename(filename)
        return (self.directory / filename).read_text(encoding="utf-8")