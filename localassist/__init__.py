"""Chat session storage, context documents, content drafting and prompt helpers."""

__version__ = "0.1.0"