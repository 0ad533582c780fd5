"""Context blocks built from scored documents for retrieval-augmented prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Document:
    """A retrieved document with its similarity score in [0, 1]."""

    title: str
    body: str
    score: float = 0.0


def format_search_context(documents: Iterable[Document]) -> str:
    """Number the documents and show each one's relevance as a percentage.

    Returns an empty string when there are no documents.
    """
    return "\n---\n".join(
        f"[Reference {i}] (Relevance: {doc.score * 100.0:.0f}%)\n"
        f"Title: {doc.title}\n{doc.body}\n"
        for i, doc in enumerate(documents, start=1)
    )


def augment_prompt(query: str, documents: Sequence[Document]) -> str:
    """Prefix ``query`` with the documents as context; unchanged if there are none."""
    if not documents:
        return query
    context = "\n\n".join(f"### {doc.title}\n{doc.body}" for doc in documents)
    return (
        "Use the following context to answer the question:\n\n"
        f"{context}\n\n---\n\nQuestion: {query}"
    )