from localassist.rag import Document, augment_prompt, format_search_context


DOCS = [
    Document(title="Rust", body="A systems language.", score=0.5),
    Document(title="Python", body="A scripting language.", score=0.25),
]


def test_empty_context_is_empty_string():
    assert format_search_context([]) == ""


def test_single_document_format():
    text = format_search_context([Document(title="Rust", body="A systems language.", score=0.5)])
    assert text == "[Reference 1] (Relevance: 50%)\nTitle: Rust\nA systems language.\n"


def test_documents_are_numbered_and_separated():
    text = format_search_context(DOCS)
    parts = text.split("\n---\n")
    assert len(parts) == len(DOCS)
    assert text.count("[Reference") == len(DOCS)
    assert parts[0].startswith("[Reference 1]")
    assert parts[1].startswith("[Reference 2]")
    assert "Title: Python\nA scripting language.\n" in parts[1]


def test_accepts_generator():
    text = format_search_context(d for d in DOCS)
    assert text == format_search_context(DOCS)


def test_augment_without_documents_returns_query():
    assert augment_prompt("What is Rust?", []) == "What is Rust?"


def test_augment_with_documents():
    prompt = augment_prompt("What is Rust?", DOCS)
    assert prompt.startswith("Use the following context to answer the question:\n\n")
    assert prompt.endswith("\n\n---\n\nQuestion: What is Rust?")
    assert "### Rust\nA systems language.\n\n### Python\nA scripting language." in prompt
    assert "Relevance" not in prompt