import pytest

from localassist.content import (
    DEFAULT_OUTLINE,
    export_to_html,
    export_to_markdown,
    image_prompt,
    outline_or_default,
    outline_prompt,
    parse_outline_response,
    section_prompt,
)


def test_parse_outline_response():
    response = """## Introduction
This section introduces the topic.

## Main Content
This section covers the main points.

## Conclusion
This section wraps up."""

    sections = parse_outline_response(response)
    assert len(sections) == 3
    assert sections[0][0] == "Introduction"
    assert sections[1][0] == "Main Content"
    assert sections[2][0] == "Conclusion"
    assert sections[0][1] == "This section introduces the topic."


def test_parse_joins_description_lines_and_skips_preamble():
    response = "Here is the outline:\n## Intro\n  first line  \n\nsecond line\r\n## End\n"
    assert parse_outline_response(response) == [
        ("Intro", "first line second line"),
        ("End", ""),
    ]


def test_parse_without_headings_is_empty():
    assert parse_outline_response("just some text\nno headings") == []


def test_outline_or_default_falls_back():
    assert outline_or_default("nothing useful") == list(DEFAULT_OUTLINE)
    assert outline_or_default("## Only\nbody") == [("Only", "body")]


def test_default_outline_titles():
    assert [t for t, _ in outline_or_default("")] == [
        "Introduction",
        "Background",
        "Main Content",
        "Conclusion",
    ]


def test_outline_prompt_mentions_title_and_template():
    prompt = outline_prompt("Rust Tips", "listicle")
    assert prompt.startswith('Generate an article outline for: "Rust Tips"')
    assert "Template style: listicle" in prompt


def test_section_prompt_mentions_section_and_article():
    prompt = section_prompt("Setup", "Getting Started")
    assert prompt.startswith('Write content for the section "Setup" in an article titled "Getting Started".')
    assert prompt.endswith("Write the section content now:")


def test_image_prompt_truncates_article():
    prompt = image_prompt("x" * 600)
    assert "x" * 500 in prompt
    assert "x" * 501 not in prompt
    assert prompt.endswith("Image prompt:")


def test_export_to_markdown():
    md = export_to_markdown("Title", [("One", "Body one"), ("Two", "Body two")])
    assert md == "# Title\n\n## One\n\nBody one\n\n## Two\n\nBody two\n\n"


def test_export_to_markdown_no_sections():
    assert export_to_markdown("Only", []) == "# Only\n\n"


def test_export_to_html():
    html = export_to_html("Title", [("One", "Body one")])
    assert "<h1>Title</h1>" in html
    assert "<h2>One</h2>" in html
    assert "<p>Body one</p>" in html


@pytest.mark.parametrize("body", ["<script>alert(1)</script>"])
def test_export_to_html_does_not_pass_raw_html(body):
    html = export_to_html("T", [("S", body)])
    assert "<script>" not in html