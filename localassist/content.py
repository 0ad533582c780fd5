"""Article outlines, section prompts and export of written content."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from markdown_it import MarkdownIt

Section = Tuple[str, str]

DEFAULT_OUTLINE: Tuple[Section, ...] = (
    ("Introduction", "Write an engaging introduction"),
    ("Background", "Provide context and background"),
    ("Main Content", "Elaborate on the main topic"),
    ("Conclusion", "Summarize key points"),
)

_IMAGE_CONTEXT_CHARS = 500
_HEADING = "## "

_markdown = MarkdownIt("commonmark", {"html": False})


def parse_outline_response(response: str) -> List[Section]:
    """Split a model's outline into ``(title, description)`` pairs.

    Each ``## `` heading starts a section; the non-blank lines after it
    are joined with single spaces into its description. Text before the
    first heading is ignored.
    """
    sections: List[Section] = []
    title = None
    content: List[str] = []

    for line in response.split("\n"):
        trimmed = line.strip()
        if trimmed.startswith(_HEADING):
            if title is not None:
                sections.append((title, " ".join(content).strip()))
            title = trimmed[len(_HEADING):].strip()
            content = []
        elif title is not None and trimmed:
            content.append(trimmed)

    if title is not None:
        sections.append((title, " ".join(content).strip()))
    return sections


def outline_or_default(response: str) -> List[Section]:
    """Parse an outline, falling back to a standard four-part outline."""
    return parse_outline_response(response) or list(DEFAULT_OUTLINE)


def outline_prompt(title: str, template_name: str) -> str:
    """Build the prompt asking for an article outline."""
    return (
        f'Generate an article outline for: "{title}"\n'
        "\n"
        f"Template style: {template_name}\n"
        "\n"
        "Create 4-6 sections with clear titles. For each section, provide a brief "
        "description of what should be covered.\n"
        "\n"
        "Format your response as:\n"
        "## Section Title 1\n"
        "Brief description of what this section should cover.\n"
        "\n"
        "## Section Title 2\n"
        "Brief description of what this section should cover.\n"
        "\n"
        "(Continue for all sections)\n"
        "\n"
        "Only output the sections, no introduction or conclusion about the outline itself."
    )


def section_prompt(section_title: str, context: str) -> str:
    """Build the prompt asking for the body of one section."""
    return (
        f'Write content for the section "{section_title}" in an article titled "{context}".\n'
        "\n"
        "Requirements:\n"
        "- Write 2-4 paragraphs of well-structured content\n"
        "- Be informative and engaging\n"
        "- Use clear, professional language\n"
        "- Include specific details and examples where appropriate\n"
        "- Do not include the section title in your response\n"
        "\n"
        "Write the section content now:"
    )


def image_prompt(text: str) -> str:
    """Build the prompt asking for an illustration prompt for ``text``.

    Only the first 500 characters of the article are included.
    """
    excerpt = text[:_IMAGE_CONTEXT_CHARS]
    return (
        "Based on the following article content, generate a single image prompt "
        "that would create a visually appealing illustration.\n"
        "\n"
        "Article content:\n"
        f"{excerpt}\n"
        "\n"
        "Generate a concise image prompt (1-2 sentences) that describes a scene, "
        "concept, or visual that would complement this content. Focus on visual "
        "elements, style, and mood.\n"
        "\n"
        "Image prompt:"
    )


def export_to_markdown(title: str, sections: Iterable[Section]) -> str:
    """Render a titled article as Markdown."""
    parts = [f"# {title}\n\n"]
    for section_title, content in sections:
        parts.append(f"## {section_title}\n\n{content}\n\n")
    return "".join(parts)


def export_to_html(title: str, sections: Iterable[Section]) -> str:
    """Render a titled article as HTML via its Markdown form."""
    return _markdown.render(export_to_markdown(title, sections))