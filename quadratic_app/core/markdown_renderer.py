"""Markdown rendering for quiz text shared by Qt labels and the HTML export.

Architecture note:
    Prompts, options and explanations are rendered once into inline HTML
    fragments. Qt shows them through rich-text ``QLabel``s and the export
    embeds the same fragments, so both views format the text identically.
    Raw HTML in the source is escaped. No math typesetting library is loaded
    because the exported page must work offline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown strings into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable(
            "strikethrough"
        )

    def render_inline(self, markdown_text: str) -> str:
        """Render a single-paragraph string without a wrapping ``<p>``."""
        return self._markdown.renderInline(markdown_text.strip())

    def render_numbered_prompt(self, number: int, prompt: str) -> str:
        """Render a quiz prompt headed by its 1-based position in the quiz."""
        return f"<b>{number}.</b> {self.render_inline(prompt)}"

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)


renderer = MarkdownRenderer()
# Shared instance; the app is single-threaded.
