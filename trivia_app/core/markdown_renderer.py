"""Markdown rendering helpers shared by the Qt window and the audience page.

Architecture note:
    Slides are authored as plain text with light markdown (emphasis, line
    breaks, the odd table). Both the desktop window and the browser receive
    the same HTML fragment from this renderer so the two views never drift.
    Qt rich text only understands a subset of HTML, which is why raw HTML in
    the source text stays disabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts authored markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML block fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without the surrounding paragraph tag."""

        return self._markdown.renderInline(markdown_text.strip())


renderer = MarkdownRenderer()
# Shared instance; MarkdownIt is safe for concurrent read-only renders, so
# the Qt thread and the API server thread can both use it.
