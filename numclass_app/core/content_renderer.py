"""Markdown rendering for the instructions and category texts.

Both shells show the same copy: the Qt labels accept the rich-text subset of
HTML that markdown-it produces, and the browser page injects the fragments
as-is. Rendering happens once per request or page build; the inputs are
small static strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from numclass_app.constants.about import INSTRUCTIONS_FOOTER, INSTRUCTIONS_MARKDOWN
from numclass_app.core.models import Category


@dataclass(slots=True)
class ContentRenderer:
    """Converts markdown snippets into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html})

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without the surrounding paragraph."""

        return self._markdown.renderInline(markdown_text.strip())

    def render_instructions(self) -> str:
        return self.render_fragment(f"{INSTRUCTIONS_MARKDOWN}\n\n*{INSTRUCTIONS_FOOTER}*")

    def render_category_descriptions(self, categories: list[Category]) -> dict[str, str]:
        return {category.id: self.render_inline(category.description) for category in categories}


renderer = ContentRenderer()
