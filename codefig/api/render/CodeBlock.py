"""Standalone codeblock tag object."""

from ..highlight.Highlighter import Highlighter
from ..highlight.PygmentsHighlighter import PygmentsHighlighter
from ..tag.parse_tag_arguments import parse_tag_arguments
from .render_codeblock import render_codeblock


class CodeBlock:
    """One codeblock tag invocation.

    Arguments are parsed once on construction; ``render`` may be called any
    number of times and always returns the same output for the same body.
    """

    def __init__(self, markup: str, highlighter: Highlighter | None = None):
        self.markup = markup
        self.parsed = parse_tag_arguments(markup)
        self.highlighter = highlighter or PygmentsHighlighter()

    @property
    def filetype(self) -> str | None:
        """Resolved filetype, or None when the highlighter should use its default lexer."""
        return self.parsed.filetype

    @property
    def caption_html(self) -> str | None:
        """The <figcaption> element, or None when the tag has no caption."""
        return self.parsed.caption_html

    def render(self, body: str) -> str:
        """Highlight ``body`` and wrap it in the code figure."""
        return render_codeblock(body, self.parsed.filetype, self.parsed.caption_html, self.highlighter)
