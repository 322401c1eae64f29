"""Pygments-backed highlighter."""

from pygments import highlight
from pygments.formatters import HtmlFormatter

from ..config.HighlightConfig import HighlightConfig
from ._find_lexer import _find_lexer
from .Highlighter import Highlighter


class PygmentsHighlighter(Highlighter):
    """Highlight with Pygments' HTML formatter using CSS classes."""

    def __init__(self, config: HighlightConfig | None = None):
        self.config = config or HighlightConfig()

    def _formatter(self) -> HtmlFormatter:
        return HtmlFormatter(cssclass=self.config.css_class, style=self.config.style)

    def highlight(self, source: str, filetype: str | None) -> str:
        lexer = _find_lexer(filetype, self.config.default_lexer)
        return highlight(source, lexer, self._formatter())

    def style_defs(self) -> str:
        """Stylesheet for the configured style, scoped to the CSS class."""
        return self._formatter().get_style_defs(f".{self.config.css_class}")
