"""Abstract highlighter interface."""

from abc import ABC, abstractmethod


class Highlighter(ABC):
    """Turns source text into an embeddable HTML fragment."""

    @abstractmethod
    def highlight(self, source: str, filetype: str | None) -> str:
        """Highlight ``source`` using the lexer selected by ``filetype``.

        A None or unknown filetype must fall back to a default lexer.
        """
