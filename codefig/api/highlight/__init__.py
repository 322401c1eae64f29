"""Syntax highlighting collaborator."""

from .Highlighter import Highlighter
from .PygmentsHighlighter import PygmentsHighlighter

__all__ = ["Highlighter", "PygmentsHighlighter"]
