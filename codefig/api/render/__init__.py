"""Rendering of codeblock tags into code figures."""

from .CodeBlock import CodeBlock
from .CodeBlockExtension import CodeBlockExtension
from .create_environment import create_environment
from .render_codeblock import FIGURE_CLASS, render_codeblock

__all__ = ["FIGURE_CLASS", "CodeBlock", "CodeBlockExtension", "create_environment", "render_codeblock"]
