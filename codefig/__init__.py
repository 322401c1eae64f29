"""codefig - captioned, syntax-highlighted code figures for Jinja2 templates."""

from .api.render.CodeBlock import CodeBlock
from .api.render.CodeBlockExtension import CodeBlockExtension

__all__ = ["CodeBlock", "CodeBlockExtension"]
