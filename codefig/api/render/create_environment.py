"""Build a Jinja2 environment with the codeblock tag installed."""

from jinja2 import BaseLoader, Environment, StrictUndefined

from ..config.HighlightConfig import HighlightConfig
from ..highlight.PygmentsHighlighter import PygmentsHighlighter
from .CodeBlockExtension import CodeBlockExtension


def create_environment(config: HighlightConfig | None = None, loader: BaseLoader | None = None) -> Environment:
    """Create an Environment whose codeblock tags highlight with ``config``."""
    env = Environment(
        loader=loader or BaseLoader(),
        extensions=[CodeBlockExtension],
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.codefig_highlighter = PygmentsHighlighter(config)
    return env
