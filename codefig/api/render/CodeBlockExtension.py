"""Jinja2 extension providing the ``{% codeblock %}`` block tag."""

import logging
import re

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from markupsafe import Markup

from ..highlight.PygmentsHighlighter import PygmentsHighlighter
from ..tag.parse_tag_arguments import parse_tag_arguments
from .render_codeblock import render_codeblock

logger = logging.getLogger(__name__)


class CodeBlockExtension(Extension):
    """Render ``{% codeblock [lang:x] [label [url [title]]] %}...{% endcodeblock %}``.

    The argument text is free-form (paths, URLs, prose) and is not valid
    Jinja expression syntax, so ``preprocess`` turns it into one string
    literal before the template is lexed. It is parsed once at compile time.

    The highlighter is taken from ``environment.codefig_highlighter``.
    """

    tags = {"codeblock"}

    def __init__(self, environment):
        super().__init__(environment)
        environment.extend(codefig_highlighter=PygmentsHighlighter())

    def _opening_tag_pattern(self) -> re.Pattern[str]:
        start = re.escape(self.environment.block_start_string)
        end = re.escape(self.environment.block_end_string)
        comment_start = re.escape(self.environment.comment_start_string)
        comment_end = re.escape(self.environment.comment_end_string)
        # raw blocks and comments are matched first and left as they are
        skip = (
            rf"(?P<skip>(?s:{start}[-+]?\s*raw\s*[-+]?{end}.*?{start}[-+]?\s*endraw\s*[-+]?{end})"
            rf"|(?s:{comment_start}.*?{comment_end}))"
        )
        tag = rf"(?P<open>{start}[-+]?\s*codeblock)\b(?P<args>.*?)(?P<close>\s*[-+]?{end})"
        return re.compile(f"{skip}|{tag}")

    def _quote_arguments(self, match: re.Match[str]) -> str:
        if match.group("skip") is not None:
            return match.group("skip")
        return f"{match.group('open')} {match.group('args')!r}{match.group('close')}"

    def preprocess(self, source: str, name: str | None, filename: str | None = None) -> str:
        return self._opening_tag_pattern().sub(self._quote_arguments, source)

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        markup = parser.stream.expect("string").value
        parsed = parse_tag_arguments(markup)
        logger.debug("codeblock at %s:%s -> filetype=%r", parser.name, lineno, parsed.filetype)

        body = parser.parse_statements(("name:endcodeblock",), drop_needle=True)
        call = self.call_method("_render_codeblock", [nodes.Const(parsed.filetype), nodes.Const(parsed.caption_html)])
        return nodes.CallBlock(call, [], [], body).set_lineno(lineno)

    def _render_codeblock(self, filetype: str | None, caption_html: str | None, caller) -> Markup:
        body = str(caller())
        return Markup(render_codeblock(body, filetype, caption_html, self.environment.codefig_highlighter))
