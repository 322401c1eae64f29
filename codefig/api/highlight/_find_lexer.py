"""Lexer lookup for a filetype hint."""

import logging

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


def _find_lexer(filetype: str | None, default_lexer: str) -> Lexer:
    """Find a lexer by alias, then by file extension, then fall back to ``default_lexer``.

    Raises:
        ClassNotFound: If ``default_lexer`` itself is unknown
    """
    if filetype:
        try:
            return get_lexer_by_name(filetype)
        except ClassNotFound:
            pass
        try:
            return get_lexer_for_filename(f"file.{filetype}")
        except ClassNotFound:
            logger.debug("No lexer for filetype %r, using %r", filetype, default_lexer)

    return get_lexer_by_name(default_lexer)
