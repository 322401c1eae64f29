"""Parse a codeblock tag argument string."""

import logging

from .classify_caption import classify_caption
from .extract_filetype import extract_filetype
from .LabelOnly import LabelOnly
from .LabelWithLink import LabelWithLink
from .ParsedTag import ParsedTag
from .render_caption import render_caption
from .split_language import split_language

logger = logging.getLogger(__name__)


def parse_tag_arguments(raw: str) -> ParsedTag:
    """Parse ``[lang:<token>] [<label> [<url> [<title>]]]``.

    Never fails: anything that matches no caption rule degrades to no caption.
    The explicit ``lang:`` token always takes precedence over a filetype
    implied by the label's extension.

    Args:
        raw: The tag's argument string, exactly as written in the template

    Returns:
        ParsedTag with the resolved filetype, caption variant and caption HTML
    """
    arguments = split_language(raw)
    caption = classify_caption(arguments.remainder)

    filetype = arguments.explicit_language
    if filetype is None and isinstance(caption, (LabelOnly, LabelWithLink)):
        filetype = extract_filetype(caption.label)

    logger.debug("Parsed codeblock arguments %r: filetype=%r caption=%r", raw, filetype, caption)
    return ParsedTag(filetype=filetype, caption=caption, caption_html=render_caption(caption))
