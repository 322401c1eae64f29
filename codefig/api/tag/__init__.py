"""Tag argument parsing for the codeblock tag."""

from .CaptionSpec import CaptionSpec
from .classify_caption import classify_caption
from .extract_filetype import extract_filetype
from .LabelOnly import LabelOnly
from .LabelWithLink import LabelWithLink
from .NoCaption import NoCaption
from .parse_tag_arguments import parse_tag_arguments
from .ParsedTag import ParsedTag
from .render_caption import render_caption
from .split_language import split_language
from .TagArguments import TagArguments

__all__ = [
    "CaptionSpec",
    "LabelOnly",
    "LabelWithLink",
    "NoCaption",
    "ParsedTag",
    "TagArguments",
    "classify_caption",
    "extract_filetype",
    "parse_tag_arguments",
    "render_caption",
    "split_language",
]
