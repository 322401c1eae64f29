"""Parsed tag dataclass."""

from dataclasses import dataclass

from .CaptionSpec import CaptionSpec


@dataclass(frozen=True)
class ParsedTag:
    """Everything the renderer needs from one tag's argument string."""

    filetype: str | None
    caption: CaptionSpec
    caption_html: str | None
