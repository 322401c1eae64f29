"""Classify caption text into one of the caption variants."""

import re

from .CaptionSpec import CaptionSpec
from .LabelOnly import LabelOnly
from .LabelWithLink import DEFAULT_LINK_TITLE, LabelWithLink
from .NoCaption import NoCaption

# label, whitespace, URL (absolute or site-relative), optional link title.
# The label is greedy so the rightmost URL-like token is taken as the link;
# it keeps all but one of the separating whitespace characters.
CAPTION_URL_TITLE_PATTERN = re.compile(r"(\S[\S\s]*)\s+(https?://\S+|/\S+)\s*(.+)?", re.IGNORECASE)


def classify_caption(remainder: str) -> CaptionSpec:
    """Classify caption text; the first matching rule wins.

    1. ``label url [title]`` -> LabelWithLink
    2. any other non-blank text -> LabelOnly
    3. blank -> NoCaption
    """
    text = remainder.strip()

    match = CAPTION_URL_TITLE_PATTERN.search(text)
    if match:
        label, url, title = match.groups()
        return LabelWithLink(label=label.rstrip(), url=url, link_title=title or DEFAULT_LINK_TITLE)

    if text:
        return LabelOnly(label=text)

    return NoCaption()
