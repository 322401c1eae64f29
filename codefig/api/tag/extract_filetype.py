"""Derive a filetype from a caption label that looks like a filename."""

import re

# Last dot-delimited run of word characters at the very end of the label
EXTENSION_PATTERN = re.compile(r"\w\.(\w+)$")


def extract_filetype(label: str | None) -> str | None:
    """Return the trailing extension of ``label`` (``"example.rb"`` -> ``"rb"``).

    Labels without a dot, with a leading-dot name only (``".bashrc"``), or
    ending in anything other than ``.<word chars>`` yield None.
    """
    if not label:
        return None

    match = EXTENSION_PATTERN.search(label)
    if match is None:
        return None
    return match.group(1)
