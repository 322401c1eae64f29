"""Split the ``lang:<token>`` marker out of a tag argument string."""

import re

from .TagArguments import TagArguments

# Leading whitespace is removed together with the marker
LANG_PATTERN = re.compile(r"\s*lang:(\S+)", re.IGNORECASE)


def split_language(raw: str) -> TagArguments:
    """Extract the first ``lang:`` marker and return the remaining caption text.

    The marker may appear anywhere in ``raw``. The remainder is stripped.
    """
    match = LANG_PATTERN.search(raw)
    if match is None:
        return TagArguments(explicit_language=None, remainder=raw.strip())

    remainder = raw[: match.start()] + raw[match.end() :]
    return TagArguments(explicit_language=match.group(1), remainder=remainder.strip())
