"""Preview label rules for history entries."""

from __future__ import annotations

import re

from clipstack.domain.rules.constants import ELLIPSIS

_WHITESPACE_RUN = re.compile(r"\s+")


def format_label(content: str, preview_size: int) -> str:
    """Return the menu/notification label for *content*.

    The first *preview_size* characters are kept, every whitespace run
    (newlines included) is collapsed to a single space, and ``...`` is
    appended when the content was truncated.

    Truncation counts code points, so a grapheme cluster spanning the cut
    may be split.

    Examples:
        >>> format_label("hello world", 5)
        'hello...'
        >>> format_label("a\\n\\n b", 50)
        'a b'
    """
    shortened = _WHITESPACE_RUN.sub(" ", content[:preview_size])
    if len(content) > preview_size:
        shortened += ELLIPSIS
    return shortened
