# simplemarkup/filters/links.py
"""
Filter that turns bare URLs into anchors.

A link starts on a word boundary with an ``http``, ``https`` or ``ftp`` scheme
(case-insensitive) and runs until whitespace or ``<``. Trailing ``.`` and ``)``
are left outside the link so that "see https://example.com." and
"(https://example.com)" link only the URL.
"""

import re

LINK_PATTERN = re.compile(r"\b((?:https?|ftp)://[^\s<]+[^\s<.)])", re.IGNORECASE)


def links(text: str, template: str):
    """
    Replace every URL in ``text`` with ``template``.

    Returns:
        Tuple of (new text, number of substitutions)
    """
    return LINK_PATTERN.subn(template, text)
