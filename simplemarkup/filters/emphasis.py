# simplemarkup/filters/emphasis.py
"""
Filters for single-character emphasis delimiters.

Each filter wraps text between a pair of identical delimiters:

    *bold*        -> <strong>bold</strong>
    ~italic~      -> <em>italic</em>
    _underline_   -> <u>underline</u>
    -deleted-     -> <del>deleted</del>

A doubled delimiter (``**text**``, ``__text__``) never matches: the opening
delimiter may not be preceded by another one and the closing delimiter may not
be followed by another one.
"""

import re


def delimited_pattern(delimiter: str) -> re.Pattern:
    """
    Compile the pattern for a span wrapped in a single ``delimiter`` on each side.

    Args:
        delimiter: A single character

    Returns:
        Compiled pattern whose group 1 is the content between the delimiters
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    d = re.escape(delimiter)
    return re.compile(rf"(?<!{d}){d}([^{d}]+){d}(?!{d})")


BOLD_PATTERN = delimited_pattern("*")
ITALIC_PATTERN = delimited_pattern("~")
UNDERLINE_PATTERN = delimited_pattern("_")
DEL_PATTERN = delimited_pattern("-")


def emphasis(text: str, template: str, pattern: re.Pattern):
    """
    Replace every delimited span in ``text`` with ``template``.

    Returns:
        Tuple of (new text, number of substitutions)
    """
    return pattern.subn(template, text)


def bold(text: str, template: str):
    return emphasis(text, template, BOLD_PATTERN)


def italic(text: str, template: str):
    return emphasis(text, template, ITALIC_PATTERN)


def underline(text: str, template: str):
    return emphasis(text, template, UNDERLINE_PATTERN)


def del_(text: str, template: str):
    return emphasis(text, template, DEL_PATTERN)
