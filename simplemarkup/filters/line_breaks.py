# simplemarkup/filters/line_breaks.py

import re

# Longest sequences first so "\r\n" is one break, not two
NEWLINE_PATTERN = re.compile(r"(\r\n|\n\r|\n|\r)")


def line_breaks(text: str, xhtml: bool = True):
    """
    Insert a line-break tag before every newline, keeping the newline itself.

    Args:
        text: Text to process
        xhtml: Use the self-closing ``<br />`` form (default: True)

    Returns:
        Tuple of (new text, number of substitutions)
    """
    tag = "<br />" if xhtml else "<br>"
    return NEWLINE_PATTERN.subn(tag + r"\1", text)
