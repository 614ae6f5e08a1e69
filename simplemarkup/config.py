# simplemarkup/config.py


def get_markup_config():
    """
    Default configuration for a MarkupProcessor.

    A new dictionary is built on every call so that processors never share
    mutable defaults. Templates use ``re`` substitution syntax: ``\\1`` is the
    span captured by the filter's pattern.
    """
    return {
        "templates": {
            "links": r'<a href="\1" target="_blank" rel="nofollow">\1</a>',
            "bold": r"<strong>\1</strong>",
            "underline": r"<u>\1</u>",
            "italic": r"<em>\1</em>",
            "del": r"<del>\1</del>",
        },
        # Tags that survive parse(). Everything else is stripped.
        "allowed_tags": [
            "strong",
            "u",
            "em",
            "del",
            "a",
        ],
        # Protocols bleach accepts in href values
        "allowed_protocols": ["http", "https", "ftp", "mailto"],
    }
