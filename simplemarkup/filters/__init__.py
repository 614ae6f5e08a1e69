# simplemarkup/filters/__init__.py

from .emphasis import bold, del_, italic, underline
from .line_breaks import line_breaks
from .links import links

# Filters driven by a template, keyed by template name
TEMPLATE_FILTERS = {
    "links": links,
    "bold": bold,
    "underline": underline,
    "italic": italic,
    "del": del_,
}

# The closed set of template keys
FILTER_NAMES = frozenset(TEMPLATE_FILTERS)

LINE_BREAKS = "lineBreaks"

ALL_FILTERS = (
    "bold",
    "underline",
    "italic",
    LINE_BREAKS,  # After emphasis so delimiters spanning lines still match
    "del",
    "links",  # Last: URLs may contain *, _, ~ and -
    # Order matters - they run sequentially
)
