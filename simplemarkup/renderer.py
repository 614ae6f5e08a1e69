# simplemarkup/renderer.py

from .filters import ALL_FILTERS
from .processor import MarkupProcessor


def render_markup(text, filters=None, allowed_tags=None):
    """
    Render markup text to sanitized HTML in one call.

    Args:
        text: Raw markup text
        filters: Filter names to apply in order (default: ALL_FILTERS)
        allowed_tags: Optional replacement for the default allow-list
    """
    if not text:
        return ""

    processor = MarkupProcessor(text)

    for key in ALL_FILTERS if filters is None else filters:
        processor.apply(key)

    if allowed_tags is not None:
        processor.set_allowed_tags(allowed_tags)

    return processor.parse()
