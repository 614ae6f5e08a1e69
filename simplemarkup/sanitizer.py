# simplemarkup/sanitizer.py
"""
Final allow-list step of the pipeline.

Every tag whose name is not allow-listed is removed while its content is kept
as text. Attributes of allowed tags pass through untouched, apart from bleach's
protocol check on URL attributes such as ``href``. Entities already present in
the input (``&amp;``, ``&lt;``, ``&quot;``) are left as they are.
"""

import logging
from functools import lru_cache

from bleach.sanitizer import Cleaner

from .config import get_markup_config

logger = logging.getLogger(__name__)


def normalize_tag_name(tag: str) -> str:
    """Accept both ``"strong"`` and ``"<strong>"`` forms of a tag name."""
    return tag.strip().strip("<>/").strip().lower()


def _allow_any_attribute(tag, name, value):
    return True


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache the parts of the bleach configuration that never change."""
    config = get_markup_config()
    return _allow_any_attribute, frozenset(config["allowed_protocols"])


def strip_disallowed_tags(html: str, allowed_tags, xhtml: bool = False) -> str:
    """
    Remove every tag from ``html`` whose name is not in ``allowed_tags``.

    Args:
        html: HTML string to process
        allowed_tags: Iterable of tag names to keep
        xhtml: Serialise void elements in the self-closing form, e.g. ``<br />``
            (default: False, bleach's HTML5 ``<br>``)

    Returns:
        HTML containing only allow-listed tags
    """
    tags = {normalize_tag_name(tag) for tag in allowed_tags}
    tags.discard("")
    allowed_attrs, allowed_protocols = _get_bleach_config()

    logger.debug(f"Stripping tags outside allow-list: {sorted(tags)}")

    cleaner = Cleaner(
        tags=tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=True,
        strip_comments=True,
    )
    # html5lib serializer option; emits "<br />" with its default space before the solidus
    cleaner.serializer.use_trailing_solidus = xhtml

    return cleaner.clean(html)
