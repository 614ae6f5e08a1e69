# simplemarkup/processor.py
"""
Chainable processor that turns the simple markup syntax into safe HTML.

Pipeline:
    raw text -> escape -> filters (in the order they are called) -> allow-list strip

The input is HTML-escaped as soon as the processor is created, so the only
tags in the working result are the ones the filters write. ``parse()`` then
strips anything not allow-listed.

Usage:
    MarkupProcessor("This *text* should be bold.").bold().parse()
    str(MarkupProcessor(comment).all())
"""

import html
import logging
from typing import Iterable, List

from .config import get_markup_config
from .exceptions import TemplateNotFoundError, TemplateNotSetError
from .filters import ALL_FILTERS, FILTER_NAMES, LINE_BREAKS, TEMPLATE_FILTERS
from .filters import line_breaks as line_breaks_filter
from .sanitizer import normalize_tag_name, strip_disallowed_tags

logger = logging.getLogger(__name__)


class MarkupProcessor:
    def __init__(self, text: str):
        config = get_markup_config()

        self._original = text
        self._result = html.escape(text, quote=True)
        self._applied: List[str] = []
        # Line-break style last written by line_breaks(), kept through parse()
        self._xhtml = False

        self.templates = config["templates"]
        self.allowed_tags: List[str] = config["allowed_tags"]

        logger.debug(f"Created markup processor for {len(text)} characters")

    def __repr__(self):
        return f"<MarkupProcessor applied={self._applied!r}>"

    def __str__(self):
        return self.parse()

    @property
    def original(self) -> str:
        return self._original

    @property
    def result(self) -> str:
        """The working result before the allow-list strip."""
        return self._result

    @property
    def applied_filters(self) -> tuple:
        return tuple(self._applied)

    def reset(self) -> "MarkupProcessor":
        """Discard all applied filters and start again from the escaped original."""
        self._applied = []
        self._xhtml = False
        self._result = html.escape(self._original, quote=True)
        return self

    def set_template(self, key: str, value: str) -> "MarkupProcessor":
        """
        Customise the HTML template of a filter.

        The template uses ``re`` substitution syntax, ``\\1`` being the
        captured span, e.g. ``r'<span class="b">\\1</span>'``.

        Raises:
            TemplateNotFoundError: ``key`` is not a known filter
        """
        if key not in FILTER_NAMES:
            raise TemplateNotFoundError(key)

        self.templates[key] = value
        return self

    def unset_template(self, key: str) -> "MarkupProcessor":
        """
        Remove the template of a filter. Running that filter afterwards fails.

        Raises:
            TemplateNotFoundError: ``key`` is not a known filter
        """
        if key not in FILTER_NAMES:
            raise TemplateNotFoundError(key)

        self.templates.pop(key, None)
        return self

    def add_allowed_tag(self, tag: str) -> "MarkupProcessor":
        self.allowed_tags.append(normalize_tag_name(tag))
        return self

    def set_allowed_tags(self, tags: Iterable[str]) -> "MarkupProcessor":
        self.allowed_tags = [normalize_tag_name(tag) for tag in tags]
        return self

    def is_dirty(self) -> bool:
        """
        True when the working result differs from the original text.

        Escaping counts as a change: input containing ``&``, ``<``, ``>`` or
        quotes is dirty before any filter has run.
        Plain input such as "This *text*" is not dirty until a filter changes it.
        """
        return self._result != self._original

    def filter_is_applied(self, key: str) -> bool:
        return key in self._applied

    def _apply_template_filter(self, key: str) -> "MarkupProcessor":
        if key not in self.templates:
            raise TemplateNotSetError(key)

        self._applied.append(key)
        self._result, count = TEMPLATE_FILTERS[key](self._result, self.templates[key])

        logger.debug(f"Applied [{key}] filter: {count} substitution(s)")
        return self

    def links(self) -> "MarkupProcessor":
        """Turn bare http, https and ftp URLs into anchors."""
        return self._apply_template_filter("links")

    def bold(self) -> "MarkupProcessor":
        """Apply the bold filter: ``*text*``."""
        return self._apply_template_filter("bold")

    def italic(self) -> "MarkupProcessor":
        """Apply the italic filter: ``~text~``."""
        return self._apply_template_filter("italic")

    def underline(self) -> "MarkupProcessor":
        """Apply the underline filter: ``_text_``."""
        return self._apply_template_filter("underline")

    def del_(self) -> "MarkupProcessor":
        """Apply the del filter: ``-text-``. Recorded as ``"del"``."""
        return self._apply_template_filter("del")

    def line_breaks(self, xhtml: bool = True) -> "MarkupProcessor":
        """Insert ``<br />`` (or ``<br>`` when ``xhtml`` is False) before every newline."""
        self._applied.append(LINE_BREAKS)
        self._xhtml = xhtml
        self._result, count = line_breaks_filter(self._result, xhtml=xhtml)

        logger.debug(f"Applied [{LINE_BREAKS}] filter: {count} substitution(s)")
        return self

    def apply(self, key: str) -> "MarkupProcessor":
        """
        Apply a filter by name, e.g. ``"bold"`` or ``"lineBreaks"``.

        Raises:
            TemplateNotFoundError: ``key`` is not a known filter
            TemplateNotSetError: the filter's template has been removed
        """
        if key == LINE_BREAKS:
            return self.line_breaks()
        if key not in FILTER_NAMES:
            raise TemplateNotFoundError(key)
        return self._apply_template_filter(key)

    def parse(self) -> str:
        """Return the working result with every non allow-listed tag stripped."""
        return strip_disallowed_tags(self._result, self.allowed_tags, xhtml=self._xhtml)

    def all(self) -> "MarkupProcessor":
        """
        Apply every filter to a fresh processor built from the original text.

        Filters already applied to this processor, and its templates and
        allow-list, are not carried over. The order is fixed by ALL_FILTERS.
        """
        processor = MarkupProcessor(self._original)
        for key in ALL_FILTERS:
            processor.apply(key)
        return processor
