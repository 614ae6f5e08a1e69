# simplemarkup/templatetags/simplemarkup_tags.py

from django import template
from django.conf import settings
from django.utils.safestring import mark_safe

from simplemarkup.filters import ALL_FILTERS
from simplemarkup.processor import MarkupProcessor

register = template.Library()


def _render(value, filters):
    if value is None:
        return ""

    processor = MarkupProcessor(str(value))

    # Project-wide overrides from settings.py
    for key, markup_template in getattr(settings, "SIMPLEMARKUP_TEMPLATES", {}).items():
        processor.set_template(key, markup_template)

    allowed_tags = getattr(settings, "SIMPLEMARKUP_ALLOWED_TAGS", None)
    if allowed_tags is not None:
        processor.set_allowed_tags(allowed_tags)

    for key in filters:
        processor.apply(key)

    return processor.parse()


@register.filter(name="simplemarkup")
def simplemarkup_filter(value):
    return mark_safe(_render(value, ALL_FILTERS))


@register.filter(name="simplemarkup_only")
def simplemarkup_only_filter(value, filters):
    """Render with a subset of filters, e.g. ``{{ comment|simplemarkup_only:"bold,links" }}``"""
    names = [name.strip() for name in str(filters).split(",") if name.strip()]
    return mark_safe(_render(value, names))
