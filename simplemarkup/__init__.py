from .exceptions import SimpleMarkupError, TemplateNotFoundError, TemplateNotSetError
from .filters import ALL_FILTERS, FILTER_NAMES
from .processor import MarkupProcessor
from .renderer import render_markup

__all__ = (
    "ALL_FILTERS",
    "FILTER_NAMES",
    "MarkupProcessor",
    "SimpleMarkupError",
    "TemplateNotFoundError",
    "TemplateNotSetError",
    "render_markup",
)
