# simplemarkup/exceptions.py


class SimpleMarkupError(Exception):
    """Base class for errors raised by the markup pipeline."""


class TemplateNotFoundError(SimpleMarkupError, KeyError):
    """Raised when a template key is not one of the known filters."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"The template [{key}] does not exist.")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class TemplateNotSetError(SimpleMarkupError, LookupError):
    """Raised when a filter runs without a template configured for it."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"The [{key}] template is not set.")
