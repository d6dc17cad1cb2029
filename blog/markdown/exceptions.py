# blog/markdown/exceptions.py


class MarkdownError(Exception):
    """Base class for errors raised by the markdown pipeline."""


class MarkdownConfigError(MarkdownError):
    """A configuration value is missing or not one of the allowed values."""


class CodeBlockMismatchError(MarkdownError):
    """
    Extracted code blocks and placeholders no longer line up.

    Every placeholder written by the extractor must resolve to exactly one
    record during restoration. Seeing this means a transform consumed or
    duplicated a placeholder.
    """


class BlogPostLoadError(MarkdownError):
    """The markdown source for a post could not be read or fetched."""
