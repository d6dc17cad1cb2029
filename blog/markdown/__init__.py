"""
Markdown rendering for blog posts.

    from blog.markdown import render_and_highlight

    html = render_and_highlight(markdown_text)
"""

from .config import get_markdown_config
from .escaping import escape_html
from .exceptions import (
    BlogPostLoadError,
    CodeBlockMismatchError,
    MarkdownConfigError,
    MarkdownError,
)
from .postprocessors import highlight_code_blocks, highlight_element
from .renderer import render_and_highlight, render_markdown

__all__ = [
    "BlogPostLoadError",
    "CodeBlockMismatchError",
    "MarkdownConfigError",
    "MarkdownError",
    "escape_html",
    "get_markdown_config",
    "highlight_code_blocks",
    "highlight_element",
    "render_and_highlight",
    "render_markdown",
]
