# blog/markdown/renderer.py

import logging

from .config import config_from_context
from .converter import convert
from .placeholders import CONTEXT_KEY as CODE_BLOCKS_KEY
from .postprocessors import apply_postprocessors, highlight_code_blocks
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline

    Always returns HTML; unmatched markdown delimiters are left as literal
    text. Code blocks come back as <pre><code> elements but are not
    highlighted here (see render_and_highlight).

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            A "config" entry overrides markdown config values for this call.
    """
    # Every call gets its own context, so code block ordinals never leak
    # between renders
    context = dict(context or {})
    context.pop(CODE_BLOCKS_KEY, None)
    config_from_context(context)

    # Pre-processing: line endings, fenced code extraction
    text = apply_preprocessors(text or "", context)

    # Markdown conversion
    html = convert(text, context)

    # Post-processing: code restoration, optional sanitizing
    html = apply_postprocessors(html, context)

    logger.debug(
        "Rendered %d chars of markdown into %d chars of HTML", len(text), len(html)
    )
    return html


def render_and_highlight(text, context=None):
    """Render markdown, then highlight its code blocks (unless disabled)."""
    context = dict(context or {})
    html = render_markdown(text, context)

    if config_from_context(context)["highlight"]:
        html = highlight_code_blocks(html, context)
    return html
