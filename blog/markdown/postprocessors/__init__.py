# blog/markdown/postprocessors/__init__.py

from .code_blocks import restore_code_blocks
from .sanitizer import sanitize_html
from .syntax_highlighter import highlight_code_blocks, highlight_element

POSTPROCESSORS = [
    restore_code_blocks,  # Must run first: splice escaped code back in
    sanitize_html,  # No-op unless the "sanitize" config value is on
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html


__all__ = [
    "POSTPROCESSORS",
    "apply_postprocessors",
    "highlight_code_blocks",
    "highlight_element",
    "restore_code_blocks",
    "sanitize_html",
]
