# blog/markdown/preprocessors/__init__.py

from .code_blocks import extract_code_blocks
from .normalize import normalize_text

PREPROCESSORS = [
    normalize_text,  # Must run first: line endings, sentinel characters
    extract_code_blocks,  # Protect code before any markdown rule runs
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
