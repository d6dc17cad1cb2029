"""
Regex-driven syntax highlighting for rendered code blocks.

Supported language tags: cpp, c, csharp (one C-like table), python,
javascript and js. Any other tag is left unhighlighted.
"""

from .languages import LANGUAGES, LanguageSpec, get_language
from .tokenizer import HighlightToken, highlight_code, render_tokens, tokenize

__all__ = [
    "LANGUAGES",
    "LanguageSpec",
    "HighlightToken",
    "get_language",
    "highlight_code",
    "render_tokens",
    "tokenize",
]
