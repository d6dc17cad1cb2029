# blog/markdown/escaping.py

from html import escape


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters (& < > " ')."""
    return escape(text, quote=True)
