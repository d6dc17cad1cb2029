# blog/markdown/postprocessors/syntax_highlighter.py
"""
Postprocessor that syntax-highlights rendered code blocks.

This postprocessor:
- Finds <pre><code class="language-*"> elements in rendered HTML
- Looks the language tag up in the highlighting tables (cpp, c, csharp,
  python, javascript, js)
- Rewrites the element's content as text plus <span class="code-*"> wrappers
- Leaves elements with no tag, or an unsupported one, untouched

It works from the element's visible text rather than its markup, so the
visible text never changes and nothing is escaped twice. Running it again on
an already highlighted element gives the same result.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..highlighting import get_language, render_tokens, tokenize

logger = logging.getLogger(__name__)

LANGUAGE_CLASS_PREFIX = "language-"


def get_element_language(code: Tag) -> Optional[str]:
    """Return the tag from the first ``language-*`` class of an element."""
    classes = code.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    for css_class in classes:
        if css_class.startswith(LANGUAGE_CLASS_PREFIX):
            return css_class[len(LANGUAGE_CLASS_PREFIX):]
    return None


def highlight_element(code: Tag) -> bool:
    """
    Highlight a single code element in place.

    Returns:
        True if the element was rewritten, False if its language is missing
        or unsupported
    """
    language = get_element_language(code)
    if get_language(language) is None:
        logger.debug("No highlighter for language %r, skipping", language)
        return False

    highlighted = render_tokens(tokenize(code.get_text(), language))
    fragment = BeautifulSoup(highlighted, "html.parser")

    code.clear()
    for child in list(fragment.contents):
        code.append(child.extract())
    return True


def highlight_code_blocks(html: str, context: Optional[dict] = None) -> str:
    """
    Highlight every ``pre > code`` element in an HTML fragment.

    The HTML is returned unchanged (same string) if nothing was highlighted.
    Otherwise the whole fragment is re-serialized by BeautifulSoup, so markup
    outside the code elements may change form (e.g. <br> becomes <br/>)
    without changing meaning.
    """
    soup = BeautifulSoup(html, "html.parser")

    count = 0
    for code in soup.select("pre > code"):
        if highlight_element(code):
            count += 1

    logger.debug("Highlighted %d code block(s)", count)
    if not count:
        return html
    return str(soup)
