# blog/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

from ..config import config_from_context

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    # Exactly what the renderer and highlighter emit
    allowed_tags = frozenset(
        {
            # text
            "p",
            "br",
            "strong",
            "em",
            "span",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "li",
            # code
            "pre",
            "code",
            # links
            "a",
        }
    )

    allowed_attrs = {
        "a": ["href", "title"],
        "code": ["class"],
        "span": ["class"],
    }

    allowed_protocols = frozenset({"http", "https", "mailto"})

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize rendered HTML using bleach.

    Only runs when the ``sanitize`` config value is on. Inline code and link
    URLs are not escaped by the converter, so markdown from an untrusted
    source should be rendered with sanitizing enabled: disallowed tags are
    escaped into visible text and links with other protocols lose their href.
    """
    if not config_from_context(context)["sanitize"]:
        return html

    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    sanitized = bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # Escape disallowed tags so their text stays visible
    )
    if sanitized != html:
        logger.debug("Sanitizer changed the rendered HTML")
    return sanitized
