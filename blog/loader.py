# blog/loader.py
"""
Loading blog posts: read or fetch the markdown source, render it, and turn
any failure into the user-facing "failed to load" fragment.

Sources are either local paths or http(s) URLs, laid out as
``<base>/blogs/<category>/<slug>.md``.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from blog.index import BlogIndex, find_post, format_date
from blog.markdown.escaping import escape_html
from blog.markdown.exceptions import BlogPostLoadError
from blog.markdown.renderer import render_and_highlight

logger = logging.getLogger(__name__)

SITE_NAME = "Jatin"
REQUEST_TIMEOUT = 10.0

# Category and slug end up in a path or URL
SEGMENT_RE = re.compile(r"^[A-Za-z0-9_-]+$")

NO_POST_HTML = (
    '<p class="text-muted">No blog post specified.</p>\n'
    '<p><a href="blogs.html">← Back to all posts</a></p>'
)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def get_post_source(category: str, slug: str, base_path: str = ".") -> str:
    """Build the location of a post's markdown file under ``base_path``."""
    for segment in (category, slug):
        if not SEGMENT_RE.match(segment or ""):
            raise BlogPostLoadError(f"Invalid post path segment: {segment!r}")

    base = str(base_path)
    if _is_url(base):
        return f"{base.rstrip('/')}/blogs/{category}/{slug}.md"
    return str(Path(base) / "blogs" / category / f"{slug}.md")


def load_markdown(source, client: Optional[httpx.Client] = None) -> str:
    """
    Read markdown from a local path or fetch it from an http(s) URL.

    Args:
        source: File path or URL
        client: Optional httpx client (a fresh request is made otherwise)

    Raises:
        BlogPostLoadError: on I/O errors, network errors or non-2xx responses
    """
    source = str(source)

    if not _is_url(source):
        try:
            return Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise BlogPostLoadError(f"Failed to load blog post: {exc}") from exc

    try:
        if client is None:
            response = httpx.get(source, timeout=REQUEST_TIMEOUT, follow_redirects=True)
        else:
            response = client.get(source)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise BlogPostLoadError(
            f"Failed to load blog post: {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise BlogPostLoadError(f"Failed to load blog post: {exc}") from exc

    return response.text


def render_load_error(message: str) -> str:
    return (
        '<div class="error-message">\n'
        "    <p>Failed to load blog post.</p>\n"
        f'    <p class="text-muted text-sm">{escape_html(message)}</p>\n'
        "</div>"
    )


def load_blog_post(
    category: str,
    slug: str,
    base_path: str = ".",
    client: Optional[httpx.Client] = None,
    context: Optional[dict] = None,
) -> str:
    """
    Load, render and highlight a post.

    Never raises for load failures; those come back as the error fragment.
    """
    try:
        markdown_text = load_markdown(get_post_source(category, slug, base_path), client=client)
    except BlogPostLoadError as exc:
        logger.error("Error loading blog post %s/%s: %s", category, slug, exc, exc_info=True)
        return render_load_error(str(exc))

    return render_and_highlight(markdown_text, context)


@dataclass
class BlogPostPage:
    content_html: str
    title: Optional[str] = None
    date: Optional[str] = None

    @property
    def document_title(self) -> Optional[str]:
        if self.title is None:
            return None
        return f"{self.title} | {SITE_NAME}"


def build_post_page(
    category: Optional[str],
    slug: Optional[str],
    index: Optional[BlogIndex] = None,
    base_path: str = ".",
    client: Optional[httpx.Client] = None,
) -> BlogPostPage:
    """
    Everything the post page shows for a ``?category=...&slug=...`` request.

    Missing parameters give the "No blog post specified" fragment. Posts not
    in the index are still loaded, just without a title and date.
    """
    if not category or not slug:
        return BlogPostPage(content_html=NO_POST_HTML)

    page = BlogPostPage(content_html=load_blog_post(category, slug, base_path, client))

    post = find_post(category, slug, index)
    if post is not None:
        page.title = post.title
        page.date = format_date(post.date)
    return page
