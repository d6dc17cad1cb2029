# blog/index.py
"""
The blog index: categories, their posts, and the listing page fragment.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
from urllib.parse import urlencode

from blog.markdown.escaping import escape_html

logger = logging.getLogger(__name__)

# Display dates are always English, whatever the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class Post:
    slug: str
    title: str
    date: str  # YYYY-MM-DD
    excerpt: str = ""


@dataclass(frozen=True)
class Category:
    name: str
    posts: List[Post] = field(default_factory=list)


BlogIndex = Dict[str, Category]

DEFAULT_INDEX: BlogIndex = {
    "cpp": Category(
        name="C++",
        posts=[
            Post(
                slug="understanding-move-semantics",
                title="Understanding Move Semantics in Modern C++",
                date="2024-12-15",
                excerpt=(
                    "A deep dive into move semantics, rvalue references, and how "
                    "they improve performance in C++11 and beyond."
                ),
            ),
            Post(
                slug="smart-pointers-guide",
                title="A Practical Guide to Smart Pointers",
                date="2024-11-20",
                excerpt=(
                    "When to use unique_ptr, shared_ptr, and weak_ptr - with "
                    "real-world examples."
                ),
            ),
        ],
    ),
    "systems": Category(
        name="Systems Programming",
        posts=[
            Post(
                slug="windows-debugging-with-windbg",
                title="Windows Debugging with WinDBG",
                date="2024-12-01",
                excerpt=(
                    "Essential WinDBG commands and techniques for debugging "
                    "Windows applications and crash dumps."
                ),
            ),
            Post(
                slug="understanding-windows-processes",
                title="Understanding Windows Process Architecture",
                date="2024-10-15",
                excerpt="How processes work on Windows: from creation to termination.",
            ),
        ],
    ),
}


def find_post(category: str, slug: str, index: Optional[BlogIndex] = None) -> Optional[Post]:
    """Look a post up by category and slug; None if either is unknown."""
    index = DEFAULT_INDEX if index is None else index
    category_data = index.get(category)
    if category_data is None:
        return None
    return next((post for post in category_data.posts if post.slug == slug), None)


def format_date(date_str: str) -> str:
    """
    Format a YYYY-MM-DD date for display, e.g. "December 15, 2024".

    Strings that are not valid dates are returned unchanged.
    """
    try:
        date = datetime.strptime(date_str, "%Y-%m-%d")
    except (TypeError, ValueError):
        logger.warning("Invalid post date %r", date_str)
        return date_str
    return f"{MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


def post_url(category: str, post: Post) -> str:
    return "blog-post.html?" + urlencode({"category": category, "slug": post.slug})


def render_blog_list(index: Optional[BlogIndex] = None) -> str:
    """
    Render the listing of every category and its posts.

    All interpolated values are escaped.
    """
    index = DEFAULT_INDEX if index is None else index
    parts = []

    for category_slug, category in index.items():
        parts.append('<div class="blog-category">')
        parts.append(f"    <h3>{escape_html(category.name)}</h3>")
        parts.append('    <ul class="blog-list">')
        for post in category.posts:
            href = escape_html(post_url(category_slug, post))
            parts.append('        <li class="blog-item">')
            parts.append(
                f'            <a href="{href}" class="blog-title">{escape_html(post.title)}</a>'
            )
            parts.append(
                f'            <div class="blog-meta">{escape_html(format_date(post.date))}</div>'
            )
            parts.append(f'            <p class="blog-excerpt">{escape_html(post.excerpt)}</p>')
            parts.append("        </li>")
        parts.append("    </ul>")
        parts.append("</div>")

    return "\n".join(parts)
