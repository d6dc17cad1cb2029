"""Tests for the blog index and listing."""

import locale

import pytest
from bs4 import BeautifulSoup

from blog.index import (
    DEFAULT_INDEX,
    Category,
    Post,
    find_post,
    format_date,
    post_url,
    render_blog_list,
)


class TestFormatDate:
    """Tests for format_date()."""

    def test_long_form(self) -> None:
        assert format_date("2024-12-15") == "December 15, 2024"

    def test_no_zero_padding(self) -> None:
        assert format_date("2024-01-05") == "January 5, 2024"

    def test_english_month_names(self) -> None:
        assert [format_date(f"2024-{month:02d}-01") for month in (1, 6, 12)] == [
            "January 1, 2024",
            "June 1, 2024",
            "December 1, 2024",
        ]

    def test_independent_of_locale(self) -> None:
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE locale not available")
        try:
            assert format_date("2024-03-01") == "March 1, 2024"
        finally:
            locale.setlocale(locale.LC_TIME, "C")

    def test_invalid_date_returned_as_is(self) -> None:
        assert format_date("someday") == "someday"
        assert format_date("2024-13-40") == "2024-13-40"


class TestFindPost:
    """Tests for find_post()."""

    def test_found(self) -> None:
        post = find_post("systems", "windows-debugging-with-windbg")
        assert post.title == "Windows Debugging with WinDBG"

    def test_unknown_category_or_slug(self) -> None:
        assert find_post("rust", "anything") is None
        assert find_post("cpp", "missing") is None

    def test_custom_index(self) -> None:
        index = {"go": Category(name="Go", posts=[Post(slug="x", title="X", date="2024-01-01")])}
        assert find_post("go", "x", index).title == "X"
        assert find_post("cpp", "smart-pointers-guide", index) is None


class TestRenderBlogList:
    """Tests for render_blog_list()."""

    def test_default_index(self) -> None:
        soup = BeautifulSoup(render_blog_list(), "html.parser")
        assert [h.get_text() for h in soup.find_all("h3")] == ["C++", "Systems Programming"]
        assert len(soup.select("li.blog-item")) == sum(len(c.posts) for c in DEFAULT_INDEX.values())

    def test_post_link_and_meta(self) -> None:
        html = render_blog_list()
        assert (
            'href="blog-post.html?category=cpp&amp;slug=understanding-move-semantics"' in html
        )
        assert '<div class="blog-meta">December 15, 2024</div>' in html

    def test_values_are_escaped(self) -> None:
        index = {
            "misc": Category(
                name="<Misc>",
                posts=[Post(slug="a", title="<b>Bold</b>", date="2024-02-03", excerpt="a & b")],
            )
        }
        html = render_blog_list(index)
        assert "<h3>&lt;Misc&gt;</h3>" in html
        assert "&lt;b&gt;Bold&lt;/b&gt;" in html
        assert "a &amp; b" in html

    def test_post_url(self) -> None:
        post = Post(slug="a b", title="T", date="2024-01-01")
        assert post_url("cpp", post) == "blog-post.html?category=cpp&slug=a+b"
