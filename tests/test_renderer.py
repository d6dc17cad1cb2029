"""End-to-end tests for render_markdown() and render_and_highlight()."""

import pytest
from bs4 import BeautifulSoup

from blog.markdown import (
    MarkdownConfigError,
    render_and_highlight,
    render_markdown,
)

EXAMPLE = """# Title

Some **bold** and _italic_ text.

```js
let x = 1; // demo
```
"""


class TestRenderMarkdown:
    """Tests for render_markdown()."""

    def test_example_document(self) -> None:
        html = render_markdown(EXAMPLE)
        assert html == (
            "<h1>Title</h1>\n"
            "<p>Some <strong>bold</strong> and <em>italic</em> text.</p>\n"
            '<pre><code class="language-js">let x = 1; // demo</code></pre>'
        )

    def test_deterministic(self) -> None:
        assert render_markdown(EXAMPLE) == render_markdown(EXAMPLE)

    def test_code_isolation(self) -> None:
        html = render_markdown("```\n**bold**\n```")
        assert html == "<pre><code>**bold**</code></pre>"
        assert "<strong>" not in html

    def test_code_escaping(self) -> None:
        html = render_markdown("```\n<script>\n```")
        assert "&lt;script&gt;" in html
        assert "<script>" not in html

    def test_heading_precedence(self) -> None:
        assert render_markdown("###### H") == "<h6>H</h6>"
        assert render_markdown("# H") == "<h1>H</h1>"

    def test_list_grouping(self) -> None:
        html = render_markdown("- one\n- two\n- three")
        soup = BeautifulSoup(html, "html.parser")
        lists = soup.find_all("ul")
        assert len(lists) == 1
        assert len(lists[0].find_all("li")) == 3

    def test_code_block_count_matches_fences(self) -> None:
        text = "```c\na\n```\n\ntext\n\n```\nb\n```\n\n- item\n\n```python\nc\n```"
        html = render_markdown(text)
        assert html.count("<pre><code") == 3

    def test_code_block_splits_paragraph(self) -> None:
        html = render_markdown("before\n```\ncode\n```\nafter")
        assert html == "<p>before</p>\n<pre><code>code</code></pre>\n<p>after</p>"

    def test_crlf_input(self) -> None:
        assert render_markdown("line one\r\nline two") == "<p>line one<br>line two</p>"

    def test_empty_input(self) -> None:
        assert render_markdown("") == ""
        assert render_markdown(None) == ""

    def test_unterminated_fence_runs_to_end(self) -> None:
        html = render_markdown("text\n\n```python\nprint(1)\n# more")
        assert html == '<p>text</p>\n<pre><code class="language-python">print(1)\n# more</code></pre>'

    def test_unterminated_fence_literal(self) -> None:
        html = render_markdown(
            "```python\nprint(1)", {"config": {"unterminated_fence": "literal"}}
        )
        assert "<pre>" not in html
        assert "```python" in html

    def test_sentinel_characters_in_input(self) -> None:
        """Text shaped like a placeholder is just text."""
        html = render_markdown("\x02CODEBLOCK0\x03")
        assert html == "<p>CODEBLOCK0</p>"

    def test_old_style_placeholder_text_does_not_collide(self) -> None:
        html = render_markdown("__CODE_BLOCK_0__\n\n```\nx\n```")
        assert "<strong>CODE_BLOCK_0</strong>" in html
        assert "<pre><code>x</code></pre>" in html

    def test_inline_code_and_link_not_escaped_by_default(self) -> None:
        html = render_markdown("`<i>` and [x](http://a.b/?q=<y>)")
        assert html == '<p><code><i></code> and <a href="http://a.b/?q=<y>">x</a></p>'

    def test_caller_context_is_not_modified(self) -> None:
        context = {"config": {"highlight": False}}
        render_markdown("```\na\n```", context)
        assert context == {"config": {"highlight": False}}

    def test_bad_config_raises(self) -> None:
        with pytest.raises(MarkdownConfigError):
            render_markdown("x", {"config": {"unterminated_fence": "explode"}})


class TestRenderAndHighlight:
    """Tests for render_and_highlight()."""

    def test_example_document(self) -> None:
        html = render_and_highlight(EXAMPLE)
        soup = BeautifulSoup(html, "html.parser")

        assert len(soup.find_all("h1")) == 1
        assert soup.h1.get_text() == "Title"

        paragraphs = soup.find_all("p")
        assert len(paragraphs) == 1
        assert len(paragraphs[0].find_all("strong")) == 1
        assert len(paragraphs[0].find_all("em")) == 1

        codes = soup.select("pre > code")
        assert len(codes) == 1
        assert codes[0]["class"] == ["language-js"]
        keywords = [s.get_text() for s in codes[0].find_all("span", class_="code-keyword")]
        comments = [s.get_text() for s in codes[0].find_all("span", class_="code-comment")]
        assert keywords == ["let"]
        assert comments == ["// demo"]
        assert codes[0].get_text() == "let x = 1; // demo"

    def test_highlight_disabled(self) -> None:
        text = "```js\nlet x;\n```"
        assert render_and_highlight(text, {"config": {"highlight": False}}) == render_markdown(text)

    def test_unsupported_language_untouched(self) -> None:
        text = "```rust\nfn main() {}\n```"
        assert render_and_highlight(text) == render_markdown(text)

    def test_comment_keyword_not_wrapped_twice(self) -> None:
        html = render_and_highlight("```cpp\nint f() { return 1; } // return early\n```")
        code = BeautifulSoup(html, "html.parser").code

        keywords = [s.get_text() for s in code.find_all("span", class_="code-keyword")]
        comments = code.find_all("span", class_="code-comment")
        assert keywords == ["return"]
        assert [c.get_text() for c in comments] == ["// return early"]
        assert comments[0].find("span") is None
