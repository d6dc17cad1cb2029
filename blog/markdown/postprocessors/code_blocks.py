# blog/markdown/postprocessors/code_blocks.py
"""
Postprocessor that puts extracted code blocks back into the rendered HTML.

Every placeholder left by the code block preprocessor becomes:

    <pre><code class="language-js">...escaped code...</code></pre>

The class attribute is left off when the fence had no language tag. Code was
escaped at extraction time and is inserted verbatim here.
"""

import logging

from ..escaping import escape_html
from ..exceptions import CodeBlockMismatchError
from ..placeholders import PLACEHOLDER_RE, CodeBlockRecord, get_store

logger = logging.getLogger(__name__)


def format_code_block(record: CodeBlockRecord) -> str:
    if record.language:
        language_class = escape_html(f"language-{record.language}")
        return f'<pre><code class="{language_class}">{record.code}</code></pre>'
    return f"<pre><code>{record.code}</code></pre>"


def restore_code_blocks(html: str, context: dict) -> str:
    """
    Replace code block placeholders with rendered code blocks.

    Raises:
        CodeBlockMismatchError: if a placeholder has no record, a record is
            used twice, or a record is never used
    """
    store = get_store(context)
    restored = set()

    def replace_placeholder(match):
        index = int(match.group(1))
        record = store.get(index)
        if record is None or index in restored:
            raise CodeBlockMismatchError(f"Placeholder {index} has no unused code block")
        restored.add(index)
        return format_code_block(record)

    html = PLACEHOLDER_RE.sub(replace_placeholder, html)

    if len(restored) != len(store):
        missing = sorted(record.index for record in store if record.index not in restored)
        raise CodeBlockMismatchError(f"Code blocks never restored: {missing}")

    logger.debug("Restored %d code block(s)", len(restored))
    return html
