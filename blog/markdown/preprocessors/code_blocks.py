# blog/markdown/preprocessors/code_blocks.py
"""
Preprocessor that pulls fenced code blocks out of the markdown source.

Each block:
- Gets its body trimmed and HTML-escaped straight away, so no later inline
  rule or escaping pass ever sees it
- Is recorded in the per-render CodeBlockStore under the next ordinal
- Is replaced by a placeholder token on its own block (blank lines around it)

An opening fence with no closing fence is handled according to the
``unterminated_fence`` config value.
"""

import logging
import re

from ..config import config_from_context
from ..escaping import escape_html
from ..placeholders import get_store, make_placeholder

logger = logging.getLogger(__name__)

# Opening fence, optional language tag, optional info string after it on the
# same line (ignored), newline, then the shortest body up to the first
# closing fence. Running off the end of the text means the fence
# was never closed.
FENCED_CODE_RE = re.compile(
    r"```(?P<lang>[\w+#.-]*)[^\S\n]*[^\n`]*\n(?P<code>.*?)(?:(?P<close>```)|\Z)",
    re.DOTALL,
)


def extract_code_blocks(text: str, context: dict) -> str:
    """
    Replace fenced code blocks with placeholders.

    Args:
        text: Normalized markdown text
        context: Render context; receives the CodeBlockStore

    Returns:
        Text with every (accepted) fenced block replaced by a placeholder
    """
    config = config_from_context(context)
    store = get_store(context)

    def replace_block(match):
        terminated = match.group("close") is not None
        if not terminated:
            if config["unterminated_fence"] == "literal":
                logger.warning(
                    "Unterminated code fence at offset %d left as literal text",
                    match.start(),
                )
                return match.group(0)
            logger.warning(
                "Unterminated code fence at offset %d; treating the rest of "
                "the document as code",
                match.start(),
            )

        record = store.add(
            language=match.group("lang"),
            code=escape_html(match.group("code").strip()),
            terminated=terminated,
        )
        return f"\n\n{make_placeholder(record.index)}\n\n"

    text = FENCED_CODE_RE.sub(replace_block, text)
    logger.debug("Extracted %d code block(s)", len(store))
    return text
