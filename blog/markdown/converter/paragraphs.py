# blog/markdown/converter/paragraphs.py

import re

from ..placeholders import SENTINEL_START

BLANK_LINE_RE = re.compile(r"\n\s*\n")

# Blocks that already are block-level markup (or a code placeholder)
BLOCK_START_RE = re.compile(r"^(?:<h[1-6]>|<ul>|<p>|" + re.escape(SENTINEL_START) + ")")


def assemble_paragraphs(text: str) -> str:
    """
    Group transformed text into paragraphs.

    Blocks are separated by blank lines. A block that starts with a heading,
    list, paragraph or code placeholder is kept as is; anything else becomes a
    <p> with its single newlines turned into <br>. Empty blocks are dropped.
    """
    blocks = []
    for block in BLANK_LINE_RE.split(text):
        block = block.strip()
        if not block:
            continue
        if BLOCK_START_RE.match(block):
            blocks.append(block)
            continue
        blocks.append("<p>" + block.replace("\n", "<br>") + "</p>")
    return "\n".join(blocks)
