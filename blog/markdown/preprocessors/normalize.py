# blog/markdown/preprocessors/normalize.py

from ..placeholders import SENTINEL_END, SENTINEL_START


def normalize_text(text: str, context: dict) -> str:
    """
    Canonicalize line endings to ``\\n``.

    Also drops the placeholder sentinel characters, so nothing in the input
    can be mistaken for an extracted code block later on.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.replace(SENTINEL_START, "").replace(SENTINEL_END, "")
