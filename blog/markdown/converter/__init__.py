# blog/markdown/converter/__init__.py

from .paragraphs import assemble_paragraphs
from .rules import RULES, apply_rules


def convert(text, context):
    """Markdown (placeholder-protected) to HTML: block/inline rules, then paragraphs."""
    return assemble_paragraphs(apply_rules(text, RULES))


__all__ = ["convert", "apply_rules", "assemble_paragraphs", "RULES"]
