# blog/markdown/converter/rules.py
"""
Block and inline markdown rules.

The rules run in a fixed order over text whose code blocks have already been
swapped for placeholders. None of the replacements contain markdown marker
characters, so a later rule never re-matches what an earlier one produced.

Supported:
- Headings (# through ######)
- **strong** / __strong__
- *emphasis* / _emphasis_ (underscore form not matched inside words)
- `inline code`
- [links](url)
- Unordered "- item" lists, one <ul> per contiguous run of items

Inline code content and link URLs are inserted as written; see the sanitizer
postprocessor for untrusted input.
"""

import re
from typing import Callable, List, NamedTuple, Union


class Rule(NamedTuple):
    name: str
    pattern: "re.Pattern[str]"
    replacement: Union[str, Callable[["re.Match[str]"], str]]


def _heading(match):
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


# A single anchored pattern: six markers can only be read as level 6, and a
# seventh marker (no space after the sixth) means "not a heading".
HEADING_RE = re.compile(r"^(#{1,6}) (.+)$", re.MULTILINE)

STRONG_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
STRONG_UNDERSCORE_RE = re.compile(r"(?<!\w)__(.+?)__(?!\w)")
EM_STAR_RE = re.compile(r"\*(.+?)\*")
EM_UNDERSCORE_RE = re.compile(r"(?<!\w)_(.+?)_(?!\w)")

INLINE_CODE_RE = re.compile(r"`([^`]+)`")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

LIST_ITEM_RE = re.compile(r"^- (.+)$", re.MULTILINE)
# A maximal run of adjacent item lines; any other line ends the run
LIST_RUN_RE = re.compile(r"^<li>.*</li>(?:\n<li>.*</li>)*$", re.MULTILINE)

RULES: List[Rule] = [
    Rule("heading", HEADING_RE, _heading),
    # Strong must come before emphasis so "**" is not eaten as two "*" spans
    Rule("strong", STRONG_STAR_RE, r"<strong>\1</strong>"),
    Rule("strong", STRONG_UNDERSCORE_RE, r"<strong>\1</strong>"),
    Rule("emphasis", EM_STAR_RE, r"<em>\1</em>"),
    Rule("emphasis", EM_UNDERSCORE_RE, r"<em>\1</em>"),
    Rule("inline_code", INLINE_CODE_RE, r"<code>\1</code>"),
    Rule("link", LINK_RE, r'<a href="\2">\1</a>'),
    Rule("list_item", LIST_ITEM_RE, r"<li>\1</li>"),
    Rule("list", LIST_RUN_RE, r"<ul>\g<0></ul>"),
]


def apply_rules(text: str, rules: List[Rule] = RULES) -> str:
    """Apply each rule to the whole text, in order."""
    for rule in rules:
        text = rule.pattern.sub(rule.replacement, text)
    return text
