# blog/markdown/highlighting/tokenizer.py

import enum
from typing import List, Optional, Tuple

from ..escaping import escape_html
from .languages import LanguageSpec, get_language


class HighlightToken(enum.Enum):
    COMMENT = "code-comment"
    STRING = "code-string"
    NUMBER = "code-number"
    KEYWORD = "code-keyword"
    TYPE = "code-type"
    FUNCTION = "code-function"
    PLAIN = None

    @property
    def css_class(self) -> Optional[str]:
        return self.value


_GROUP_TOKENS = {
    "comment": HighlightToken.COMMENT,
    "string": HighlightToken.STRING,
    "number": HighlightToken.NUMBER,
}

Tokens = List[Tuple[HighlightToken, str]]


def _append(tokens: Tokens, token: HighlightToken, value: str) -> None:
    # Keep runs of plain text in one piece
    if token is HighlightToken.PLAIN and tokens and tokens[-1][0] is HighlightToken.PLAIN:
        tokens[-1] = (HighlightToken.PLAIN, tokens[-1][1] + value)
    else:
        tokens.append((token, value))


def _classify_word(spec: LanguageSpec, word: str, after_marker: bool) -> HighlightToken:
    if after_marker:
        return HighlightToken.FUNCTION
    if word in spec.keywords:
        return HighlightToken.KEYWORD
    if word in spec.types:
        return HighlightToken.TYPE
    return HighlightToken.PLAIN


def tokenize(code: str, language: Optional[str]) -> Tokens:
    """
    Split plain (unescaped) source text into classified tokens.

    Joining the token values gives back ``code`` unchanged. Unsupported
    languages produce a single PLAIN token.
    """
    spec = get_language(language)
    if spec is None:
        return [(HighlightToken.PLAIN, code)] if code else []

    tokens: Tokens = []
    pos = 0
    after_marker = False

    for match in spec.pattern.finditer(code):
        gap = code[pos:match.start()]
        if gap:
            _append(tokens, HighlightToken.PLAIN, gap)
            if gap.strip():
                after_marker = False

        value = match.group()
        kind = match.lastgroup
        if kind == "word":
            token = _classify_word(spec, value, after_marker)
            after_marker = token is HighlightToken.KEYWORD and value in spec.function_markers
        else:
            token = _GROUP_TOKENS[kind]
            after_marker = False

        _append(tokens, token, value)
        pos = match.end()

    if pos < len(code):
        _append(tokens, HighlightToken.PLAIN, code[pos:])
    return tokens


def render_tokens(tokens: Tokens) -> str:
    """Tokens to escaped HTML, non-plain tokens wrapped in classed spans."""
    parts = []
    for token, value in tokens:
        escaped = escape_html(value)
        if token.css_class:
            parts.append(f'<span class="{token.css_class}">{escaped}</span>')
        else:
            parts.append(escaped)
    return "".join(parts)


def highlight_code(code: str, language: Optional[str]) -> str:
    """Highlight plain source text, returning an HTML string."""
    return render_tokens(tokenize(code, language))
