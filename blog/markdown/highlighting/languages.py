# blog/markdown/highlighting/languages.py
"""
Per-language tables for the code highlighter.

Every language is described by the same set of fields, so the tokenizer has a
single code path. The combined pattern tries its alternatives in a fixed
priority order (comment, string, identifier, number); whichever starts
earliest in the text wins, and ties go to the earlier alternative.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

IDENTIFIER = r"[A-Za-z_]\w*"


@dataclass
class LanguageSpec:
    name: str
    comment: str
    string: str
    number: str
    keywords: FrozenSet[str]
    types: FrozenSet[str] = frozenset()
    # Keywords whose following identifier is a function name (Python "def")
    function_markers: FrozenSet[str] = frozenset()
    pattern: "re.Pattern[str]" = field(init=False, repr=False)

    def __post_init__(self):
        self.pattern = re.compile(
            f"(?P<comment>{self.comment})"
            f"|(?P<string>{self.string})"
            f"|(?P<word>{IDENTIFIER})"
            f"|(?P<number>{self.number})"
        )


C_LIKE = LanguageSpec(
    name="c-like",
    comment=r"//[^\n]*|/\*[\s\S]*?\*/",
    string=r'"(?:[^"\\]|\\.)*"',
    number=r"\b\d+\.?\d*[fFL]?\b",
    keywords=frozenset(
        [
            "auto", "break", "case", "catch", "class", "const", "continue",
            "default", "delete", "do", "else", "enum", "explicit", "extern",
            "false", "for", "friend", "goto", "if", "inline", "namespace",
            "new", "nullptr", "operator", "private", "protected", "public",
            "return", "sizeof", "static", "struct", "switch", "template",
            "this", "throw", "true", "try", "typedef", "typename", "union",
            "using", "virtual", "void", "volatile", "while", "override", "final",
            "constexpr", "noexcept", "static_cast", "dynamic_cast",
            "reinterpret_cast", "const_cast", "std", "move", "forward",
            "make_unique", "make_shared",
        ]
    ),
    types=frozenset(
        [
            "int", "char", "bool", "float", "double", "long", "short",
            "unsigned", "signed", "size_t", "string", "vector", "map",
            "unique_ptr", "shared_ptr", "weak_ptr", "optional", "variant",
        ]
    ),
)

PYTHON = LanguageSpec(
    name="python",
    comment=r"#[^\n]*",
    string=(
        r'"""[\s\S]*?"""'
        r"|'''[\s\S]*?'''"
        r'|"(?:[^"\\]|\\.)*"'
        r"|'(?:[^'\\]|\\.)*'"
    ),
    number=r"\b\d+\.?\d*\b",
    keywords=frozenset(
        [
            "and", "as", "assert", "async", "await", "break", "class",
            "continue", "def", "del", "elif", "else", "except", "finally",
            "for", "from", "global", "if", "import", "in", "is", "lambda",
            "None", "nonlocal", "not", "or", "pass", "raise", "return",
            "True", "False", "try", "while", "with", "yield", "self",
        ]
    ),
    function_markers=frozenset(["def"]),
)

JAVASCRIPT = LanguageSpec(
    name="javascript",
    comment=r"//[^\n]*|/\*[\s\S]*?\*/",
    string=(
        r'"(?:[^"\\]|\\.)*"'
        r"|'(?:[^'\\]|\\.)*'"
        r"|`(?:[^`\\]|\\.)*`"
    ),
    number=r"\b\d+\.?\d*\b",
    keywords=frozenset(
        [
            "async", "await", "break", "case", "catch", "class", "const",
            "continue", "debugger", "default", "delete", "do", "else",
            "export", "extends", "finally", "for", "function", "if",
            "import", "in", "instanceof", "let", "new", "of", "return",
            "static", "super", "switch", "this", "throw", "try", "typeof",
            "var", "void", "while", "with", "yield", "true", "false",
            "null", "undefined",
        ]
    ),
)

# Language tag (as written after the opening fence) -> table
LANGUAGES: Dict[str, LanguageSpec] = {
    "cpp": C_LIKE,
    "c": C_LIKE,
    "csharp": C_LIKE,
    "python": PYTHON,
    "javascript": JAVASCRIPT,
    "js": JAVASCRIPT,
}


def get_language(tag: Optional[str]) -> Optional[LanguageSpec]:
    """Return the table for a language tag, or None if it is not supported."""
    if not tag:
        return None
    return LANGUAGES.get(tag.lower())
