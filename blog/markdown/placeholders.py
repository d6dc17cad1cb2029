# blog/markdown/placeholders.py
"""
Protect-transform-restore support for fenced code blocks.

The extractor swaps every fenced block for a placeholder token and records
the block in a ``CodeBlockStore``; the restorer later swaps each token back.
Tokens are framed by the STX/ETX control characters, which no markdown rule
produces and which are stripped from input during normalization, so a token
can never appear in a document by accident.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

SENTINEL_START = "\x02"
SENTINEL_END = "\x03"

PLACEHOLDER_RE = re.compile(f"{SENTINEL_START}CODEBLOCK(\\d+){SENTINEL_END}")

CONTEXT_KEY = "code_blocks"


def make_placeholder(index: int) -> str:
    return f"{SENTINEL_START}CODEBLOCK{index}{SENTINEL_END}"


@dataclass(frozen=True)
class CodeBlockRecord:
    index: int
    language: Optional[str]
    code: str  # already HTML-escaped
    terminated: bool = True


@dataclass
class CodeBlockStore:
    """Ordered ordinal -> record mapping for one render call."""

    _records: Dict[int, CodeBlockRecord] = field(default_factory=dict)

    def add(self, language: Optional[str], code: str, terminated: bool = True) -> CodeBlockRecord:
        record = CodeBlockRecord(
            index=len(self._records),
            language=language or None,
            code=code,
            terminated=terminated,
        )
        self._records[record.index] = record
        return record

    def get(self, index: int) -> Optional[CodeBlockRecord]:
        return self._records.get(index)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CodeBlockRecord]:
        return iter(self._records.values())


def get_store(context: dict) -> CodeBlockStore:
    """Return the store for this render, creating it on first use."""
    store = context.get(CONTEXT_KEY)
    if store is None:
        store = CodeBlockStore()
        context[CONTEXT_KEY] = store
    return store
