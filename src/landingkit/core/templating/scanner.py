"""Tag scanner for the template grammar.

Every ``{{...}}`` tag is one of:

- an each-opener ``{{#each <path> as |<var>|}}``
- an each-closer ``{{/each}}``
- a marker ``{{ <path> | filter ... }}``

Block boundaries are found by pairing openers with closers on a stack, so a
nested block is always captured whole as part of its parent's body. Openers
without a closer and closers without an opener are not blocks; they stay in
the text as literals.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

# Inner text may not contain "}" (markers never nest).
TAG_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

# Block tags are scanned on their own so that a literal "{" right before
# "{{#each" or "{{/each}}" does not shift the match.
BLOCK_TAG_PATTERN = re.compile(
    r"\{\{\s*(?:#each\s+([^\s}|]+)\s+as\s+\|\s*([^|}]+?)\s*\|\s*|(/each)\s*)\}\}"
)
EACH_CLOSE = "/each"


@dataclass(frozen=True)
class EachOpen:
    start: int
    end: int
    path: str
    var: str


@dataclass(frozen=True)
class EachClose:
    start: int
    end: int


@dataclass(frozen=True)
class Block:
    """One matched ``{{#each}}...{{/each}}`` region.

    ``start``/``end`` cover the delimiters; ``body`` is the text between them.
    """

    start: int
    end: int
    path: str
    var: str
    body: str


def is_block_tag(inner: str) -> bool:
    """True when a tag's inner text belongs to the block grammar."""
    stripped = inner.strip()
    return stripped.startswith("#each") or stripped == EACH_CLOSE


def iter_block_tags(content: str, pos: int = 0) -> Iterator[EachOpen | EachClose]:
    """Yield each-openers and each-closers found at or after ``pos``."""
    for match in BLOCK_TAG_PATTERN.finditer(content, pos):
        if match.group(3):
            yield EachClose(match.start(), match.end())
        else:
            yield EachOpen(match.start(), match.end(), match.group(1), match.group(2))


def find_first_block(content: str, pos: int = 0) -> Optional[Block]:
    """Return the leftmost top-level block starting at or after ``pos``.

    Pairs are matched with a stack. The matched pair with the smallest start
    cannot be enclosed by another matched pair, so it is the top-level block.
    """
    stack: List[EachOpen] = []
    pairs: List[Tuple[EachOpen, EachClose]] = []
    for tag in iter_block_tags(content, pos):
        if isinstance(tag, EachOpen):
            stack.append(tag)
        elif stack:
            pairs.append((stack.pop(), tag))

    if not pairs:
        return None

    opener, closer = min(pairs, key=lambda pair: pair[0].start)
    return Block(
        start=opener.start,
        end=closer.end,
        path=opener.path,
        var=opener.var,
        body=content[opener.end:closer.start],
    )


__all__ = [
    "Block",
    "EACH_CLOSE",
    "BLOCK_TAG_PATTERN",
    "EachClose",
    "EachOpen",
    "TAG_PATTERN",
    "find_first_block",
    "is_block_tag",
    "iter_block_tags",
]
