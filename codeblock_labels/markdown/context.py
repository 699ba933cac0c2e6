# codeblock_labels/markdown/context.py
"""
Host context handed to per-block postprocessors.

The fence span preprocessor tags every rendered code block with the source
lines it came from (``data-codeblock-source-lines="start-end"``, 0-based, inclusive).
SectionContext resolves a rendered element back to that span and owns the
elements postprocessors attach to it, so they can be torn down together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from bs4 import Tag

SOURCE_LINES_ATTR = "data-codeblock-source-lines"


@dataclass(frozen=True)
class SectionInfo:
    text: str
    line_start: int
    line_end: int


def parse_source_lines(value) -> Optional[tuple]:
    """Parse a ``start-end`` attribute value, returning None if malformed."""
    if not isinstance(value, str):
        return None
    start, sep, end = value.partition("-")
    if not sep or not start.isdigit() or not end.isdigit():
        return None
    return int(start), int(end)


class SectionContext:
    def __init__(self, source_text: Optional[str]):
        self.source_text = source_text
        self.children: List[Tag] = []

    def get_section_info(self, el: Tag) -> Optional[SectionInfo]:
        """
        Return the source span of a rendered block, or None if unknown.

        The span attribute may sit on the element itself or on a descendant
        (Pandoc places it on the ``pre`` when it does not wrap the block).
        """
        if self.source_text is None:
            return None

        tagged = el if el.has_attr(SOURCE_LINES_ATTR) else el.find(
            attrs={SOURCE_LINES_ATTR: True}
        )
        if tagged is None:
            return None

        span = parse_source_lines(tagged.get(SOURCE_LINES_ATTR))
        if span is None:
            return None

        return SectionInfo(text=self.source_text, line_start=span[0], line_end=span[1])

    def add_child(self, child: Tag) -> None:
        self.children.append(child)

    def unload(self) -> None:
        """Remove every registered child from the tree."""
        for child in self.children:
            child.decompose()
        self.children = []
