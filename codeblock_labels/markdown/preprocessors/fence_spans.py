"""
Preprocessor that tags fenced code blocks with their source line span.

Converts the opening fence of every closed backtick block:

    ```python {My Script}        → ```{.python data-codeblock-source-lines="4-9"}
    ``` {Output}                 → ```{data-codeblock-source-lines="12-14"}

Pandoc carries the attribute into the rendered HTML, which lets
postprocessors map a rendered block back to the original source lines
(0-based, closing fence included). The label directive is dropped from the
text Pandoc sees; postprocessors read it from the original source, kept in
``context["source_text"]``. The number of lines never changes.
"""

import re
from typing import List, Tuple

from ..context import SOURCE_LINES_ATTR

OPENING_FENCE = re.compile(r"^(?P<indent> {0,3})(?P<ticks>`{3,})(?P<info>[^`]*)$")
CLOSING_FENCE = re.compile(r"^ {0,3}(?P<ticks>`{3,})\s*$")
TILDE_OPENING_FENCE = re.compile(r"^ {0,3}(?P<tildes>~{3,})")
TILDE_CLOSING_FENCE = re.compile(r"^ {0,3}(?P<tildes>~{3,})\s*$")
INFO_LANGUAGE = re.compile(r"^(?P<lang>[^\s^{]+)")

# Languages Pandoc accepts as a class in an attribute block
PANDOC_CLASS = re.compile(r"^[A-Za-z][\w-]*$")


def find_fence_spans(lines: List[str]) -> List[Tuple[int, int]]:
    """
    Locate closed backtick fences.

    Tilde fences are skipped whole: backtick fences inside them are code.

    Returns:
        (opening line, closing line) index pairs, in document order
    """
    spans = []
    start = None
    ticks = 0
    tildes = 0

    for index, line in enumerate(lines):
        if tildes:
            match = TILDE_CLOSING_FENCE.match(line)
            if match and len(match.group("tildes")) >= tildes:
                tildes = 0
            continue

        if start is None:
            match = OPENING_FENCE.match(line)
            if match:
                start = index
                ticks = len(match.group("ticks"))
                continue
            match = TILDE_OPENING_FENCE.match(line)
            if match:
                tildes = len(match.group("tildes"))
            continue

        match = CLOSING_FENCE.match(line)
        if match and len(match.group("ticks")) >= ticks:
            spans.append((start, index))
            start = None

    return spans


def rewrite_opening_fence(line: str, start: int, end: int) -> str:
    """Replace the fence info string with a Pandoc attribute block."""
    match = OPENING_FENCE.match(line)
    info = match.group("info").strip()

    attributes = []
    language = INFO_LANGUAGE.match(info)
    if language and PANDOC_CLASS.match(language.group("lang")):
        attributes.append("." + language.group("lang"))
    attributes.append(f'{SOURCE_LINES_ATTR}="{start}-{end}"')

    return f'{match.group("indent")}{match.group("ticks")}{{{" ".join(attributes)}}}'


def annotate_fence_spans(text: str, context: dict) -> str:
    """
    Tag each closed fenced code block with its source line span.

    Args:
        text: Markdown text
        context: Render context; spans are recorded under 'fence_spans'

    Returns:
        Markdown with rewritten opening fences
    """
    lines = text.split("\n")
    spans = find_fence_spans(lines)

    for start, end in spans:
        lines[start] = rewrite_opening_fence(lines[start], start, end)

    context["fence_spans"] = spans
    return "\n".join(lines)


def fence_spans_default(text: str, context: dict) -> str:
    """Default instance of the fence span preprocessor"""
    return annotate_fence_spans(text, context)
