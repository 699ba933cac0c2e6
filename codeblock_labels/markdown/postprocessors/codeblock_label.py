# codeblock_labels/markdown/postprocessors/codeblock_label.py
"""
Postprocessor that labels fenced code blocks.

The label comes from an explicit directive on the opening fence, or falls
back to the block's language:

    ```python {My Script}        →  label "My Script", data-language="python"
    ```python                    →  label "python" (if show_language_as_label)
    ```dataview                  →  untouched (ignored language)

Output for a labeled block:

    <div class="sourceCode labeled-codeblock" data-language="python">
        <p class="codeblock-label">My Script</p>
        <pre class="sourceCode python"><code>...</code></pre>
    </div>

Every failure mode is a silent skip: this runs over every rendered block.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from codeblock_labels.conf import LabelSettings, get_label_settings

from ..context import SOURCE_LINES_ATTR, SectionContext
from .utils import get_shared_soup, soup_to_html

logger = logging.getLogger(__name__)

FENCE = "```"

# First line of a fenced code block: optional language token, then an
# optional {label} directive after optional whitespace
FENCED_CODEBLOCK_START = re.compile(r"^```(?P<lang>[^\s^{]+)?\s*(?:{(?P<label>[^}]+)})?")

LABEL_CLASS = "codeblock-label"
LABELED_CLASS = "labeled-codeblock"
LANGUAGE_ATTR = "data-language"


@dataclass(frozen=True)
class LabelDecision:
    label_text: str
    language: Optional[str]


def section_lines(text: str, line_start: int, line_end: int) -> List[str]:
    """Return the stripped source lines of a span, ends inclusive."""
    return [line.strip() for line in text.split("\n")][line_start : line_end + 1]


def resolve_label(lines: List[str], settings: LabelSettings) -> Optional[LabelDecision]:
    """
    Decide what label, if any, a fenced block gets.

    Args:
        lines: Stripped source lines of the block, fences included
        settings: Label settings

    Returns:
        LabelDecision, or None if the block should be left alone
    """
    if len(lines) < 2 or not lines[0].startswith(FENCE) or not lines[-1].endswith(FENCE):
        return None

    match = FENCED_CODEBLOCK_START.match(lines[0])
    if match is None:
        return None

    language = match.group("lang")

    if language in settings.ignored_languages:
        logger.debug("ignoring %s", language)
        return None

    # An explicit label wins; otherwise fall back to the language
    label_text = match.group("label")
    if label_text is None and settings.show_language_as_label:
        label_text = language

    if label_text is None:
        return None

    return LabelDecision(label_text=label_text, language=language)


def apply_label(el: Tag, context: SectionContext, decision: LabelDecision) -> Tag:
    """Prepend the label element and mark the block container."""
    soup = BeautifulSoup("", "html.parser")
    label = soup.new_tag("p", attrs={"class": [LABEL_CLASS]})
    label.string = decision.label_text

    el.insert(0, label)

    existing_classes = el.get("class", [])
    if isinstance(existing_classes, str):
        existing_classes = existing_classes.split()
    el["class"] = list(dict.fromkeys(existing_classes + [LABELED_CLASS]))

    el[LANGUAGE_ATTR] = decision.language or ""

    context.add_child(label)
    return label


def process(el: Tag, context: SectionContext, settings: LabelSettings) -> None:
    """
    Label one rendered block.

    Args:
        el: Container of the rendered block
        context: Host context resolving the block to its source span
        settings: Label settings
    """
    # Only code blocks, which render as a code tag inside a pre tag
    if el.select_one("pre > code") is None:
        return

    section = context.get_section_info(el)
    if section is None:
        return

    lines = section_lines(section.text, section.line_start, section.line_end)
    decision = resolve_label(lines, settings)
    if decision is None:
        return

    apply_label(el, context, decision)


def find_block_container(tagged: Tag) -> Tag:
    """
    Return the element that represents a whole rendered code block.

    Pandoc wraps highlighted code in ``div.sourceCode``; a bare ``pre`` is
    wrapped in a new ``div`` so the label can sit beside it.
    """
    if tagged.name != "pre":
        return tagged

    parent = tagged.parent
    if isinstance(parent, Tag) and parent.name == "div" and "sourceCode" in parent.get("class", []):
        return parent

    soup = BeautifulSoup("", "html.parser")
    return tagged.wrap(soup.new_tag("div"))


def codeblock_label(html: str, context: dict, settings: Optional[LabelSettings] = None) -> str:
    """
    Label every fenced code block in rendered HTML.

    Args:
        html: HTML string to process
        context: Render context; reads 'source_text' and optional 'label_settings',
            stores the SectionContext under 'section_context'
        settings: Label settings (default: context['label_settings'] or stored settings)

    Returns:
        Processed HTML with labeled code blocks
    """
    soup = get_shared_soup(html, context)

    tagged_blocks = soup.find_all(attrs={SOURCE_LINES_ATTR: True})
    if not tagged_blocks:
        return html

    if settings is None:
        settings = context.get("label_settings") or get_label_settings()

    section_context = SectionContext(context.get("source_text"))
    context["section_context"] = section_context

    for tagged in tagged_blocks:
        try:
            process(find_block_container(tagged), section_context, settings)
        except Exception as e:
            logger.error(f"Code block labeling failed: {e}", exc_info=True)

    for tagged in tagged_blocks:
        del tagged[SOURCE_LINES_ATTR]

    return soup_to_html(context, soup)


def codeblock_label_default(html: str, context: dict) -> str:
    """
    Default configuration for codeblock_label.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return codeblock_label(html, context)
