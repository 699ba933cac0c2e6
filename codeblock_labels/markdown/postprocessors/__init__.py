# codeblock_labels/markdown/postprocessors/__init__.py

from .codeblock_label import codeblock_label_default

POSTPROCESSORS = [
    codeblock_label_default,  # Label fenced code blocks from their opening fence
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
