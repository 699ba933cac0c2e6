# codeblock_labels/markdown/preprocessors/__init__.py

from .fence_spans import fence_spans_default

PREPROCESSORS = [
    fence_spans_default,  # Must keep the line count unchanged
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
