"""Test configuration and fixtures."""

import pytest
from bs4 import BeautifulSoup
from django.core.cache import cache

from codeblock_labels.conf import LabelSettings


@pytest.fixture(autouse=True)
def clear_cache():
    """Cached settings must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def default_settings() -> LabelSettings:
    return LabelSettings()


@pytest.fixture
def make_block():
    """Build a rendered code block container tagged with a source span."""

    def _make_block(start: int, end: int, code: str = "x = 1"):
        soup = BeautifulSoup(
            f'<div class="sourceCode" data-codeblock-source-lines="{start}-{end}">'
            f"<pre><code>{code}</code></pre></div>",
            "html.parser",
        )
        return soup.div

    return _make_block
