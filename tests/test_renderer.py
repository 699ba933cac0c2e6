"""Tests for the full markdown pipeline; need a Pandoc binary."""

import pypandoc
import pytest
from bs4 import BeautifulSoup
from django.template import Context, Template

from codeblock_labels.conf import LabelSettings
from codeblock_labels.markdown.renderer import render_markdown


def pandoc_available() -> bool:
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


pytestmark = pytest.mark.skipif(not pandoc_available(), reason="pandoc is not installed")

DOCUMENT = """Intro paragraph.

```python {My Script}
print(1)
```

```dataview
LIST
```

```
plain
```

```ruby
puts 1
```
"""


def test_render_labels_code_blocks() -> None:
    context = {"label_settings": LabelSettings()}
    html = render_markdown(DOCUMENT, context)

    soup = BeautifulSoup(html, "html.parser")
    labels = [p.get_text() for p in soup.select("p.codeblock-label")]
    assert labels == ["My Script", "ruby"]
    assert [el["data-language"] for el in soup.select(".labeled-codeblock")] == ["python", "ruby"]
    assert "data-codeblock-source-lines" not in html
    assert "{My Script}" not in html
    assert context["fence_spans"] == [(2, 4), (6, 8), (10, 12), (14, 16)]
    assert context["source_text"] == DOCUMENT


def test_render_without_code_blocks() -> None:
    html = render_markdown("Just *text*.", {"label_settings": LabelSettings()})
    assert "codeblock-label" not in html
    assert "<em>text</em>" in html


@pytest.mark.django_db
def test_markdown_filter() -> None:
    template = Template("{% load markdown_tags %}{{ body|markdown }}")
    html = template.render(Context({"body": "```python\nx = 1\n```"}))

    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one("p.codeblock-label").get_text() == "python"


def test_markdown_with_context_tag() -> None:
    template = Template("{% load markdown_tags %}{% markdown_with_context body %}")
    html = template.render(
        Context({"body": "```python\nx = 1\n```", "label_settings": LabelSettings(ignore_languages="python")})
    )
    assert "codeblock-label" not in html


def test_render_keeps_fences_shown_inside_tilde_blocks() -> None:
    source = "~~~markdown\n```python {My Script}\nx = 1\n```\n~~~\n"
    html = render_markdown(source, {"label_settings": LabelSettings()})

    soup = BeautifulSoup(html, "html.parser")
    assert "data-codeblock-source-lines" not in html
    assert "codeblock-label" not in html
    assert "```python {My Script}" in soup.get_text()
