"""Unit tests for Markdown → HTML document rendering."""

from markdown_translator.rendering import convert_markdown_to_html
from markdown_translator.rendering.markdown_converter import render_markdown_body


SAMPLE_MARKDOWN = """# Title

Some *emphasis* and a footnote.[^1]

| Name | Value |
|------|-------|
| a    | 1     |

```python
print("hi")
```

[^1]: The note.
"""


class TestRenderMarkdownBody:

    def test_heading_wrapped_in_anchor_link(self):
        body = render_markdown_body("## Section Two")

        assert 'id="section-two"' in body
        assert 'class="anchor-link"' in body
        assert 'href="#section-two"' in body

    def test_table(self):
        body = render_markdown_body(SAMPLE_MARKDOWN)

        assert "<table>" in body
        assert "<th>Name</th>" in body

    def test_fenced_code(self):
        body = render_markdown_body(SAMPLE_MARKDOWN)

        assert "<pre><code" in body
        assert "print(&quot;hi&quot;)" in body

    def test_footnotes(self):
        body = render_markdown_body(SAMPLE_MARKDOWN)

        assert 'class="footnote-ref"' in body
        assert 'class="footnote"' in body
        assert "The note." in body

    def test_raw_html_passes_through(self):
        body = render_markdown_body('<div class="note">kept</div>\n\ntext')

        assert '<div class="note">kept</div>' in body


class TestConvertMarkdownToHtml:

    def test_complete_document(self):
        html = convert_markdown_to_html(SAMPLE_MARKDOWN)

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="ja">' in html
        assert '<meta charset="UTF-8">' in html
        assert "<title>Converted from Markdown</title>" in html
        assert "<style>" in html
        assert "</html>" in html.rstrip()[-10:]

    def test_custom_title_is_escaped(self):
        html = convert_markdown_to_html("text", title="A <b> & B")

        assert "<title>A &lt;b&gt; &amp; B</title>" in html

    def test_blank_title_uses_default(self):
        assert "<title>Converted from Markdown</title>" in convert_markdown_to_html("text", title="")

    def test_footnote_label_follows_language(self):
        assert "脚注" in convert_markdown_to_html(SAMPLE_MARKDOWN, lang="ja")
        assert '"Footnotes"' in convert_markdown_to_html(SAMPLE_MARKDOWN, lang="en")

    def test_body_is_not_escaped(self):
        html = convert_markdown_to_html("Some *emphasis*")

        assert "<em>emphasis</em>" in html
