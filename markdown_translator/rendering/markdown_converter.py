"""
Markdown → styled HTML document.

Uses:
- Python-Markdown: Markdown → HTML body (tables, fenced code, footnotes,
  heading ids wrapped in anchor links, raw HTML passed through)
- Jinja2: wraps the body in a complete, styled HTML page
"""

from pathlib import Path

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape

from markdown_translator.config import DEFAULT_DOCUMENT_TITLE, DOCUMENT_LANGUAGE

TEMPLATES_DIR = Path(__file__).parent / "templates"
DOCUMENT_TEMPLATE = "document.html"

MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "footnotes",
    "md_in_html",
    "sane_lists",
    "toc",
]

MARKDOWN_EXTENSION_CONFIGS = {
    # Heading text becomes a link to its own id
    "toc": {
        "anchorlink": True,
        "anchorlink_class": "anchor-link",
    },
    "footnotes": {
        "BACKLINK_TEXT": "↩",
    },
}

FOOTNOTES_LABEL = {"ja": "脚注", "en": "Footnotes"}

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"])
)


def render_markdown_body(markdown_text: str) -> str:
    """Convert Markdown to an HTML fragment (no <html>/<head> wrapper)."""
    converter = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        output_format="html"
    )
    return converter.convert(markdown_text)


def convert_markdown_to_html(markdown_text: str, title: str = DEFAULT_DOCUMENT_TITLE,
                             lang: str = DOCUMENT_LANGUAGE) -> str:
    """
    Convert Markdown into a complete, styled HTML document.

    Args:
        markdown_text: Raw Markdown source
        title: Text for the <title> element
        lang: Value of the <html lang> attribute

    Returns:
        HTML document string starting with <!DOCTYPE html>
    """
    template = _environment.get_template(DOCUMENT_TEMPLATE)
    return template.render(
        body=render_markdown_body(markdown_text),
        title=title or DEFAULT_DOCUMENT_TITLE,
        lang=lang,
        footnotes_label=FOOTNOTES_LABEL.get(lang, FOOTNOTES_LABEL["en"])
    )
