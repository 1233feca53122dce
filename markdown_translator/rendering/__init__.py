"""
Markdown rendering: Markdown → styled HTML document, and fetching Markdown from URLs
"""
from .markdown_converter import convert_markdown_to_html, render_markdown_body
from .fetcher import fetch_markdown, filename_from_url, FetchedMarkdown

__all__ = [
    'convert_markdown_to_html',
    'render_markdown_body',
    'fetch_markdown',
    'filename_from_url',
    'FetchedMarkdown',
]
