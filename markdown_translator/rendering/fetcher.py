"""
Download Markdown documents from a URL.
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import urlparse

import requests

from markdown_translator.config import FETCH_TIMEOUT
from markdown_translator.core.exceptions import MarkdownFetchError

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "fetched-markdown"
_MARKDOWN_SUFFIX_RE = re.compile(r"\.(md|markdown)$", re.IGNORECASE)


@dataclass
class FetchedMarkdown:
    content: str
    filename: str


def filename_from_url(url: str) -> str:
    """Last path segment without its .md/.markdown suffix."""
    path = urlparse(url).path
    last_segment = path.rstrip("/").split("/")[-1] if path else ""
    name = _MARKDOWN_SUFFIX_RE.sub("", last_segment)
    return name or DEFAULT_FILENAME


def fetch_markdown(url: str, timeout: float = FETCH_TIMEOUT) -> FetchedMarkdown:
    """
    GET a Markdown document.

    Raises:
        MarkdownFetchError: on a non-2xx answer or any transport failure
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"Error fetching markdown from {url}: {e}")
        raise MarkdownFetchError(f"Failed to fetch markdown: {e}", url) from e

    if not response.ok:
        logger.error(f"Error fetching markdown from {url}: HTTP {response.status_code}")
        raise MarkdownFetchError(f"HTTP error! status: {response.status_code}", url, response.status_code)

    # Markdown served as text/plain often lacks a charset
    if response.encoding is None or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"

    return FetchedMarkdown(content=response.text, filename=filename_from_url(url))
