"""
Markdown conversion and fetching routes
"""
import logging
from flask import Blueprint, request, jsonify

from markdown_translator.config import DEFAULT_DOCUMENT_TITLE
from markdown_translator.core.exceptions import MarkdownFetchError
from markdown_translator.rendering import convert_markdown_to_html, fetch_markdown

logger = logging.getLogger('markdown_routes')


def create_markdown_blueprint():
    """Create and configure the markdown blueprint"""
    bp = Blueprint('markdown', __name__)

    @bp.route('/api/convert', methods=['POST'])
    def convert_markdown():
        """Render Markdown into a complete styled HTML document"""
        data = request.get_json(silent=True) or {}
        markdown_text = data.get('markdown')
        if not isinstance(markdown_text, str) or not markdown_text.strip():
            return jsonify({"error": "Markdown content is required"}), 400

        title = data.get('title') or DEFAULT_DOCUMENT_TITLE
        return jsonify({"html": convert_markdown_to_html(markdown_text, title=title)})

    @bp.route('/api/fetch-markdown', methods=['GET'])
    def fetch_markdown_from_url():
        """Download a Markdown file and return its content and base name"""
        url = request.args.get('url')
        if not url:
            return jsonify({"error": "URL parameter is required"}), 400

        try:
            fetched = fetch_markdown(url)
        except MarkdownFetchError as e:
            logger.error(f"Error fetching markdown: {e}")
            return jsonify({"error": "Failed to fetch markdown from URL"}), 500

        return jsonify({"content": fetched.content, "filename": fetched.filename})

    return bp
