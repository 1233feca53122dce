"""
Health check and public configuration routes
"""
from flask import Blueprint, jsonify

from markdown_translator import __version__
from markdown_translator.config import OPENAI_MODEL, REQUEST_TIMEOUT
from markdown_translator.core.models import Direction
from markdown_translator.core.orchestrator import ADAPTER_CHAIN


def create_config_blueprint():
    """Create and configure the config blueprint"""
    bp = Blueprint('config', __name__)

    @bp.route('/api/health', methods=['GET'])
    def health_check():
        """API health check endpoint"""
        return jsonify({
            "status": "ok",
            "message": "Markdown translation API is running",
            "version": __version__,
            "directions": [direction.value for direction in Direction],
            "provider_chain": [tier.provider for tier in ADAPTER_CHAIN],
            "openai_model": OPENAI_MODEL,
            "request_timeout": REQUEST_TIMEOUT
        })

    return bp
