"""
Translation routes
"""
import asyncio
import logging
from flask import Blueprint, request, jsonify

from markdown_translator.core.error_classifier import classify_exception

logger = logging.getLogger('translation_routes')


def create_translation_blueprint(service_factory):
    """
    Create and configure the translation blueprint

    Args:
        service_factory: Callable returning a TranslationService. Called once
            per request so nothing (API keys included) is shared between requests.
    """
    bp = Blueprint('translation', __name__)

    @bp.route('/api/translate', methods=['POST'])
    def translate_html():
        """Translate an HTML document with the caller's API keys"""
        data = request.get_json(silent=True)

        try:
            result = asyncio.run(service_factory().translate_payload(data))
        except Exception as e:
            logger.exception("Translation error")
            return jsonify(classify_exception(e).to_dict()), 500

        if result.is_ok():
            return jsonify(result.unwrap().to_dict())

        error = result.unwrap_err()
        status_code = 400 if error.kind.is_local else 500
        return jsonify(error.to_dict()), status_code

    return bp
