"""
Flask routes orchestrator for the converter API

Registers the route blueprints:

- blueprints/config_routes.py: Health check
- blueprints/translation_routes.py: HTML translation
- blueprints/markdown_routes.py: Markdown conversion and fetching
"""
import logging
from flask import jsonify

from .blueprints import (
    create_config_blueprint,
    create_translation_blueprint,
    create_markdown_blueprint
)

logger = logging.getLogger('routes')


def configure_routes(app, service_factory):
    """
    Configure Flask routes by registering all blueprints

    Args:
        app: Flask application instance
        service_factory: Callable returning a fresh TranslationService
    """
    app.register_blueprint(create_config_blueprint())
    app.register_blueprint(create_translation_blueprint(service_factory))
    app.register_blueprint(create_markdown_blueprint())

    _register_error_handlers(app)


def _register_error_handlers(app):
    """Register global error handlers"""

    @app.errorhandler(404)
    def route_not_found(error):
        return jsonify({"error": "API Endpoint not found"}), 404

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error(f"INTERNAL SERVER ERROR: {error}", exc_info=True)
        return jsonify({"error": "Internal server error", "details": str(error)}), 500
