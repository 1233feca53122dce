"""
HTTP API
"""
from flask import Flask
from flask_cors import CORS

from markdown_translator.core.service import TranslationService
from .routes import configure_routes


def create_app(service_factory=TranslationService):
    """
    Build the Flask application

    Args:
        service_factory: Callable returning a TranslationService per request
    """
    app = Flask(__name__)
    CORS(app)
    configure_routes(app, service_factory)
    return app


__all__ = ['create_app', 'configure_routes']
