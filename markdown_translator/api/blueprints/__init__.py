"""
API Routes
"""
from .config_routes import create_config_blueprint
from .translation_routes import create_translation_blueprint
from .markdown_routes import create_markdown_blueprint

__all__ = [
    'create_config_blueprint',
    'create_translation_blueprint',
    'create_markdown_blueprint'
]
