"""
Flask web server for the Markdown converter and translation API
"""
import logging
from datetime import datetime

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Reduce verbosity of werkzeug (Flask HTTP server logs)
logging.getLogger('werkzeug').setLevel(logging.WARNING)

from markdown_translator.config import (
    HOST,
    PORT,
    DEBUG_MODE,
    REQUEST_TIMEOUT,
    OPENAI_API_ENDPOINT,
    GOOGLE_TRANSLATE_ENDPOINT
)
from markdown_translator.api import create_app

if DEBUG_MODE:
    logging.getLogger().setLevel(logging.DEBUG)

app = create_app()


def validate_configuration():
    """Validate required configuration before starting server"""
    issues = []

    if not PORT or not isinstance(PORT, int):
        issues.append("PORT must be a valid integer")
    if REQUEST_TIMEOUT <= 0:
        issues.append("REQUEST_TIMEOUT must be a positive number of seconds")
    if not OPENAI_API_ENDPOINT:
        issues.append("OPENAI_API_ENDPOINT must be configured")
    if not GOOGLE_TRANSLATE_ENDPOINT:
        issues.append("GOOGLE_TRANSLATE_ENDPOINT must be configured")

    if issues:
        logger.error("=" * 70)
        logger.error("CONFIGURATION ERROR")
        logger.error("=" * 70)
        for issue in issues:
            logger.error(f"   • {issue}")
        logger.error("=" * 70)
        raise ValueError("Configuration validation failed. See errors above.")

    logger.info("Configuration validated successfully")


if __name__ == '__main__':
    validate_configuration()

    logger.info("=" * 60)
    logger.info(f"MARKDOWN TRANSLATION SERVER (Version {datetime.now().strftime('%Y%m%d-%H%M')})")
    logger.info("=" * 60)
    logger.info(f"   - API: http://{HOST}:{PORT}/api/")
    logger.info(f"   - Health Check: http://{HOST}:{PORT}/api/health")
    logger.info(f"   - Provider timeout: {REQUEST_TIMEOUT}s")
    logger.info("   - API keys are supplied per request and never stored")
    logger.info("")

    if HOST == '0.0.0.0':
        logger.warning("Server is binding to 0.0.0.0 (all network interfaces)")
        logger.warning("   For production, use a proper WSGI server like gunicorn:")
        logger.warning("   gunicorn -w 2 --bind 0.0.0.0:5000 translation_api:app")

    app.run(debug=False, host=HOST, port=PORT)
