"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if _debug_mode:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")

# Get config directory (current working directory)
_config_dir = Path.cwd()
_env_file = _config_dir / '.env'

if not _env_file.exists():
    # API keys never come from here, so the defaults are usable as-is
    _config_logger.info(f".env not found in {_config_dir}, using default settings")

# Load .env file if it exists
_dotenv_result = load_dotenv(_env_file)
if _debug_mode:
    _config_logger.debug(f"load_dotenv() returned: {_dotenv_result}")

# Server configuration
HOST = os.getenv('HOST', '127.0.0.1')
PORT = int(os.getenv('PORT', '5000'))

# Upper bound (seconds) for a single call to a translation provider.
# Expiry is reported to the caller as an upstream timeout.
REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '120'))

# Primary provider (OpenAI chat completions)
OPENAI_API_ENDPOINT = os.getenv('OPENAI_API_ENDPOINT', 'https://api.openai.com/v1/chat/completions')
OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo')
OPENAI_TEMPERATURE = float(os.getenv('OPENAI_TEMPERATURE', '0.3'))
OPENAI_MAX_TOKENS = int(os.getenv('OPENAI_MAX_TOKENS', '4000'))

# Secondary provider (Google Cloud Translation v2)
GOOGLE_TRANSLATE_ENDPOINT = os.getenv(
    'GOOGLE_TRANSLATE_ENDPOINT',
    'https://translation.googleapis.com/language/translate/v2'
)

# Markdown rendering / fetching
FETCH_TIMEOUT = int(os.getenv('FETCH_TIMEOUT', '30'))
DEFAULT_DOCUMENT_TITLE = os.getenv('DEFAULT_DOCUMENT_TITLE', 'Converted from Markdown')
DOCUMENT_LANGUAGE = os.getenv('DOCUMENT_LANGUAGE', 'ja')

# Debug mode (reload after .env is loaded)
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'

# Log loaded configuration in debug mode
if DEBUG_MODE or _debug_mode:
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("=" * 60)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug("=" * 60)
    _config_logger.debug(f"   HOST: {HOST}")
    _config_logger.debug(f"   PORT: {PORT}")
    _config_logger.debug(f"   REQUEST_TIMEOUT: {REQUEST_TIMEOUT}")
    _config_logger.debug(f"   OPENAI_API_ENDPOINT: {OPENAI_API_ENDPOINT}")
    _config_logger.debug(f"   OPENAI_MODEL: {OPENAI_MODEL}")
    _config_logger.debug(f"   GOOGLE_TRANSLATE_ENDPOINT: {GOOGLE_TRANSLATE_ENDPOINT}")
    _config_logger.debug(f"   FETCH_TIMEOUT: {FETCH_TIMEOUT}")
    _config_logger.debug("=" * 60)

# Language prefixes some passes leave in front of translated fragments
LANGUAGE_PREFIX_PATTERN = r'\[(?:EN|JP)\]\s*'
