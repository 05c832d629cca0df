"""Configuration utility for CSS Stylecheck."""

# Project version
VERSION = "1.0.0"

# House style defaults
DEFAULT_INDENT_WIDTH = 4
DEFAULT_MAX_DECLARATIONS = 25
TAB_WIDTH = 4

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB
MAX_HTML_SIZE = 10 * 1024 * 1024    # 10 MB

# Timeouts (in seconds)
REQUEST_TIMEOUT = 30

# Worker threads for multi-file runs (None lets the executor decide)
DEFAULT_JOBS = None

# Supported file extensions
CSS_EXTENSIONS = ['.css']

# User-Agent for markup requests
USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
    'AppleWebKit/537.36 (KHTML, like Gecko) '
    'Chrome/91.0.4472.124 Safari/537.36'
)

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Exported config
__all__ = [
    'VERSION',
    'DEFAULT_INDENT_WIDTH', 'DEFAULT_MAX_DECLARATIONS', 'TAB_WIDTH',
    'MAX_CSS_SIZE', 'MAX_HTML_SIZE',
    'REQUEST_TIMEOUT', 'DEFAULT_JOBS',
    'CSS_EXTENSIONS',
    'USER_AGENT', 'LOG_FORMAT', 'LOG_DATE_FORMAT',
]
