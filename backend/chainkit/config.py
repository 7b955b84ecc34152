"""
Environment configuration for chainkit.

Values are read from the process environment (a local .env file is
loaded first). Explicit constructor arguments always take precedence
over anything configured here.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_LOG_FILE = "debug_log.txt"
DEFAULT_LOG_LEVEL = "INFO"


def get_log_file_path() -> str:
    """Get the debug log file path from environment"""
    return os.getenv("CHAINKIT_LOG_FILE", DEFAULT_LOG_FILE)


def get_log_level() -> str:
    """Get the logging level name from environment"""
    return os.getenv("CHAINKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
