"""
Centralized Configuration Module

Application constants, logging configuration, and settings.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded environment from: {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv()


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide configuration constants"""

    APP_NAME = "Abstract Factory Demo"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Run the same client code against two families of compatible products"


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    # Log Format
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    # Read at call time so a .env loaded by the CLI still applies
    @staticmethod
    def level() -> int:
        """Get the configured log level (LOG_LEVEL env var, default WARNING)"""
        name = os.getenv("LOG_LEVEL", "WARNING").upper()
        return getattr(logging, name, logging.WARNING)

    @staticmethod
    def log_file() -> Optional[str]:
        """Get the optional log file path (LOG_FILE env var)"""
        return os.getenv("LOG_FILE") or None

    @staticmethod
    def max_bytes() -> int:
        """Get the rotation size for the log file (LOG_FILE_MAX_BYTES, default 10MB)"""
        return int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))

    @staticmethod
    def backup_count() -> int:
        """Get the number of rotated log files to keep (LOG_FILE_BACKUP_COUNT, default 5)"""
        return int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Log records go to stderr so stdout carries only the demo output.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = LogConfig.level()

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    # Configure root logger
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )
    logging.getLogger().setLevel(log_level)

    file_path = log_file or LogConfig.log_file()
    if file_path:
        from logging.handlers import RotatingFileHandler

        root = logging.getLogger()
        abs_path = os.path.abspath(file_path)

        # One handler per file, however many times logging is set up
        existing = [
            h for h in root.handlers
            if isinstance(h, RotatingFileHandler) and h.baseFilename == abs_path
        ]
        if existing:
            existing[0].setLevel(log_level)
        else:
            file_handler = RotatingFileHandler(
                file_path,
                maxBytes=LogConfig.max_bytes(),
                backupCount=LogConfig.backup_count()
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
            root.addHandler(file_handler)
            logger.info(f"Logging to file: {file_path}")

    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")


logger = logging.getLogger(__name__)


__all__ = [
    'AppConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
]
