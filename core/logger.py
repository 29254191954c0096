"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_configured = False


def _resolve_level(settings) -> str:
    # LOG_LEVEL takes precedence over DEBUG flag
    if settings.log_level:
        level = settings.log_level.upper()
        if level in LOG_LEVELS:
            return level
        return "INFO"
    return "DEBUG" if settings.debug else "INFO"


def setup_logger(force: bool = False) -> None:
    """Configure logger handlers. Only configures once unless forced."""
    global _configured
    if _configured and not force:
        return

    from .config import Settings, get_settings

    try:
        settings = get_settings()
    except ValidationError:
        # Invalid settings are reported by whoever loads them; log with defaults
        settings = Settings.model_construct()
    log_level = _resolve_level(settings)

    logger.remove()

    # stdout belongs to the demo output, logs go to stderr
    logger.add(
        sys.stderr,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
    )

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "app.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",  # File logs always DEBUG to capture everything
        )

        logger.add(
            log_dir / "error.log",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="ERROR",
        )

    _configured = True


# Configure logger on module import
setup_logger()

__all__ = ["logger", "setup_logger"]
