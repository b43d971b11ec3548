"""
Logging configuration for rozmarra.

Uses loguru for structured logging. The library packages stay silent until
``setup_logging()`` is called, so importing a calculator never writes to
stderr on its own.
"""

import sys

from loguru import logger

from config import settings as config
from errors import ConfigurationError

# Packages that log through loguru and are muted until setup_logging()
LIBRARY_PACKAGES = ("records", "services")

for _package in LIBRARY_PACKAGES:
    logger.disable(_package)


def setup_logging(settings=None) -> None:
    """Configure logging based on settings.

    Sets up:
    - Console output with color and formatting
    - File output with rotation and retention, when enabled
    - Log levels from configuration

    Should be called once at application startup.

    Args:
        settings: Settings to use (defaults to the current global settings)

    Raises:
        ConfigurationError: If the logs directory cannot be created
    """
    settings = settings or config.settings

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        colorize=True,
    )

    if settings.log_to_file:
        log_dir = settings.logs_dir
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise ConfigurationError(
                f"Could not create logs directory '{log_dir}': {error}"
            ) from error

        logger.add(
            log_dir / "rozmarra_{time:YYYY-MM-DD}.log",
            level="DEBUG",  # Always log everything to file
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="gz",
        )

    for package in LIBRARY_PACKAGES:
        logger.enable(package)

    logger.info("Logging initialized (level={})", settings.log_level)


def get_logger(name: str):
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        >>> from core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Rejected cart: {}", reason)
    """
    return logger.bind(module=name)
