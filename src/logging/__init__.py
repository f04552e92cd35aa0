"""
Logging package - Universal session logger.

Usage:
    from src.logging import get_logger

    logger = get_logger()
    logger.info("Importing registry...")
    logger.success("Completed!")
"""

from src.logging.logger import get_logger, configure_logger, DashboardLogger

__all__ = [
    "get_logger",
    "configure_logger",
    "DashboardLogger",
]
