"""Logging setup for foldline."""

from foldline.logger.logger import logger, reconfigure, setup_logger

__all__ = ["logger", "reconfigure", "setup_logger"]
