"""
Logging and Error Handling System

This module provides centralized logging configuration and error tracking
for the walkthrough collector.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from typing import Dict, Any
import traceback
from pathlib import Path


APP_NAME = "walkthrough_archive"


class WalkthroughLogger:
    """
    Centralized logging system for the walkthrough collector.

    Every module logs through ``logging.getLogger(__name__)``; since all
    module loggers live below the application logger, the handlers installed
    here receive their records.
    """

    def __init__(self, log_dir: str = "logs", app_name: str = APP_NAME):
        """
        Initialize the logging system.

        Args:
            log_dir: Directory to store log files
            app_name: Name of the application logger
        """
        self.log_dir = Path(log_dir)
        self.app_name = app_name

        self.log_dir.mkdir(parents=True, exist_ok=True)

    def setup_logger(self, level: int = logging.INFO) -> logging.Logger:
        """
        Set up the application logger with file and console handlers.

        Args:
            level: Console logging level (default: INFO)

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger(self.app_name)
        logger.setLevel(logging.DEBUG)

        # Prevent duplicate handlers
        if logger.handlers:
            return logger

        detailed_formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        )

        log_file = self.log_dir / f"{self.app_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)

        # stdout carries the article list
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)

        error_file = self.log_dir / f"{self.app_name}_errors.log"
        error_handler = logging.handlers.RotatingFileHandler(
            error_file,
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(detailed_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.addHandler(error_handler)

        return logger

    def log_system_info(self):
        """Log system information for debugging."""
        logger = logging.getLogger(f"{self.app_name}.system")

        logger.info("=== Walkthrough Archive Started ===")
        logger.debug(f"Python version: {sys.version}")
        logger.debug(f"Platform: {sys.platform}")
        logger.debug(f"Working directory: {os.getcwd()}")
        logger.debug(f"Log directory: {self.log_dir.absolute()}")


class ErrorTracker:
    """
    Tracks errors that were tolerated during a run.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.errors: list = []

    def log_error(self,
                  error: Exception,
                  context: str = None,
                  url: str = None) -> str:
        """
        Log an error with context information.

        Args:
            error: The exception that occurred
            context: Context where the error occurred
            url: URL being processed when the error occurred

        Returns:
            Error ID for tracking
        """
        error_id = f"ERR_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{len(self.errors):03d}"

        error_data = {
            'id': error_id,
            'timestamp': datetime.now(),
            'type': type(error).__name__,
            'message': str(error),
            'context': context,
            'url': url,
            'traceback': ''.join(traceback.format_exception(type(error), error, error.__traceback__)),
        }

        self.errors.append(error_data)

        log_message = f"[{error_id}] {error_data['type']}: {error_data['message']}"
        if context:
            log_message += f" (Context: {context})"
        if url:
            log_message += f" (URL: {url})"

        self.logger.warning(log_message)
        self.logger.debug(f"[{error_id}] Full traceback:\n{error_data['traceback']}")

        return error_id

    def get_error_summary(self) -> Dict[str, Any]:
        """
        Get a summary of all tracked errors.

        Returns:
            Dictionary with error statistics
        """
        return {
            'total_errors': len(self.errors),
            'error_types': self._count_error_types(),
            'failed_urls': [error['url'] for error in self.errors if error['url']],
        }

    def _count_error_types(self) -> Dict[str, int]:
        """Count errors by type."""
        type_counts = {}
        for error in self.errors:
            error_type = error['type']
            type_counts[error_type] = type_counts.get(error_type, 0) + 1
        return type_counts


def initialize_logging(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    """
    Initialize the application logging system.

    Args:
        log_dir: Directory for log files
        level: Console logging level

    Returns:
        The configured application logger
    """
    walkthrough_logger = WalkthroughLogger(log_dir)
    logger = walkthrough_logger.setup_logger(level)
    walkthrough_logger.log_system_info()
    return logger
