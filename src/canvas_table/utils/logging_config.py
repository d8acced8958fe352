"""
Logging configuration for canvas tables.

This module provides the logging setup used by the library, including a custom
TRACE level for per-event diagnostics (hit-tests run on every pointer move).
It supports file and console output with different formats.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

TRACE_LEVEL = 5


class CanvasTableLogger:
    """
    Configures logging for canvas tables.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for pointer-rate diagnostics
    - Optional file output next to console output
    """

    TRACE_LEVEL = TRACE_LEVEL
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """Log a message with level TRACE."""
                if self.isEnabledFor(TRACE_LEVEL):
                    self._log(TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(
        debug_mode: Optional[bool] = None,
        log_dir: str = "logs",
        console_only: bool = True,
    ) -> Optional[str]:
        """
        Configure the logging system for the entire application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers. When None,
                the CANVAS_TABLE_DEBUG environment variable decides.
            log_dir: Directory to store log files
            console_only: If False, also write a timestamped log file

        Returns:
            Path to the created log file, or None when logging to console only
        """
        CanvasTableLogger._add_trace_method()

        if debug_mode is None:
            debug_mode = os.environ.get("CANVAS_TABLE_DEBUG", "").lower() in (
                "1", "true", "yes"
            )
        level = logging.DEBUG if debug_mode else logging.INFO

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if not console_only:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"canvas_table_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter('%(name)s - %(levelname)s: %(message)s')
        )
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A logger
        """
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """Convenience function that delegates to CanvasTableLogger.get_logger."""
    return CanvasTableLogger.get_logger(name, level)
