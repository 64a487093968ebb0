"""
Logging System for Symbolic Calculus

This module provides a centralized logger with verbosity levels so rewrite
traces from the simplifier can be switched on without touching library code.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


LOGGER_NAME = 'symbolic_calculus'


class LogLevel(Enum):
    """Enumeration of logging levels for symbolic calculus"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and critical info
    MODERATE = 2    # Validation outcomes and fixpoint summaries
    DETAILED = 3    # Per-pass simplification progress
    VERBOSE = 4     # Every applied rewrite rule


class CalculusLogger:
    """
    Centralized logger for expression tree operations
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_calculus_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self.should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def rewrite(self, rule: str, before: str, after: str):
        """Trace one applied simplification rule"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"REWRITE [{rule}]: {before}  ->  {after}")


# Global logger instance
_global_logger: Optional[CalculusLogger] = None


def get_logger() -> CalculusLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculusLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculusLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CalculusLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculusLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)
