"""Logging utilities for the roster manager."""

import logging
import os

DEFAULT_LOG_FILE = "/tmp/rostermanager_debug.log"

# Global state
_console_logging_enabled = None
_file_logger = None


def _is_tui_running() -> bool:
    """Detect if we're running in TUI mode vs CLI mode"""
    if _console_logging_enabled is not None:
        return not _console_logging_enabled

    # Default to console output unless explicitly disabled
    return False


def set_console_logging(enabled: bool):
    """Explicitly enable/disable console logging"""
    global _console_logging_enabled
    _console_logging_enabled = enabled


def get_log_file() -> str:
    """Path of the debug log, overridable through ROSTERMANAGER_LOG_FILE"""
    return os.environ.get("ROSTERMANAGER_LOG_FILE", DEFAULT_LOG_FILE)


def log(message: str):
    """
    Smart logging that adapts to context:
    - Always logs to file for debugging
    - Also logs to console for CLI operations (demo driver, timings)
    - Skips console output while the roster TUI owns the terminal
    """
    global _file_logger

    # Initialize file logger once
    if _file_logger is None:
        _file_logger = logging.getLogger("rostermanager_file")
        _file_logger.setLevel(logging.DEBUG)
        file_handler = logging.FileHandler(get_log_file())
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        _file_logger.addHandler(file_handler)
        _file_logger.propagate = False

    # Always log to file
    _file_logger.info(message)

    # Also log to console if appropriate
    if not _is_tui_running():
        print(message)
