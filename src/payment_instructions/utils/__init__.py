"""Utility functions and helpers"""

from .validation import RequestValidator
from .config_manager import ConfigManager
from .error_handler import ErrorHandler, ErrorCategory, ErrorSeverity, ErrorDetail
from .clock import make_clock, today_in, validate_timezone

__all__ = [
    'RequestValidator',
    'ConfigManager',
    'ErrorHandler',
    'ErrorCategory',
    'ErrorSeverity',
    'ErrorDetail',
    'make_clock',
    'today_in',
    'validate_timezone',
]
