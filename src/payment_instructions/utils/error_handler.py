"""Error recording and logging setup for payment instruction processing."""

import json
import logging
import sys
import traceback
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..models.core import StatusCode, TransactionResult, TransactionStatus


PACKAGE_LOGGER = 'payment_instructions'


class ErrorSeverity(Enum):
    """Error severity levels"""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(Enum):
    """Error categories for classification"""
    REQUEST = "request"
    PARSING = "parsing"
    VALIDATION = "validation"
    ACCOUNT = "account"
    FUNDS = "funds"
    SCHEDULING = "scheduling"
    CONFIGURATION = "configuration"
    FILE_ACCESS = "file_access"
    SYSTEM = "system"


STATUS_CATEGORIES = {
    StatusCode.MALFORMED_REQUEST: ErrorCategory.REQUEST,
    StatusCode.UNPARSEABLE_INSTRUCTION: ErrorCategory.PARSING,
    StatusCode.INVALID_AMOUNT: ErrorCategory.VALIDATION,
    StatusCode.UNSUPPORTED_CURRENCY: ErrorCategory.VALIDATION,
    StatusCode.CURRENCY_MISMATCH: ErrorCategory.VALIDATION,
    StatusCode.ACCOUNT_NOT_FOUND: ErrorCategory.ACCOUNT,
    StatusCode.SAME_ACCOUNT: ErrorCategory.ACCOUNT,
    StatusCode.INSUFFICIENT_FUNDS: ErrorCategory.FUNDS,
    StatusCode.PENDING: ErrorCategory.SCHEDULING,
}


@dataclass
class ErrorDetail:
    """Detailed error information"""
    timestamp: str
    severity: str
    category: str
    error_code: str
    message: str
    stack_trace: Optional[str] = None
    context: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)


class JSONFormatter(logging.Formatter):
    """One JSON object per log record"""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'error_code'):
            log_entry['error_code'] = record.error_code
        if hasattr(record, 'category'):
            log_entry['category'] = record.category
        if hasattr(record, 'context'):
            log_entry['context'] = record.context

        return json.dumps(log_entry, default=str)


class ErrorHandler:
    """Records failed outcomes and configures the package logger"""

    def __init__(self,
                 log_directory: Optional[str] = None,
                 enable_console: bool = True,
                 log_level: str = "INFO"):
        self.log_directory = Path(log_directory) if log_directory else None
        if self.log_directory is not None:
            self.log_directory.mkdir(parents=True, exist_ok=True)

        self.errors: List[ErrorDetail] = []
        self.warnings: List[ErrorDetail] = []

        self._setup_logging(enable_console, log_level)

    def _setup_logging(self, enable_console: bool, log_level: str):
        """Set up structured logging on the package logger"""
        level = getattr(logging, str(log_level).upper(), logging.INFO)

        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Clear existing handlers
        self.logger.handlers.clear()

        if self.log_directory is not None:
            log_file = self.log_directory / f"payments_{datetime.now().strftime('%Y%m%d')}.jsonl"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            self.logger.addHandler(file_handler)

            error_file = self.log_directory / f"errors_{datetime.now().strftime('%Y%m%d')}.jsonl"
            error_handler = logging.FileHandler(error_file, encoding='utf-8')
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(JSONFormatter())
            self.logger.addHandler(error_handler)

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(console_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def log_error(self,
                  message: str,
                  error_code: str,
                  category: ErrorCategory = ErrorCategory.SYSTEM,
                  exception: Optional[Exception] = None,
                  context: Optional[Dict[str, Any]] = None) -> ErrorDetail:
        """Log an error with detailed information"""
        stack_trace = None
        if exception:
            stack_trace = ''.join(traceback.format_exception(
                type(exception), exception, exception.__traceback__
            ))

        error_detail = ErrorDetail(
            timestamp=datetime.now().isoformat(),
            severity=ErrorSeverity.ERROR.value,
            category=category.value,
            error_code=error_code,
            message=message,
            stack_trace=stack_trace,
            context=context or {}
        )
        self.errors.append(error_detail)

        self.logger.error(
            message,
            extra={
                'error_code': error_code,
                'category': category.value,
                'context': context or {}
            }
        )
        return error_detail

    def log_warning(self,
                    message: str,
                    error_code: str,
                    category: ErrorCategory = ErrorCategory.SYSTEM,
                    context: Optional[Dict[str, Any]] = None) -> ErrorDetail:
        """Log a warning with detailed information"""
        warning_detail = ErrorDetail(
            timestamp=datetime.now().isoformat(),
            severity=ErrorSeverity.WARNING.value,
            category=category.value,
            error_code=error_code,
            message=message,
            context=context or {}
        )
        self.warnings.append(warning_detail)

        self.logger.warning(
            message,
            extra={
                'error_code': error_code,
                'category': category.value,
                'context': context or {}
            }
        )
        return warning_detail

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log informational message"""
        self.logger.info(message, extra={'context': context or {}})


    def record_result(self, result: TransactionResult) -> Optional[ErrorDetail]:
        """Record a processed result.

        Failed results become warnings, pending results are logged at info
        level, successful results are not recorded.
        """
        context = {
            'instruction': result.instruction.to_dict(),
            'accounts': [view.id for view in result.accounts],
        }

        if result.status is TransactionStatus.FAILED:
            category = STATUS_CATEGORIES.get(result.status_code, ErrorCategory.SYSTEM)
            return self.log_warning(
                result.status_reason,
                result.status_code.value,
                category,
                context=context
            )

        if result.status is TransactionStatus.PENDING:
            self.log_info(result.status_reason, context=context)

        return None

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors and warnings"""
        errors_by_category: Dict[str, int] = {}
        warnings_by_code: Dict[str, int] = {}

        for error in self.errors:
            errors_by_category[error.category] = errors_by_category.get(error.category, 0) + 1

        for warning in self.warnings:
            warnings_by_code[warning.error_code] = warnings_by_code.get(warning.error_code, 0) + 1

        return {
            'total_errors': len(self.errors),
            'total_warnings': len(self.warnings),
            'errors_by_category': errors_by_category,
            'warnings_by_code': warnings_by_code,
        }

    def generate_error_report(self, output_file: Optional[str] = None) -> str:
        """Write summary plus every recorded error and warning as JSON"""
        if output_file is None:
            base = self.log_directory or Path('.')
            output_file = str(base / f"error_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json")

        report = {
            'report_timestamp': datetime.now().isoformat(),
            'summary': self.get_error_summary(),
            'all_errors': [error.to_dict() for error in self.errors],
            'all_warnings': [warning.to_dict() for warning in self.warnings]
        }

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, default=str)

        self.log_info(f"Error report generated: {output_file}")
        return output_file

