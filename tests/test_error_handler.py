"""Tests for error recording and logging setup."""

import json
import os
import shutil
import tempfile
import unittest

from payment_instructions.models.core import Account, StatusCode
from payment_instructions.processors.transaction_processor import TransactionProcessor
from payment_instructions.utils.error_handler import ErrorCategory, ErrorHandler


class TestErrorHandler(unittest.TestCase):
    """Test cases for ErrorHandler"""

    def setUp(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp()
        self.processor = TransactionProcessor()

    def tearDown(self):
        """Clean up test fixtures"""
        import logging
        package_logger = logging.getLogger('payment_instructions')
        for log_handler in package_logger.handlers:
            log_handler.close()
        package_logger.handlers.clear()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _accounts(self):
        return [Account("A1", 100, "GBP"), Account("B1", 0, "GBP")]

    def test_records_failed_result_as_warning(self):
        handler = ErrorHandler(enable_console=False)
        result = self.processor.process(
            self._accounts(), "DEBIT 500 GBP FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
        )

        detail = handler.record_result(result)

        self.assertIsNotNone(detail)
        self.assertEqual(detail.error_code, StatusCode.INSUFFICIENT_FUNDS.value)
        self.assertEqual(detail.category, ErrorCategory.FUNDS.value)
        self.assertEqual(detail.context['accounts'], ['A1', 'B1'])
        self.assertEqual(len(handler.warnings), 1)

    def test_successful_and_pending_not_recorded(self):
        handler = ErrorHandler(enable_console=False)
        executed = self.processor.process(
            self._accounts(), "DEBIT 50 GBP FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
        )
        scheduled = self.processor.process(
            self._accounts(), "DEBIT 50 GBP FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON 2099-12-31"
        )

        self.assertEqual(scheduled.status_code, StatusCode.PENDING)
        self.assertIsNone(handler.record_result(executed))
        self.assertIsNone(handler.record_result(scheduled))
        self.assertEqual(handler.warnings, [])

    def test_json_log_files(self):
        handler = ErrorHandler(log_directory=self.temp_dir, enable_console=False)
        handler.log_error("boom", "REQUEST_FILE_ERROR", ErrorCategory.FILE_ACCESS, context={'path': 'x.json'})
        for log_handler in handler.logger.handlers:
            log_handler.flush()

        log_files = sorted(os.listdir(self.temp_dir))
        self.assertEqual(len(log_files), 2)

        error_file = [name for name in log_files if name.startswith('errors_')][0]
        with open(os.path.join(self.temp_dir, error_file), encoding='utf-8') as f:
            entry = json.loads(f.readline())

        self.assertEqual(entry['message'], 'boom')
        self.assertEqual(entry['error_code'], 'REQUEST_FILE_ERROR')
        self.assertEqual(entry['category'], 'file_access')
        self.assertEqual(entry['context'], {'path': 'x.json'})

    def test_summary_and_report(self):
        handler = ErrorHandler(log_directory=self.temp_dir, enable_console=False)
        handler.log_warning("Insufficient funds", "AC01", ErrorCategory.FUNDS)
        handler.log_warning("Insufficient funds", "AC01", ErrorCategory.FUNDS)
        handler.log_error("bad config", "CONFIG_TEMPLATE_ERROR", ErrorCategory.CONFIGURATION)

        summary = handler.get_error_summary()
        self.assertEqual(summary['total_errors'], 1)
        self.assertEqual(summary['total_warnings'], 2)
        self.assertEqual(summary['warnings_by_code'], {'AC01': 2})
        self.assertEqual(summary['errors_by_category'], {'configuration': 1})

        report_path = handler.generate_error_report(os.path.join(self.temp_dir, 'report.json'))
        with open(report_path, encoding='utf-8') as f:
            report = json.load(f)
        self.assertEqual(len(report['all_warnings']), 2)


if __name__ == '__main__':
    unittest.main()
