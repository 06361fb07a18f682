"""Instruction validation, execution and request handling"""

from .transaction_processor import (
    TransactionProcessor,
    find_account,
    process_transaction,
    referenced_accounts,
)
from .payment_service import PaymentService, malformed_request_result, process_payment_request

__all__ = [
    'TransactionProcessor',
    'find_account',
    'process_transaction',
    'referenced_accounts',
    'PaymentService',
    'malformed_request_result',
    'process_payment_request',
]
