"""Payment instruction parsing and execution"""

__version__ = "0.1.0"

from .models.core import (
    Account,
    AccountView,
    InstructionType,
    ParsedInstruction,
    StatusCode,
    TransactionResult,
    TransactionStatus,
)
from .parsers.instruction_parser import parse_instruction
from .processors.transaction_processor import process_transaction
from .processors.payment_service import process_payment_request

__all__ = [
    '__version__',
    'Account',
    'AccountView',
    'InstructionType',
    'ParsedInstruction',
    'StatusCode',
    'TransactionResult',
    'TransactionStatus',
    'parse_instruction',
    'process_transaction',
    'process_payment_request',
]
