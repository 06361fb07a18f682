"""Data models and structures"""

from .core import (
    SUPPORTED_CURRENCIES,
    Account,
    AccountView,
    InstructionType,
    ParsedInstruction,
    ProcessorConfig,
    StatusCode,
    TransactionResult,
    TransactionStatus,
)

__all__ = [
    'SUPPORTED_CURRENCIES',
    'Account',
    'AccountView',
    'InstructionType',
    'ParsedInstruction',
    'ProcessorConfig',
    'StatusCode',
    'TransactionResult',
    'TransactionStatus',
]
