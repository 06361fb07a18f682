"""Core data models for payment instruction processing."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Dict, Any, Optional


SUPPORTED_CURRENCIES = ('NGN', 'USD', 'GBP', 'GHS')


class InstructionType(Enum):
    """Which sentence template produced an instruction"""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(Enum):
    """Terminal outcome of a processed instruction"""
    FAILED = "failed"
    PENDING = "pending"
    SUCCESSFUL = "successful"


class StatusCode(Enum):
    """Stable machine codes, one per outcome kind"""
    SUCCESS = "AP00"
    PENDING = "AP01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_AMOUNT = "AM01"
    MALFORMED_REQUEST = "SY01"
    UNPARSEABLE_INSTRUCTION = "SY03"


@dataclass
class Account:
    """Caller-supplied account.

    Attributes:
        id: Opaque account identifier, unique within one request
        balance: Balance in the smallest currency unit
        currency: Currency code as supplied (any case)
    """
    id: str
    balance: int
    currency: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Account':
        return cls(id=data['id'], balance=data['balance'], currency=data['currency'])

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'balance': self.balance, 'currency': self.currency}


@dataclass(frozen=True)
class ParsedInstruction:
    """Structured form of an instruction string.

    Either every structural field (type, amount, currency and both account
    ids) is set, or the instruction is unparseable and all of them are None.
    debit_account_id is always the source of funds and credit_account_id the
    destination, whichever template matched.
    """
    type: Optional[InstructionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account_id: Optional[str] = None
    credit_account_id: Optional[str] = None
    execute_by: Optional[date] = None

    @classmethod
    def unparseable(cls) -> 'ParsedInstruction':
        return cls()

    @property
    def is_unparseable(self) -> bool:
        return (
            self.type is None
            and self.amount is None
            and self.currency is None
            and self.debit_account_id is None
            and self.credit_account_id is None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'type': self.type.value if self.type else None,
            'amount': self.amount,
            'currency': self.currency,
            'debit_account': self.debit_account_id,
            'credit_account': self.credit_account_id,
            'execute_by': self.execute_by.isoformat() if self.execute_by else None,
        }


@dataclass(frozen=True)
class AccountView:
    """Snapshot of one referenced account in a result"""
    id: str
    currency: str
    balance: int
    balance_before: int

    @classmethod
    def snapshot(cls, account: Account, balance_before: Optional[int] = None) -> 'AccountView':
        return cls(
            id=account.id,
            currency=account.currency.upper(),
            balance=account.balance,
            balance_before=account.balance if balance_before is None else balance_before,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'balance': self.balance,
            'balance_before': self.balance_before,
            'currency': self.currency,
        }


@dataclass
class TransactionResult:
    """Outcome of processing one instruction against a set of accounts"""
    instruction: ParsedInstruction
    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    accounts: List[AccountView] = field(default_factory=list)

    @property
    def successful(self) -> bool:
        return self.status is TransactionStatus.SUCCESSFUL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the response body shape"""
        body = self.instruction.to_dict()
        body.update({
            'status': self.status.value,
            'status_reason': self.status_reason,
            'status_code': self.status_code.value,
            'accounts': [view.to_dict() for view in self.accounts],
        })
        return body


@dataclass
class ProcessorConfig:
    """Configuration for processing and serving behavior"""
    timezone: str = "UTC"
    log_directory: Optional[str] = None
    log_level: str = "INFO"
    enable_console_logging: bool = True
    api_host: str = "127.0.0.1"
    api_port: int = 8000
