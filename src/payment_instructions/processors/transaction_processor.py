"""Validation and execution of parsed instructions against accounts.

Checks run in a fixed order and the first failing check decides the
outcome:

1. unparseable instruction
2. invalid amount
3. unsupported currency
4. account not found
5. same account
6. currency mismatch
7. future execution date (pending, nothing is moved)
8. insufficient funds
9. execution

Only step 9 touches account balances, and it does so in place on the
Account objects passed in by the caller.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from ..messages import reason_for
from ..models.core import (
    SUPPORTED_CURRENCIES,
    Account,
    AccountView,
    ParsedInstruction,
    ProcessorConfig,
    StatusCode,
    TransactionResult,
    TransactionStatus,
)
from ..parsers.instruction_parser import InstructionParser
from ..utils.clock import Clock, make_clock


logger = logging.getLogger(__name__)


def find_account(accounts: Sequence[Account], account_id: Optional[str]) -> Optional[Account]:
    """First account whose id matches exactly"""
    for account in accounts:
        if account.id == account_id:
            return account
    return None


def referenced_accounts(accounts: Sequence[Account], debit_account_id: Optional[str],
                        credit_account_id: Optional[str]) -> List[Account]:
    """Accounts matching either id, in the order they were supplied"""
    return [
        account for account in accounts
        if account.id == debit_account_id or account.id == credit_account_id
    ]


class TransactionProcessor:
    """Applies parsed instructions to a caller-supplied list of accounts"""

    def __init__(self,
                 config: Optional[ProcessorConfig] = None,
                 parser: Optional[InstructionParser] = None,
                 clock: Optional[Clock] = None):
        self.config = config or ProcessorConfig()
        self.parser = parser or InstructionParser()
        self.clock = clock or make_clock(self.config.timezone)

    def process(self, accounts: Sequence[Account], instruction_text: str,
                today: Optional[date] = None) -> TransactionResult:
        """Parse instruction_text and apply it to accounts"""
        return self.apply(accounts, self.parser.parse(instruction_text), today)

    def apply(self, accounts: Sequence[Account], instruction: ParsedInstruction,
              today: Optional[date] = None) -> TransactionResult:
        """Run the ordered checks for instruction and execute it if all pass.

        Args:
            accounts: Accounts for this call; balances of the debit and credit
                      accounts are updated in place on success
            instruction: Parsed instruction to apply
            today: Reference date for the future-dating check, defaults to the
                   configured clock

        Returns:
            TransactionResult describing the single outcome
        """
        if instruction.is_unparseable:
            logger.warning("Unparseable instruction")
            return self._result(instruction, StatusCode.UNPARSEABLE_INSTRUCTION, [])

        debit_id = instruction.debit_account_id
        credit_id = instruction.credit_account_id
        involved = referenced_accounts(accounts, debit_id, credit_id)

        amount = instruction.amount
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            logger.warning(f"Invalid amount: {amount!r}")
            return self._result(instruction, StatusCode.INVALID_AMOUNT, self._snapshot(involved))

        if instruction.currency not in SUPPORTED_CURRENCIES:
            logger.warning(f"Unsupported currency: {instruction.currency!r}")
            return self._result(instruction, StatusCode.UNSUPPORTED_CURRENCY, self._snapshot(involved))

        debit_account = find_account(accounts, debit_id)
        credit_account = find_account(accounts, credit_id)
        if debit_account is None or credit_account is None:
            logger.warning(f"Account not found: debit={debit_id} credit={credit_id}")
            return self._result(instruction, StatusCode.ACCOUNT_NOT_FOUND, self._snapshot(involved))

        if debit_id == credit_id:
            logger.warning(f"Same debit and credit account: {debit_id}")
            return self._result(instruction, StatusCode.SAME_ACCOUNT, [AccountView.snapshot(debit_account)])

        debit_currency = debit_account.currency.upper()
        credit_currency = credit_account.currency.upper()
        if debit_currency != instruction.currency or credit_currency != instruction.currency:
            logger.warning(
                f"Currency mismatch: debit={debit_currency} credit={credit_currency} "
                f"instruction={instruction.currency}"
            )
            return self._result(instruction, StatusCode.CURRENCY_MISMATCH, self._snapshot(involved))

        if today is None:
            today = self.clock()
        if instruction.execute_by is not None and instruction.execute_by > today:
            logger.info(f"Transaction scheduled for {instruction.execute_by.isoformat()}")
            return self._result(instruction, StatusCode.PENDING, self._snapshot(involved))

        if debit_account.balance < amount:
            logger.warning(
                f"Insufficient funds: account={debit_id} balance={debit_account.balance} amount={amount}"
            )
            return self._result(instruction, StatusCode.INSUFFICIENT_FUNDS, self._snapshot(involved))

        debit_before = debit_account.balance
        credit_before = credit_account.balance
        debit_account.balance -= amount
        credit_account.balance += amount

        views = []
        for account in involved:
            if account is debit_account:
                views.append(AccountView.snapshot(account, debit_before))
            elif account is credit_account:
                views.append(AccountView.snapshot(account, credit_before))
            else:
                views.append(AccountView.snapshot(account))

        logger.info(
            f"Transaction executed: {amount} {instruction.currency} "
            f"from {debit_id} to {credit_id}"
        )
        return self._result(instruction, StatusCode.SUCCESS, views)

    def _snapshot(self, accounts: Sequence[Account]) -> List[AccountView]:
        return [AccountView.snapshot(account) for account in accounts]

    def _result(self, instruction: ParsedInstruction, code: StatusCode,
                views: List[AccountView]) -> TransactionResult:
        if code is StatusCode.SUCCESS:
            status = TransactionStatus.SUCCESSFUL
        elif code is StatusCode.PENDING:
            status = TransactionStatus.PENDING
        else:
            status = TransactionStatus.FAILED
        return TransactionResult(
            instruction=instruction,
            status=status,
            status_code=code,
            status_reason=reason_for(code),
            accounts=views,
        )


def process_transaction(accounts: Sequence[Account], instruction_text: str,
                        today: Optional[date] = None) -> TransactionResult:
    """Parse and apply one instruction with the default UTC clock"""
    return TransactionProcessor().process(accounts, instruction_text, today)
