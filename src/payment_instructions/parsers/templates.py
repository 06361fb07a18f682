"""The two supported instruction templates."""

from typing import Tuple

from ..models.core import InstructionType
from .base import TemplateMatcher


class DebitTemplateMatcher(TemplateMatcher):
    """DEBIT <amount> <currency> FROM ACCOUNT <source> FOR CREDIT TO ACCOUNT <destination> [ON <date>]"""

    instruction_type = InstructionType.DEBIT
    keywords = ('debit', 'from', 'account', 'for', 'credit', 'to', 'account')

    def assign_accounts(self, first_account: str, second_account: str) -> Tuple[str, str]:
        return first_account, second_account


class CreditTemplateMatcher(TemplateMatcher):
    """CREDIT <amount> <currency> TO ACCOUNT <destination> FOR DEBIT FROM ACCOUNT <source> [ON <date>]"""

    instruction_type = InstructionType.CREDIT
    keywords = ('credit', 'to', 'account', 'for', 'debit', 'from', 'account')

    def assign_accounts(self, first_account: str, second_account: str) -> Tuple[str, str]:
        return second_account, first_account
