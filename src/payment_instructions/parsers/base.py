"""Abstract base class for instruction template matchers."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.core import InstructionType, ParsedInstruction
from .scanner import (
    locate_keyword,
    parse_account_id,
    parse_amount,
    parse_currency_code,
    parse_execute_by_date,
    skip_spaces,
)


logger = logging.getLogger(__name__)


class TemplateMatcher(ABC):
    """Matches one fixed sentence template against instruction text.

    A template is an ordered sequence of seven keywords:
    lead, boundary, 'account', 'for', counterpart, counterpart boundary,
    'account'. Amount and currency sit between the lead keyword and the
    boundary keyword. Each keyword is searched for starting at the offset of
    the one before it.
    """

    instruction_type: InstructionType
    keywords: Tuple[str, ...] = ()

    def match(self, text: str) -> Optional[ParsedInstruction]:
        """Match the template, returning None unless every field extracts"""
        offsets = self._locate_keywords(text)
        if offsets is None:
            return None

        lead_offset, boundary_offset = offsets[0], offsets[1]
        first_account_offset, second_account_offset = offsets[2], offsets[6]

        amount_and_currency = self._extract_amount_and_currency(
            text, lead_offset + len(self.keywords[0]), boundary_offset
        )
        if amount_and_currency is None:
            return None
        amount, currency = amount_and_currency

        first_account = parse_account_id(text, first_account_offset)
        if first_account is None:
            logger.debug(f"{self.get_name()}: no account id after offset {first_account_offset}")
            return None

        second_account = parse_account_id(text, second_account_offset)
        if second_account is None:
            logger.debug(f"{self.get_name()}: no account id after offset {second_account_offset}")
            return None

        debit_account, credit_account = self.assign_accounts(first_account, second_account)

        return ParsedInstruction(
            type=self.instruction_type,
            amount=amount,
            currency=currency,
            debit_account_id=debit_account,
            credit_account_id=credit_account,
            execute_by=parse_execute_by_date(text),
        )

    @abstractmethod
    def assign_accounts(self, first_account: str, second_account: str) -> Tuple[str, str]:
        """Map the two account ids in text order to (debit, credit)"""
        pass

    def get_name(self) -> str:
        return f"{self.instruction_type.value.lower()}-led"

    def _locate_keywords(self, text: str) -> Optional[List[int]]:
        offsets = []
        cursor = 0
        for keyword in self.keywords:
            index = locate_keyword(text, keyword, cursor)
            if index < 0:
                logger.debug(f"{self.get_name()}: keyword '{keyword}' not found after offset {cursor}")
                return None
            offsets.append(index)
            cursor = index
        return offsets

    def _extract_amount_and_currency(self, text: str, start: int,
                                     boundary: int) -> Optional[Tuple[int, str]]:
        """Read '<amount> <currency>' from the span [start, boundary)"""
        amount_start = skip_spaces(text, start, boundary)

        amount_end = amount_start
        while amount_end < boundary and text[amount_end] != ' ':
            amount_end += 1

        if amount_end <= amount_start or amount_end >= boundary:
            logger.debug(f"{self.get_name()}: no amount token before offset {boundary}")
            return None

        amount = parse_amount(text, amount_start, amount_end)
        if amount is None:
            logger.debug(f"{self.get_name()}: invalid amount '{text[amount_start:amount_end]}'")
            return None

        currency_start = skip_spaces(text, amount_end, boundary)
        currency = parse_currency_code(text, currency_start, boundary)
        if currency is None:
            logger.debug(f"{self.get_name()}: unsupported currency '{text[currency_start:boundary].strip()}'")
            return None

        return amount, currency
