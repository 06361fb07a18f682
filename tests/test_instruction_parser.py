"""Tests for template matching and instruction parsing."""

import pytest
from datetime import date

from payment_instructions.models.core import InstructionType, ParsedInstruction
from payment_instructions.parsers import (
    CreditTemplateMatcher,
    DebitTemplateMatcher,
    InstructionParser,
    parse_instruction,
)


class TestDebitTemplate:
    """Test cases for DEBIT-led instructions"""

    def setup_method(self):
        """Set up test fixtures"""
        self.matcher = DebitTemplateMatcher()

    def test_basic_instruction(self):
        parsed = self.matcher.match("DEBIT 500 NGN FROM ACCOUNT A123 FOR CREDIT TO ACCOUNT B456")

        assert parsed == ParsedInstruction(
            type=InstructionType.DEBIT,
            amount=500,
            currency="NGN",
            debit_account_id="A123",
            credit_account_id="B456",
            execute_by=None,
        )

    def test_with_date(self):
        parsed = self.matcher.match(
            "DEBIT 500 NGN FROM ACCOUNT A123 FOR CREDIT TO ACCOUNT B456 ON 2025-03-01"
        )
        assert parsed.credit_account_id == "B456"
        assert parsed.execute_by == date(2025, 3, 1)

    def test_mixed_case_and_spacing(self):
        parsed = self.matcher.match("debit   75 usd from account acc-1 for Credit to Account acc-2")
        assert parsed.amount == 75
        assert parsed.currency == "USD"
        assert parsed.debit_account_id == "acc-1"
        assert parsed.credit_account_id == "acc-2"

    def test_credit_led_text_does_not_match(self):
        assert self.matcher.match("CREDIT 300 USD TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1") is None

    @pytest.mark.parametrize("text", [
        "DEBIT -50 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT 50.5 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT 0 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT 100 EUR FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT 100 FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1",
        "DEBIT 100 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT",
        "DEBIT 100 NGN FROM A1 FOR CREDIT TO B1",
    ])
    def test_field_failures_abort_match(self, text):
        assert self.matcher.match(text) is None


class TestCreditTemplate:
    """Test cases for CREDIT-led instructions"""

    def setup_method(self):
        """Set up test fixtures"""
        self.matcher = CreditTemplateMatcher()

    def test_accounts_map_to_source_and_destination(self):
        parsed = self.matcher.match("CREDIT 300 USD TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1")

        assert parsed.type is InstructionType.CREDIT
        assert parsed.amount == 300
        assert parsed.currency == "USD"
        assert parsed.debit_account_id == "A1"
        assert parsed.credit_account_id == "B1"
        assert parsed.execute_by is None

    def test_with_date(self):
        parsed = self.matcher.match("CREDIT 300 USD TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1 ON 2099-01-01")
        assert parsed.debit_account_id == "A1"
        assert parsed.execute_by == date(2099, 1, 1)


class TestInstructionParser:
    """Test cases for the template-selecting parser"""

    def test_debit_tried_first(self):
        parsed = parse_instruction("DEBIT 500 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1")
        assert parsed.type is InstructionType.DEBIT

    def test_falls_back_to_credit(self):
        parsed = parse_instruction("CREDIT 300 USD TO ACCOUNT B1 FOR DEBIT FROM ACCOUNT A1")
        assert parsed.type is InstructionType.CREDIT

    @pytest.mark.parametrize("text", [
        "please pay someone",
        "",
        "DEBIT 500 NGN",
        "CREDIT 500 NGN TO ACCOUNT B1",
        None,
        42,
    ])
    def test_unparseable(self, text):
        parsed = parse_instruction(text)

        assert parsed.is_unparseable
        assert parsed == ParsedInstruction.unparseable()
        assert parsed.to_dict() == {
            'type': None,
            'amount': None,
            'currency': None,
            'debit_account': None,
            'credit_account': None,
            'execute_by': None,
        }

    def test_invalid_date_is_absent_not_failure(self):
        parsed = parse_instruction("DEBIT 5 GBP FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON 2023-02-29")
        assert not parsed.is_unparseable
        assert parsed.execute_by is None

    def test_template_symmetry(self):
        debit_led = parse_instruction("DEBIT 250 GHS FROM ACCOUNT SRC FOR CREDIT TO ACCOUNT DST ON 2026-05-04")
        credit_led = parse_instruction("CREDIT 250 GHS TO ACCOUNT DST FOR DEBIT FROM ACCOUNT SRC ON 2026-05-04")

        assert debit_led.type is InstructionType.DEBIT
        assert credit_led.type is InstructionType.CREDIT
        for field_name in ('amount', 'currency', 'debit_account_id', 'credit_account_id', 'execute_by'):
            assert getattr(debit_led, field_name) == getattr(credit_led, field_name)

    def test_deterministic(self):
        text = "DEBIT 500 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON 2025-03-01"
        assert parse_instruction(text) == parse_instruction(text)

    def test_custom_matchers(self):
        parser = InstructionParser(matchers=[CreditTemplateMatcher()])
        assert parser.parse("DEBIT 500 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1").is_unparseable

    def test_to_dict(self):
        parsed = parse_instruction("DEBIT 500 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1 ON 2025-03-01")
        assert parsed.to_dict() == {
            'type': 'DEBIT',
            'amount': 500,
            'currency': 'NGN',
            'debit_account': 'A1',
            'credit_account': 'B1',
            'execute_by': '2025-03-01',
        }
