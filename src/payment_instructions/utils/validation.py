"""Shape validation for payment instruction requests."""

from typing import Any, Dict, List, Tuple

from ..messages import (
    INVALID_REQUEST_ACCOUNTS,
    INVALID_REQUEST_BODY,
    INVALID_REQUEST_INSTRUCTION,
)


class RequestValidator:
    """Validates the shape of a request before it reaches the processor.

    A well-formed request looks like:
        {
            "accounts": [{"id": "A1", "balance": 1000, "currency": "NGN"}, ...],
            "instruction": "DEBIT 500 NGN FROM ACCOUNT A1 FOR CREDIT TO ACCOUNT B1"
        }
    """

    def __init__(self):
        self.account_fields: Dict[str, Tuple[type, ...]] = {
            'id': (str,),
            'balance': (int, float),
            'currency': (str,),
        }

    def validate(self, payload: Any) -> List[str]:
        """Validate a request payload and return list of errors"""
        if not isinstance(payload, dict):
            return [INVALID_REQUEST_BODY]

        errors = []

        accounts = payload.get('accounts')
        if not isinstance(accounts, list):
            errors.append(INVALID_REQUEST_ACCOUNTS)
        else:
            for index, account in enumerate(accounts):
                errors.extend(self.validate_account(account, index))

        if not isinstance(payload.get('instruction'), str):
            errors.append(INVALID_REQUEST_INSTRUCTION)

        return errors

    def validate_account(self, account: Any, index: int) -> List[str]:
        """Validate one entry of the accounts array"""
        if not isinstance(account, dict):
            return [f"accounts[{index}] must be an object"]

        errors = []
        for field_name, expected_types in self.account_fields.items():
            if field_name not in account:
                errors.append(f"accounts[{index}].{field_name} is required")
                continue

            value = account[field_name]
            # bool is an int subclass but never a valid balance
            if isinstance(value, bool) or not isinstance(value, expected_types):
                type_name = 'number' if field_name == 'balance' else 'string'
                errors.append(f"accounts[{index}].{field_name} must be a {type_name}")

        return errors

    def is_valid(self, payload: Any) -> bool:
        return not self.validate(payload)
