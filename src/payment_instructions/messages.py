"""Human-readable status reasons for each status code."""

from .models.core import StatusCode


STATUS_REASONS = {
    StatusCode.SUCCESS: 'Transaction executed successfully',
    StatusCode.PENDING: 'Transaction scheduled for future execution',
    StatusCode.CURRENCY_MISMATCH: 'Currency mismatch between accounts',
    StatusCode.UNSUPPORTED_CURRENCY: 'Unsupported currency. Only NGN, USD, GBP, and GHS are supported',
    StatusCode.INSUFFICIENT_FUNDS: 'Insufficient funds',
    StatusCode.SAME_ACCOUNT: 'Debit and credit accounts cannot be the same',
    StatusCode.ACCOUNT_NOT_FOUND: 'Account not found',
    StatusCode.INVALID_AMOUNT: 'Invalid amount. Amount must be a positive integer',
    StatusCode.MALFORMED_REQUEST: 'Malformed request',
    StatusCode.UNPARSEABLE_INSTRUCTION: 'Malformed instruction: unable to parse keywords',
}

INVALID_REQUEST_BODY = 'Invalid request: body must be an object'
INVALID_REQUEST_ACCOUNTS = 'Invalid request: accounts must be an array'
INVALID_REQUEST_INSTRUCTION = 'Invalid request: instruction must be a string'


def reason_for(code: StatusCode) -> str:
    return STATUS_REASONS[code]
