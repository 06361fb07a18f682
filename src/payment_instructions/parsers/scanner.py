"""Offset-based keyword scanner and field extractors for instruction text.

Every function here works on plain string offsets into the original text.
Case folding is ASCII-only so offsets found in the folded text index the
same characters in the original.
"""

import calendar
import string
from datetime import date
from typing import Optional

from ..models.core import SUPPORTED_CURRENCIES


ACCOUNT_KEYWORD = 'account'
DATE_KEYWORD = 'on'
ACCOUNT_ID_DELIMITERS = (' for ', ' on ')
DATE_LENGTH = 10  # YYYY-MM-DD

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only, keeping string length unchanged"""
    return text.translate(_ASCII_LOWER)


def locate_keyword(text: str, keyword: str, start: int = 0) -> int:
    """Find keyword at or after start, ignoring case.

    Returns:
        Offset of the first match, or -1 if not found
    """
    return fold_case(text).find(fold_case(keyword), max(start, 0))


def locate_standalone_keyword(text: str, keyword: str, start: int = 0) -> int:
    """Like locate_keyword, but the match must be bounded by whitespace or the string ends"""
    folded = fold_case(text)
    target = fold_case(keyword)
    index = folded.find(target, max(start, 0))
    while index >= 0:
        end = index + len(target)
        bounded_before = index == 0 or folded[index - 1].isspace()
        bounded_after = end >= len(folded) or folded[end].isspace()
        if bounded_before and bounded_after:
            return index
        index = folded.find(target, index + 1)
    return -1


def skip_spaces(text: str, position: int, limit: Optional[int] = None) -> int:
    """Advance position past literal spaces, stopping at limit"""
    if limit is None:
        limit = len(text)
    while position < limit and text[position] == ' ':
        position += 1
    return position


def slice_trimmed(text: str, start: int, end: int) -> str:
    """Return the trimmed text between two offsets, or '' for a bad range"""
    if start < 0 or end < 0 or start >= end:
        return ''
    return text[start:end].strip()


def parse_amount(text: str, start: int, end: int) -> Optional[int]:
    """Parse a strictly positive integer amount.

    Signs and decimal points are rejected outright rather than truncated.
    """
    amount_str = slice_trimmed(text, start, end)
    if not amount_str:
        return None

    if '-' in amount_str or '.' in amount_str:
        return None

    if not (amount_str.isascii() and amount_str.isdigit()):
        return None

    try:
        amount = int(amount_str, 10)
    except ValueError:
        # longer than the interpreter allows for int conversion
        return None
    if amount <= 0:
        return None

    return amount


def parse_currency_code(text: str, start: int, end: int) -> Optional[str]:
    """Parse a supported currency code, normalized to uppercase"""
    currency = slice_trimmed(text, start, end).upper()
    if currency in SUPPORTED_CURRENCIES:
        return currency
    return None


def parse_account_id(text: str, account_offset: int) -> Optional[str]:
    """Read the account id that follows the word 'account' at account_offset.

    The id runs up to the next ' for ' or ' on ' delimiter, or to the end of
    the text.
    """
    start = skip_spaces(text, account_offset + len(ACCOUNT_KEYWORD))
    if start >= len(text):
        return None

    folded = fold_case(text)
    end = len(text)
    for delimiter in ACCOUNT_ID_DELIMITERS:
        index = folded.find(delimiter, start)
        if 0 <= index < end:
            end = index

    return slice_trimmed(text, start, end) or None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def parse_execute_by_date(text: str) -> Optional[date]:
    """Parse the optional 'ON YYYY-MM-DD' execution date.

    Returns None when the keyword is missing or the date is not a real
    calendar date; a bad date never invalidates the instruction.
    """
    on_offset = locate_standalone_keyword(text, DATE_KEYWORD)
    if on_offset < 0:
        return None

    start = skip_spaces(text, on_offset + len(DATE_KEYWORD))
    if start >= len(text):
        return None

    date_str = slice_trimmed(text, start, start + DATE_LENGTH)
    if len(date_str) != DATE_LENGTH:
        return None

    if date_str.find('-') != 4 or date_str.rfind('-') != 7:
        return None

    parts = date_str.split('-')
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    year, month, day = (int(part, 10) for part in parts)
    if year < 1:
        return None
    if month < 1 or month > 12:
        return None
    if day < 1 or day > days_in_month(year, month):
        return None

    return date(year, month, day)
