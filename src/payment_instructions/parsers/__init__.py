"""Instruction text parsers"""

from .base import TemplateMatcher
from .templates import DebitTemplateMatcher, CreditTemplateMatcher
from .instruction_parser import InstructionParser, parse_instruction

__all__ = [
    'TemplateMatcher',
    'DebitTemplateMatcher',
    'CreditTemplateMatcher',
    'InstructionParser',
    'parse_instruction',
]
