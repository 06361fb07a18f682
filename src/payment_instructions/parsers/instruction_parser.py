"""Instruction parser trying each supported template in turn."""

import logging
from typing import List, Optional

from ..models.core import ParsedInstruction
from .base import TemplateMatcher
from .templates import CreditTemplateMatcher, DebitTemplateMatcher


logger = logging.getLogger(__name__)


class InstructionParser:
    """Parses instruction text with the first template that fully matches.

    The DEBIT-led template is tried before the CREDIT-led one. If no
    template matches, the result is the unparseable instruction.
    """

    def __init__(self, matchers: Optional[List[TemplateMatcher]] = None):
        if matchers is None:
            matchers = [DebitTemplateMatcher(), CreditTemplateMatcher()]
        self.matchers = matchers

    def parse(self, text: str) -> ParsedInstruction:
        if not isinstance(text, str) or not text:
            return ParsedInstruction.unparseable()

        for matcher in self.matchers:
            parsed = matcher.match(text)
            if parsed is not None:
                logger.debug(f"Instruction matched {matcher.get_name()} template")
                return parsed

        logger.info(f"No template matched instruction: {text!r}")
        return ParsedInstruction.unparseable()


_default_parser = InstructionParser()


def parse_instruction(text: str) -> ParsedInstruction:
    """Parse instruction text with the default templates; never raises"""
    return _default_parser.parse(text)
