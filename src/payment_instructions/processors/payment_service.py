"""Request-level entry point: shape check, then parse and apply."""

import logging
from datetime import date
from typing import Any, Optional

from ..messages import reason_for
from ..models.core import (
    Account,
    ParsedInstruction,
    ProcessorConfig,
    StatusCode,
    TransactionResult,
    TransactionStatus,
)
from ..utils.error_handler import ErrorHandler
from ..utils.validation import RequestValidator
from .transaction_processor import TransactionProcessor


logger = logging.getLogger(__name__)


class PaymentService:
    """Handles one payment instruction request at a time.

    Each request gets its own Account objects, built from the payload, so
    the caller's payload is never mutated.
    """

    def __init__(self,
                 config: Optional[ProcessorConfig] = None,
                 processor: Optional[TransactionProcessor] = None,
                 validator: Optional[RequestValidator] = None,
                 error_handler: Optional[ErrorHandler] = None):
        self.config = config or ProcessorConfig()
        self.processor = processor or TransactionProcessor(self.config)
        self.validator = validator or RequestValidator()
        self.error_handler = error_handler

    def handle(self, payload: Any, today: Optional[date] = None) -> TransactionResult:
        """Process a raw request payload into a result"""
        errors = self.validator.validate(payload)
        if errors:
            logger.warning(f"Malformed request: {'; '.join(errors)}")
            result = malformed_request_result('; '.join(errors))
        else:
            accounts = [Account.from_dict(entry) for entry in payload['accounts']]
            instruction = payload['instruction']
            logger.info(f"Processing instruction: {instruction!r}")
            result = self.processor.process(accounts, instruction, today)

        if self.error_handler is not None:
            self.error_handler.record_result(result)

        return result


def malformed_request_result(detail: Optional[str] = None) -> TransactionResult:
    """Result for a request whose shape failed validation"""
    reason = reason_for(StatusCode.MALFORMED_REQUEST)
    if detail:
        reason = f"{reason}: {detail}"
    return TransactionResult(
        instruction=ParsedInstruction.unparseable(),
        status=TransactionStatus.FAILED,
        status_code=StatusCode.MALFORMED_REQUEST,
        status_reason=reason,
        accounts=[],
    )


def process_payment_request(payload: Any, config: Optional[ProcessorConfig] = None,
                            today: Optional[date] = None) -> TransactionResult:
    """Validate and process one request with a fresh service"""
    return PaymentService(config).handle(payload, today)
