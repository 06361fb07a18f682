"""
HTTP application exposing payment instruction processing.

Every processed request answers 200 with the result body; the status and
status_code fields tell callers what happened.
"""

import logging
from typing import List, Optional, Union

from fastapi import FastAPI
from pydantic import BaseModel
from starlette.requests import Request

from .models.core import ProcessorConfig
from .processors.payment_service import PaymentService

logger = logging.getLogger(__name__)


class AccountViewOut(BaseModel):
    id: str
    balance: Union[int, float]
    balance_before: Union[int, float]
    currency: str


class TransactionResultOut(BaseModel):
    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: str
    status_reason: str
    status_code: str
    accounts: List[AccountViewOut] = []


def create_app(config: Optional[ProcessorConfig] = None) -> FastAPI:
    """
    Build the FastAPI app around a PaymentService.

    Outcomes go to the module loggers only. Logging handlers are left to
    whoever runs the app (see the serve command).
    """
    config = config or ProcessorConfig()
    service = PaymentService(config)

    app = FastAPI(title="Payment Instructions API", version="0.1.0")
    app.state.service = service

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
        )
        return await call_next(request)

    @app.get("/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    @app.post("/payment-instructions", response_model=TransactionResultOut)
    async def payment_instructions(request: Request):
        """
        Parse and apply one instruction against the accounts in the body.
        """
        try:
            payload = await request.json()
        except ValueError:
            logger.warning("Request body is not valid JSON")
            payload = None

        result = service.handle(payload)
        return result.to_dict()

    return app
