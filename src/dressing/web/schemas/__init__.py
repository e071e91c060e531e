"""Pydantic schemas for the REST API."""

from dressing.web.schemas.requests import QuoteRequest
from dressing.web.schemas.responses import (
    BreakdownSchema,
    FieldErrorSchema,
    QuoteResponse,
    RatesSchema,
    TransportZoneSchema,
)

__all__ = [
    "BreakdownSchema",
    "FieldErrorSchema",
    "QuoteRequest",
    "QuoteResponse",
    "RatesSchema",
    "TransportZoneSchema",
]
