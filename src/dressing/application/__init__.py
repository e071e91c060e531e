"""Application layer - use cases and orchestration."""

from .commands import CalculateQuoteCommand
from .dtos import FormSnapshot, FormStatus, QuoteResult
from .form import FormController
from .messages import describe

__all__ = [
    "CalculateQuoteCommand",
    "FormController",
    "FormSnapshot",
    "FormStatus",
    "QuoteResult",
    "describe",
]
