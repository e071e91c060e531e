"""Application commands (use cases) for dressing quotes."""

from __future__ import annotations

import logging

from dressing.domain import (
    AmountOverflowError,
    CalculationInput,
    PriceCalculator,
    ValidationError,
)

from .dtos import QuoteResult

logger = logging.getLogger(__name__)


class CalculateQuoteCommand:
    """Validate a typed calculation input and price it."""

    def __init__(self, calculator: PriceCalculator | None = None) -> None:
        self.calculator = calculator or PriceCalculator()

    def execute(self, calculation: CalculationInput) -> QuoteResult:
        """Execute the quote computation.

        Args:
            calculation: Parsed form values.

        Returns:
            QuoteResult with the breakdown, or with the validation errors
            when the input breaks an invariant. No partial price is ever
            returned: values too large to price are reported as an
            INVALID_NUMBER error on the field that caused the overflow.
        """
        errors = calculation.validate()
        if errors:
            logger.debug(f"Quote rejected: {[(e.kind.value, e.field) for e in errors]}")
            return QuoteResult(errors=errors)

        try:
            breakdown = self.calculator.compute_breakdown(calculation)
        except AmountOverflowError as e:
            logger.debug(f"Quote rejected: {e}")
            value = getattr(calculation, e.field, None)
            return QuoteResult(errors=[ValidationError.invalid_number(e.field, value)])

        return QuoteResult(breakdown=breakdown)
