"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dressing.domain import PriceBreakdown, ValidationError


class FormStatus(str, Enum):
    """State of the calculator form after the last recomputation.

    - INCOMPLETE: A required field is still empty, nothing to show
    - INVALID: A field holds a rejected value
    - CALCULATED: A price is available
    """

    INCOMPLETE = "incomplete"
    INVALID = "invalid"
    CALCULATED = "calculated"


@dataclass
class QuoteResult:
    """Output DTO of a quote computation.

    Attributes:
        breakdown: Price breakdown, or None when input was rejected.
        errors: Validation errors, empty when the quote succeeded.
    """

    breakdown: PriceBreakdown | None = None
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if a price was computed."""
        return len(self.errors) == 0 and self.breakdown is not None


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable view of the form published after every change.

    Attributes:
        status: Overall form state.
        breakdown: Current price breakdown when status is CALCULATED.
        error: The first rejected field when status is INVALID.
        missing: EMPTY_FIELD errors for the required fields still empty
            when status is INCOMPLETE. These are not shown as field errors.
    """

    status: FormStatus = FormStatus.INCOMPLETE
    breakdown: PriceBreakdown | None = None
    error: ValidationError | None = None
    missing: tuple[ValidationError, ...] = ()

    @property
    def is_calculated(self) -> bool:
        return self.status is FormStatus.CALCULATED
