"""Domain layer - pricing rules and value objects."""

from .pricing import PriceCalculator
from .value_objects import (
    DEFAULT_TRANSPORT_ZONES,
    AmountOverflowError,
    CalculationInput,
    PriceBreakdown,
    PricingTable,
    SlideType,
    TransportZone,
    UnknownZoneError,
    ValidationError,
    ValidationErrorKind,
)

__all__ = [
    "DEFAULT_TRANSPORT_ZONES",
    "AmountOverflowError",
    "CalculationInput",
    "PriceBreakdown",
    "PriceCalculator",
    "PricingTable",
    "SlideType",
    "TransportZone",
    "UnknownZoneError",
    "ValidationError",
    "ValidationErrorKind",
]
