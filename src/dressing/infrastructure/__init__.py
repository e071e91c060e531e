"""Infrastructure layer - output formatters."""

from .formatters import JsonExporter, QuoteFormatter, RatesFormatter, ZoneListFormatter

__all__ = [
    "JsonExporter",
    "QuoteFormatter",
    "RatesFormatter",
    "ZoneListFormatter",
]
