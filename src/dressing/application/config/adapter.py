"""Conversion of pricing configuration into domain objects."""

from __future__ import annotations

from pathlib import Path

from dressing.application.config.loader import ConfigError, load_config
from dressing.application.config.schema import PricingConfiguration
from dressing.domain import PricingTable, SlideType, TransportZone


def config_to_pricing_table(config: PricingConfiguration) -> PricingTable:
    """Build the engine's lookup table from a validated configuration.

    Raises:
        ConfigError: With error_type "domain" if the values pass the schema
            but break a pricing table invariant.
    """
    try:
        return PricingTable(
            facade_rate=config.rates.facade,
            bare_rate=config.rates.bare,
            slide_prices={
                SlideType.SCALA: config.slides.scala,
                SlideType.METABOX: config.slides.metabox,
            },
            finishing_rate=config.rates.finishing,
            chambranle_allowance=config.chambranle_allowance,
            tax_multiplier=config.tax_multiplier,
            transport_zones=tuple(
                TransportZone(
                    code=zone.code,
                    label=zone.label or f"Transport {zone.code.capitalize()}",
                    fee=zone.fee,
                )
                for zone in config.transport_zones
            ),
        )
    except ValueError as e:
        raise ConfigError(message=str(e), error_type="domain") from e


def load_pricing_table(path: Path | None = None) -> PricingTable:
    """Load a pricing table from a file, or return the default table.

    Raises:
        ConfigError: If the file cannot be loaded or validated.
    """
    if path is None:
        return PricingTable.default()
    try:
        return config_to_pricing_table(load_config(path))
    except ConfigError as e:
        e.path = e.path or path
        raise
