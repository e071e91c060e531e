"""Pricing configuration loading.

Public API:
    - PricingConfiguration: Root configuration model
    - RatesConfig, SlidePricesConfig, TransportZoneConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_pricing_table: Convert a configuration to a PricingTable
    - load_pricing_table: Load a file (or defaults) straight into a PricingTable
"""

from dressing.application.config.adapter import (
    config_to_pricing_table,
    load_pricing_table,
)
from dressing.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from dressing.application.config.schema import (
    SUPPORTED_VERSIONS,
    PricingConfiguration,
    RatesConfig,
    SlidePricesConfig,
    TransportZoneConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "PricingConfiguration",
    "RatesConfig",
    "SlidePricesConfig",
    "TransportZoneConfig",
    "config_to_pricing_table",
    "load_config",
    "load_config_from_dict",
    "load_pricing_table",
]
