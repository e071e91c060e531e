"""Pydantic models for pricing configuration files."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Version 1.0: Initial price list (rates, slides, transport zones)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RatesConfig(BaseModel):
    """Per-m2 rates in DT."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    facade: float = Field(default=450.0, ge=0, description="Rate T with a facade")
    bare: float = Field(default=360.0, ge=0, description="Rate T without a facade")
    finishing: float = Field(
        default=30.0, ge=0, description="Finishing cost per m2, never discounted"
    )


class SlidePricesConfig(BaseModel):
    """Unit price per drawer slide, by slide type."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    scala: float = Field(default=100.0, ge=0)
    metabox: float = Field(default=30.0, ge=0)


class TransportZoneConfig(BaseModel):
    """A delivery zone entry."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    code: str = Field(..., min_length=1, description="Zone identifier, e.g. 'tunis'")
    label: str | None = Field(default=None, description="Display label")
    fee: float = Field(..., ge=0, description="Flat transport fee in DT")

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        code = v.strip().lower()
        if not code:
            raise ValueError("Zone code must not be blank")
        return code


def _default_zones() -> list[TransportZoneConfig]:
    return [
        TransportZoneConfig(code="tunis", label="Transport Tunis", fee=127.5),
        TransportZoneConfig(code="capbon", label="Transport Capbon", fee=292.5),
        TransportZoneConfig(code="sousse", label="Transport Sousse", fee=420.0),
        TransportZoneConfig(code="djerba", label="Transport Djerba", fee=1005.0),
    ]


class PricingConfiguration(BaseModel):
    """Root model of a pricing configuration file.

    Every section is optional; omitted values fall back to the workshop's
    reference price list.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    version: str = Field(default="1.0", description="Schema version")
    rates: RatesConfig = Field(default_factory=RatesConfig)
    slides: SlidePricesConfig = Field(default_factory=SlidePricesConfig)
    chambranle_allowance: float = Field(
        default=0.1, ge=0, description="Extra material per dimension in meters"
    )
    tax_multiplier: float = Field(
        default=1.19, ge=1, description="VAT multiplier applied to the total"
    )
    transport_zones: list[TransportZoneConfig] = Field(
        default_factory=_default_zones, min_length=1
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version: {v}. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_zones(self) -> "PricingConfiguration":
        codes = [zone.code for zone in self.transport_zones]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ValueError(f"Duplicate transport zone codes: {', '.join(duplicates)}")
        return self
