"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class BreakdownSchema(BaseModel):
    """Price breakdown in DT."""

    area: float = Field(..., description="Priced surface in m2")
    base_material_cost: float = Field(..., description="area x T")
    slides_cost: float = Field(..., description="Slides total")
    discount_amount: float = Field(..., description="Discount on material and slides")
    finishing_cost: float = Field(..., description="area x finishing rate")
    transport_fee: float = Field(..., description="Flat transport fee")
    pre_tax_total: float = Field(..., description="Total before VAT")
    tax_amount: float = Field(..., description="VAT included in the total")
    total_price: float = Field(..., description="Tax-inclusive price")


class FieldErrorSchema(BaseModel):
    """A rejected form field."""

    kind: str = Field(..., description="Error category")
    field: str = Field(..., description="Offending field name")
    message: str = Field(..., description="Display message")


class QuoteResponse(BaseModel):
    """Response for a quote computation."""

    status: str = Field(..., description="incomplete, invalid or calculated")
    breakdown: BreakdownSchema | None = Field(default=None)
    error: FieldErrorSchema | None = Field(default=None)
    missing: list[str] = Field(
        default_factory=list, description="Required fields still empty"
    )
    currency: str = Field(default="DT")


class TransportZoneSchema(BaseModel):
    """A delivery zone."""

    code: str
    label: str
    fee: float


class RatesSchema(BaseModel):
    """The active price list."""

    facade_rate: float
    bare_rate: float
    finishing_rate: float
    chambranle_allowance: float
    tax_multiplier: float
    slide_prices: dict[str, float]
    transport_zones: list[TransportZoneSchema]
