"""Price list endpoints."""

from fastapi import APIRouter

from dressing.web.dependencies import PricingTableDep
from dressing.web.schemas.responses import RatesSchema, TransportZoneSchema

router = APIRouter(tags=["rates"])


@router.get("/zones", response_model=list[TransportZoneSchema])
async def list_zones(table: PricingTableDep) -> list[TransportZoneSchema]:
    """List transport zones with their flat fees."""
    return [
        TransportZoneSchema(code=zone.code, label=zone.label, fee=zone.fee)
        for zone in table.transport_zones
    ]


@router.get("/rates", response_model=RatesSchema)
async def get_rates(table: PricingTableDep) -> RatesSchema:
    """Return the active price list."""
    return RatesSchema(
        facade_rate=table.facade_rate,
        bare_rate=table.bare_rate,
        finishing_rate=table.finishing_rate,
        chambranle_allowance=table.chambranle_allowance,
        tax_multiplier=table.tax_multiplier,
        slide_prices={t.value: price for t, price in table.slide_prices.items()},
        transport_zones=await list_zones(table),
    )
