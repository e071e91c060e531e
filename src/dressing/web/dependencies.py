"""FastAPI dependency injection for pricing services."""

from typing import Annotated

from fastapi import Depends, Request

from dressing.application import FormController
from dressing.domain import PriceCalculator, PricingTable


def get_pricing_table(request: Request) -> PricingTable:
    """The pricing table the application was created with."""
    return request.app.state.pricing_table


def get_form_controller(
    table: Annotated[PricingTable, Depends(get_pricing_table)],
) -> FormController:
    """A fresh form per request; forms are never shared."""
    return FormController(PriceCalculator(table))


PricingTableDep = Annotated[PricingTable, Depends(get_pricing_table)]
FormControllerDep = Annotated[FormController, Depends(get_form_controller)]
