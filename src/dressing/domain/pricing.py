"""Dressing price calculation.

Pricing formula (all amounts in DT):

    area     = (w + a) * (h + a)   with chambranle, a = allowance (0.1 m)
             = w * h               without chambranle
    base     = area * T + slide_price * slide_count
    discount = base * discount_percent / 100
    total    = (base - discount) * 1.19 + (area * 30 + transport) * 1.19

T is 450 with a facade and 360 without. Both chambranle variants share the
same post-area formula; only the area differs.
"""

from __future__ import annotations

import logging
import math

from .value_objects import (
    AmountOverflowError,
    CalculationInput,
    PriceBreakdown,
    PricingTable,
    SlideType,
)

logger = logging.getLogger(__name__)


class PriceCalculator:
    """Pure pricing functions bound to a pricing table."""

    def __init__(self, table: PricingTable | None = None) -> None:
        self.table = table or PricingTable.default()

    def compute_area(self, width: float, height: float, has_chambranle: bool) -> float:
        """Priced surface in m2.

        A chambranle adds the allowance to each dimension.
        """
        if has_chambranle:
            allowance = self.table.chambranle_allowance
            return (width + allowance) * (height + allowance)
        return width * height

    def compute_discount_amount(
        self,
        area: float,
        has_facade: bool,
        slide_type: SlideType,
        slide_count: int,
        discount_percent: float,
    ) -> float:
        """Discount on the pre-tax base price (material plus slides).

        Transport and finishing are never discounted.
        """
        base_price = self._base_price(area, has_facade, slide_type, slide_count)
        return base_price * (discount_percent / 100)

    def compute_total_price(
        self, calculation: CalculationInput, discount_amount: float
    ) -> float:
        """Final tax-inclusive price.

        VAT is applied separately to the discounted base and to the
        finishing-plus-transport part, as in the published price list.

        Raises:
            ValueError: If the computed area is negative or NaN.
            AmountOverflowError: If the area or the total overflows.
        """
        area = self.compute_area(
            calculation.width, calculation.height, calculation.has_chambranle
        )
        self._check_area(area)
        tax = self.table.tax_multiplier
        core = (
            self._base_price(
                area,
                calculation.has_facade,
                calculation.slide_type,
                calculation.slide_count,
            )
            - discount_amount
        )
        surcharge = area * self.table.finishing_rate
        total = core * tax + (surcharge + calculation.transport_fee) * tax
        if not math.isfinite(total):
            raise AmountOverflowError("width", "total_price")
        return total

    def compute_breakdown(self, calculation: CalculationInput) -> PriceBreakdown:
        """Evaluate the full breakdown for already validated input.

        Raises:
            AmountOverflowError: If dimensions or counts are too large to
                price with finite amounts.
        """
        area = self.compute_area(
            calculation.width, calculation.height, calculation.has_chambranle
        )
        self._check_area(area)
        discount_amount = self.compute_discount_amount(
            area,
            calculation.has_facade,
            calculation.slide_type,
            calculation.slide_count,
            calculation.discount_percent,
        )
        total_price = self.compute_total_price(calculation, discount_amount)

        logger.debug(
            f"Priced {calculation.width}x{calculation.height} m "
            f"(area={area:.4f}, discount={discount_amount:.2f}): {total_price:.3f}"
        )

        return PriceBreakdown(
            area=area,
            base_material_cost=area * self.table.rate_for(calculation.has_facade),
            slides_cost=self._slides_cost(calculation.slide_type, calculation.slide_count),
            discount_amount=discount_amount,
            finishing_cost=area * self.table.finishing_rate,
            transport_fee=calculation.transport_fee,
            total_price=total_price,
            tax_multiplier=self.table.tax_multiplier,
        )

    def _base_price(
        self,
        area: float,
        has_facade: bool,
        slide_type: SlideType,
        slide_count: int,
    ) -> float:
        rate = self.table.rate_for(has_facade)
        return area * rate + self._slides_cost(slide_type, slide_count)

    def _slides_cost(self, slide_type: SlideType, slide_count: int) -> float:
        try:
            cost = self.table.price_for(slide_type) * slide_count
        except OverflowError:
            raise AmountOverflowError("slide_count", "slides_cost") from None
        if not math.isfinite(cost):
            raise AmountOverflowError("slide_count", "slides_cost")
        return cost

    @staticmethod
    def _check_area(area: float) -> None:
        if math.isinf(area):
            raise AmountOverflowError("width", "area")
        if math.isnan(area) or area < 0:
            raise ValueError(f"Area must be a non-negative number, got {area}")
