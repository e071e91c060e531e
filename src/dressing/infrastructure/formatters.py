"""Output formatters for dressing quotes."""

from __future__ import annotations

import json
from typing import Any

from dressing.application.dtos import FormSnapshot
from dressing.application.messages import describe
from dressing.domain import CalculationInput, PriceBreakdown, PricingTable

CURRENCY = "DT"


def _money(amount: float) -> str:
    return f"{amount:,.3f} {CURRENCY}"


class QuoteFormatter:
    """Formats a price breakdown as a text receipt."""

    def __init__(self, table: PricingTable | None = None) -> None:
        self.table = table or PricingTable.default()

    def format(self, calculation: CalculationInput, breakdown: PriceBreakdown) -> str:
        rate = self.table.rate_for(calculation.has_facade)
        slide_price = self.table.price_for(calculation.slide_type)
        tax_percent = round((breakdown.tax_multiplier - 1) * 100)

        options = (
            f"{'With' if calculation.has_chambranle else 'Without'} chambranle, "
            f"{'with' if calculation.has_facade else 'without'} facade"
        )
        lines = [
            "DRESSING QUOTE",
            "=" * 60,
            f"{'Dimensions':<24} {calculation.width:g} m x {calculation.height:g} m",
            f"{'Area':<24} {breakdown.area:.4f} m2",
            f"{'Type':<24} {options}",
            "-" * 60,
            f"{'Material (T=' + format(rate, 'g') + ')':<24} {_money(breakdown.base_material_cost)}",
            f"{'Slides':<24} {calculation.slide_count} x {calculation.slide_type.label} "
            f"({slide_price:g} {CURRENCY} each) = {_money(breakdown.slides_cost)}",
        ]
        if calculation.discount_percent > 0:
            lines.append(
                f"{'Discount (' + format(calculation.discount_percent, 'g') + '%)':<24} "
                f"-{_money(breakdown.discount_amount)}"
            )
        lines.extend(
            [
                f"{'Finishing':<24} {_money(breakdown.finishing_cost)}",
                f"{calculation.transport_zone.label:<24} {_money(breakdown.transport_fee)}",
                "-" * 60,
                f"{'Subtotal (excl. VAT)':<24} {_money(breakdown.pre_tax_total)}",
                f"{'VAT (' + str(tax_percent) + '%)':<24} {_money(breakdown.tax_amount)}",
                "=" * 60,
                f"{'TOTAL (incl. VAT)':<24} {_money(breakdown.total_price)}",
            ]
        )
        return "\n".join(lines)


class RatesFormatter:
    """Formats the price list and the pricing formula."""

    def format(self, table: PricingTable) -> str:
        tax_percent = round((table.tax_multiplier - 1) * 100)
        lines = [
            "PRICE LIST",
            "=" * 60,
            f"{'T with facade':<24} {table.facade_rate:g} {CURRENCY}/m2",
            f"{'T without facade':<24} {table.bare_rate:g} {CURRENCY}/m2",
            f"{'Finishing':<24} {table.finishing_rate:g} {CURRENCY}/m2",
            f"{'Chambranle allowance':<24} {table.chambranle_allowance:g} m per side",
        ]
        for slide_type, price in table.slide_prices.items():
            lines.append(f"{'Slide ' + slide_type.label:<24} {price:g} {CURRENCY}")
        lines.extend(
            [
                f"{'VAT':<24} {tax_percent}%",
                "-" * 60,
                "Total = ((area*T + slide_price*slides) - discount) * "
                f"{table.tax_multiplier:g}",
                f"        + (area*{table.finishing_rate:g} + transport) * "
                f"{table.tax_multiplier:g}",
            ]
        )
        return "\n".join(lines)


class ZoneListFormatter:
    """Formats the transport zones as a table."""

    def format(self, table: PricingTable) -> str:
        lines = [
            f"{'Code':<12} {'Label':<24} {'Fee'}",
            "-" * 50,
        ]
        for zone in table.transport_zones:
            lines.append(f"{zone.code:<12} {zone.label:<24} {_money(zone.fee)}")
        return "\n".join(lines)


class JsonExporter:
    """Serialises quotes and form snapshots to JSON."""

    def quote_dict(
        self, calculation: CalculationInput, breakdown: PriceBreakdown
    ) -> dict[str, Any]:
        return {
            "input": {
                "width": calculation.width,
                "height": calculation.height,
                "has_chambranle": calculation.has_chambranle,
                "has_facade": calculation.has_facade,
                "slide_type": calculation.slide_type.value,
                "slide_count": calculation.slide_count,
                "transport_zone": calculation.transport_zone.code,
                "discount_percent": calculation.discount_percent,
            },
            "breakdown": breakdown.to_dict(),
            "currency": CURRENCY,
        }

    def snapshot_dict(self, snapshot: FormSnapshot) -> dict[str, Any]:
        error = snapshot.error
        return {
            "status": snapshot.status.value,
            "breakdown": snapshot.breakdown.to_dict() if snapshot.breakdown else None,
            "error": (
                {
                    "kind": error.kind.value,
                    "field": error.field,
                    "message": describe(error),
                }
                if error
                else None
            ),
            "missing": [m.field for m in snapshot.missing],
        }

    def export_quote(self, calculation: CalculationInput, breakdown: PriceBreakdown) -> str:
        return json.dumps(self.quote_dict(calculation, breakdown), indent=2)
