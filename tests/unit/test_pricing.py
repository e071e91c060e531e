"""Unit tests for the dressing price calculator.

These tests verify:
- Area computation with and without chambranle
- Discount computation on the base price
- Total price formula and the reference quotes of the price list
- Monotonicity of the total in each input
"""

from dataclasses import replace

import pytest

from dressing.domain import (
    AmountOverflowError,
    CalculationInput,
    PriceCalculator,
    PricingTable,
    SlideType,
    TransportZone,
)


class TestComputeArea:
    """Tests for PriceCalculator.compute_area."""

    def test_without_chambranle(self, calculator: PriceCalculator) -> None:
        """Area is width x height without chambranle."""
        assert calculator.compute_area(2.0, 3.0, False) == 6.0

    def test_with_chambranle(self, calculator: PriceCalculator) -> None:
        """Chambranle adds 0.1 m to each dimension."""
        assert calculator.compute_area(2.0, 2.0, True) == pytest.approx(4.41)

    @pytest.mark.parametrize(
        "width,height",
        [(0.5, 0.5), (1.0, 2.4), (2.0, 2.0), (3.75, 2.6), (10.0, 0.3)],
    )
    def test_chambranle_identity(
        self, calculator: PriceCalculator, width: float, height: float
    ) -> None:
        """Chambranle area equals bare area + 0.1*(w+h) + 0.01."""
        with_frame = calculator.compute_area(width, height, True)
        bare = calculator.compute_area(width, height, False)
        assert with_frame == pytest.approx(bare + 0.1 * (width + height) + 0.01)

    def test_custom_allowance(self) -> None:
        """The allowance comes from the pricing table."""
        calculator = PriceCalculator(PricingTable(chambranle_allowance=0.2))
        assert calculator.compute_area(1.0, 1.0, True) == pytest.approx(1.44)


class TestComputeDiscountAmount:
    """Tests for PriceCalculator.compute_discount_amount."""

    def test_zero_percent_is_zero(self, calculator: PriceCalculator) -> None:
        """No discount at 0%."""
        amount = calculator.compute_discount_amount(4.41, True, SlideType.SCALA, 2, 0)
        assert amount == 0

    def test_full_discount_equals_base_price(self, calculator: PriceCalculator) -> None:
        """A 100% discount equals material plus slides exactly."""
        area = 4.41
        amount = calculator.compute_discount_amount(area, True, SlideType.SCALA, 2, 100)
        assert amount == area * 450 + 100 * 2

    def test_ten_percent(self, calculator: PriceCalculator) -> None:
        """10% of (4.41*450 + 200) is 218.45."""
        amount = calculator.compute_discount_amount(4.41, True, SlideType.SCALA, 2, 10)
        assert amount == pytest.approx(218.45)

    def test_uses_bare_rate_and_metabox_price(self, calculator: PriceCalculator) -> None:
        """Rate T=360 without facade, Metabox slides cost 30."""
        amount = calculator.compute_discount_amount(4.0, False, SlideType.METABOX, 3, 50)
        assert amount == pytest.approx((4.0 * 360 + 3 * 30) * 0.5)


class TestComputeTotalPrice:
    """Tests for PriceCalculator.compute_total_price."""

    def test_reference_with_chambranle(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """(2184.5 + 132.3 + 127.5) * 1.19 = 2908.717."""
        total = calculator.compute_total_price(reference_input, 0.0)
        assert total == pytest.approx(2908.717)

    def test_reference_without_chambranle(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """(2000 + 120 + 127.5) * 1.19 = 2674.525."""
        calculation = replace(reference_input, has_chambranle=False)
        total = calculator.compute_total_price(calculation, 0.0)
        assert total == pytest.approx(2674.525)

    def test_reference_with_discount(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """10% off the base: (2184.5 - 218.45 + 132.3 + 127.5) * 1.19."""
        total = calculator.compute_total_price(reference_input, 218.45)
        assert total == pytest.approx(2648.7615)

    def test_matches_single_multiplication(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """Both VAT terms add up to VAT on the whole pre-tax amount."""
        calculation = replace(reference_input, width=1.7, height=2.45, slide_count=5)
        area = calculator.compute_area(1.7, 2.45, True)
        expected = 1.19 * (area * 450 + 5 * 100 - 40.0 + area * 30 + 127.5)
        assert calculator.compute_total_price(calculation, 40.0) == pytest.approx(expected)

    def test_transport_fee_is_taxed(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """Moving from Tunis to Djerba adds (1005 - 127.5) * 1.19."""
        djerba = replace(
            reference_input, transport_zone=TransportZone("djerba", "Transport Djerba", 1005.0)
        )
        delta = calculator.compute_total_price(djerba, 0.0) - calculator.compute_total_price(
            reference_input, 0.0
        )
        assert delta == pytest.approx((1005.0 - 127.5) * 1.19)

    def test_rejects_nan_area(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """A NaN area is refused rather than priced."""
        calculation = replace(reference_input, width=float("nan"))
        with pytest.raises(ValueError, match="Area"):
            calculator.compute_total_price(calculation, 0.0)

    def test_rejects_negative_area(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """A negative area is refused rather than priced."""
        calculation = replace(reference_input, width=-3.0, has_chambranle=False)
        with pytest.raises(ValueError, match="Area"):
            calculator.compute_total_price(calculation, 0.0)

    def test_rejects_overflowing_area(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        calculation = replace(reference_input, width=1e200, height=1e200)
        with pytest.raises(AmountOverflowError) as exc_info:
            calculator.compute_total_price(calculation, 0.0)
        assert exc_info.value.field == "width"
        assert exc_info.value.amount == "area"

    def test_rejects_overflowing_total(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """The area is finite but area x T is not."""
        calculation = replace(reference_input, width=1e154, height=1e154)
        with pytest.raises(AmountOverflowError) as exc_info:
            calculator.compute_total_price(calculation, 0.0)
        assert exc_info.value.amount == "total_price"

    def test_rejects_overflowing_slide_count(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        calculation = replace(reference_input, slide_count=10**400)
        with pytest.raises(AmountOverflowError) as exc_info:
            calculator.compute_breakdown(calculation)
        assert exc_info.value.field == "slide_count"


class TestComputeBreakdown:
    """Tests for PriceCalculator.compute_breakdown."""

    def test_reference_breakdown(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """Every line of the reference quote is filled in."""
        breakdown = calculator.compute_breakdown(reference_input)
        assert breakdown.area == pytest.approx(4.41)
        assert breakdown.base_material_cost == pytest.approx(1984.5)
        assert breakdown.slides_cost == 200
        assert breakdown.discount_amount == 0
        assert breakdown.finishing_cost == pytest.approx(132.3)
        assert breakdown.transport_fee == 127.5
        assert breakdown.total_price == pytest.approx(2908.717)
        assert breakdown.pre_tax_total == pytest.approx(2444.3)
        assert breakdown.tax_amount == pytest.approx(464.417)

    def test_discounted_breakdown(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        """A 10% discount is reported and taken off the total."""
        breakdown = calculator.compute_breakdown(
            replace(reference_input, discount_percent=10.0)
        )
        assert breakdown.discount_amount == pytest.approx(218.45)
        assert breakdown.total_price == pytest.approx(2648.7615)

    def test_custom_table(self, reference_input: CalculationInput) -> None:
        """Rates are read from the table, not hard-coded."""
        table = PricingTable(facade_rate=500.0, finishing_rate=0.0, tax_multiplier=1.0)
        breakdown = PriceCalculator(table).compute_breakdown(reference_input)
        assert breakdown.total_price == pytest.approx(4.41 * 500 + 200 + 127.5)
        assert breakdown.tax_amount == pytest.approx(0.0, abs=1e-9)


class TestMonotonicity:
    """The total never decreases with size, slides or transport."""

    @staticmethod
    def _totals(calculator: PriceCalculator, inputs: list[CalculationInput]) -> list[float]:
        return [calculator.compute_breakdown(i).total_price for i in inputs]

    @pytest.mark.parametrize("field_name", ["width", "height"])
    def test_non_decreasing_in_dimensions(
        self,
        calculator: PriceCalculator,
        reference_input: CalculationInput,
        field_name: str,
    ) -> None:
        values = [0.3, 0.8, 1.5, 2.0, 3.2, 6.0]
        totals = self._totals(
            calculator, [replace(reference_input, **{field_name: v}) for v in values]
        )
        assert totals == sorted(totals)

    def test_non_decreasing_in_slide_count(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        totals = self._totals(
            calculator, [replace(reference_input, slide_count=n) for n in range(0, 12, 3)]
        )
        assert totals == sorted(totals)

    def test_non_decreasing_in_transport_fee(
        self,
        calculator: PriceCalculator,
        reference_input: CalculationInput,
        table: PricingTable,
    ) -> None:
        zones = sorted(table.transport_zones, key=lambda z: z.fee)
        totals = self._totals(
            calculator, [replace(reference_input, transport_zone=z) for z in zones]
        )
        assert totals == sorted(totals)

    def test_non_increasing_in_discount(
        self, calculator: PriceCalculator, reference_input: CalculationInput
    ) -> None:
        totals = self._totals(
            calculator,
            [replace(reference_input, discount_percent=p) for p in (0, 5, 12.5, 50, 100)],
        )
        assert totals == sorted(totals, reverse=True)
