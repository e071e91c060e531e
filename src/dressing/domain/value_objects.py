"""Value objects for the dressing pricing domain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SlideType(str, Enum):
    """Drawer-slide hardware families."""

    SCALA = "scala"
    METABOX = "metabox"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ValidationErrorKind(str, Enum):
    """Categories of input validation failures.

    - EMPTY_FIELD: A required field has no value yet
    - NON_POSITIVE: A dimension is zero or negative
    - NEGATIVE_COUNT: A count is below zero
    - OUT_OF_RANGE: A percentage falls outside [0, 100]
    - INVALID_NUMBER: The text cannot be read as a finite number
    """

    EMPTY_FIELD = "empty_field"
    NON_POSITIVE = "non_positive"
    NEGATIVE_COUNT = "negative_count"
    OUT_OF_RANGE = "out_of_range"
    INVALID_NUMBER = "invalid_number"


class UnknownZoneError(KeyError):
    """Raised when a transport zone code is not in the pricing table."""

    def __init__(self, code: str, available: list[str] | None = None) -> None:
        self.code = code
        self.available = available or []
        super().__init__(code)

    def __str__(self) -> str:
        if self.available:
            return (
                f"Unknown transport zone: {self.code}. "
                f"Available: {', '.join(self.available)}"
            )
        return f"Unknown transport zone: {self.code}"


class AmountOverflowError(ValueError):
    """Raised when a computed amount is too large to be a finite number.

    Attributes:
        field: Input field that drove the amount out of range.
        amount: Name of the overflowing amount (e.g. "area", "total_price").
    """

    def __init__(self, field: str, amount: str) -> None:
        self.field = field
        self.amount = amount
        super().__init__(f"{amount} is not a finite number (driven by {field})")


@dataclass(frozen=True)
class ValidationError:
    """A single rejected input field.

    Carries the offending field name and the kind of failure only; turning
    it into a sentence is left to the presentation layer.

    Attributes:
        kind: Category of the failure.
        field: Name of the offending field (e.g. "width", "slide_count").
        value: The rejected value, if one was supplied.
    """

    kind: ValidationErrorKind
    field: str
    value: Any = None

    @classmethod
    def empty_field(cls, field_name: str) -> "ValidationError":
        return cls(ValidationErrorKind.EMPTY_FIELD, field_name)

    @classmethod
    def non_positive(cls, field_name: str, value: Any = None) -> "ValidationError":
        return cls(ValidationErrorKind.NON_POSITIVE, field_name, value)

    @classmethod
    def negative_count(cls, field_name: str, value: Any = None) -> "ValidationError":
        return cls(ValidationErrorKind.NEGATIVE_COUNT, field_name, value)

    @classmethod
    def out_of_range(cls, field_name: str, value: Any = None) -> "ValidationError":
        return cls(ValidationErrorKind.OUT_OF_RANGE, field_name, value)

    @classmethod
    def invalid_number(cls, field_name: str, value: Any = None) -> "ValidationError":
        return cls(ValidationErrorKind.INVALID_NUMBER, field_name, value)


@dataclass(frozen=True)
class TransportZone:
    """Delivery region with a flat shipping fee."""

    code: str
    label: str
    fee: float

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Transport zone code must not be empty")
        if self.fee < 0:
            raise ValueError("Transport fee must be non-negative")


DEFAULT_TRANSPORT_ZONES: tuple[TransportZone, ...] = (
    TransportZone(code="tunis", label="Transport Tunis", fee=127.5),
    TransportZone(code="capbon", label="Transport Capbon", fee=292.5),
    TransportZone(code="sousse", label="Transport Sousse", fee=420.0),
    TransportZone(code="djerba", label="Transport Djerba", fee=1005.0),
)


def _default_slide_prices() -> dict[SlideType, float]:
    return {SlideType.SCALA: 100.0, SlideType.METABOX: 30.0}


@dataclass(frozen=True)
class PricingTable:
    """Lookup data used by the pricing engine.

    All amounts are in the shop currency (DT). The table is plain data so
    that zones and rates can be swapped without touching the formula.

    Attributes:
        facade_rate: Material rate T per m2 when a facade is included.
        bare_rate: Material rate T per m2 without a facade.
        slide_prices: Unit price per slide, by slide type.
        finishing_rate: Fixed finishing cost per m2, never discounted.
        chambranle_allowance: Extra material per dimension for a chambranle (m).
        tax_multiplier: VAT multiplier (1.19 for 19% VAT).
        transport_zones: Available delivery zones, first one is the default.
    """

    facade_rate: float = 450.0
    bare_rate: float = 360.0
    slide_prices: dict[SlideType, float] = field(default_factory=_default_slide_prices)
    finishing_rate: float = 30.0
    chambranle_allowance: float = 0.1
    tax_multiplier: float = 1.19
    transport_zones: tuple[TransportZone, ...] = DEFAULT_TRANSPORT_ZONES

    def __post_init__(self) -> None:
        for name in ("facade_rate", "bare_rate", "finishing_rate", "chambranle_allowance"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative number")
        if not math.isfinite(self.tax_multiplier) or self.tax_multiplier < 1:
            raise ValueError("tax_multiplier must be at least 1")
        missing = [s.value for s in SlideType if s not in self.slide_prices]
        if missing:
            raise ValueError(f"Missing slide prices for: {', '.join(missing)}")
        if any(price < 0 for price in self.slide_prices.values()):
            raise ValueError("Slide prices must be non-negative")
        if not self.transport_zones:
            raise ValueError("At least one transport zone is required")
        codes = [zone.code for zone in self.transport_zones]
        if len(set(codes)) != len(codes):
            raise ValueError("Transport zone codes must be unique")

    def __hash__(self) -> int:
        return hash(
            (
                self.facade_rate,
                self.bare_rate,
                tuple(sorted((k.value, v) for k, v in self.slide_prices.items())),
                self.finishing_rate,
                self.chambranle_allowance,
                self.tax_multiplier,
                self.transport_zones,
            )
        )

    @classmethod
    def default(cls) -> "PricingTable":
        """Reference price list of the workshop."""
        return cls()

    @property
    def default_zone(self) -> TransportZone:
        return self.transport_zones[0]

    @property
    def zone_codes(self) -> list[str]:
        return [zone.code for zone in self.transport_zones]

    def rate_for(self, has_facade: bool) -> float:
        """Material rate T for the facade option."""
        return self.facade_rate if has_facade else self.bare_rate

    def price_for(self, slide_type: SlideType) -> float:
        """Unit price of one slide of the given type."""
        return self.slide_prices[SlideType(slide_type)]

    def zone(self, code: str) -> TransportZone:
        """Look up a transport zone by code (case-insensitive).

        Raises:
            UnknownZoneError: If no zone has this code.
        """
        wanted = code.strip().lower()
        for zone in self.transport_zones:
            if zone.code == wanted:
                return zone
        raise UnknownZoneError(code, self.zone_codes)


@dataclass(frozen=True)
class CalculationInput:
    """Typed, fully parsed input of one price computation."""

    width: float
    height: float
    has_chambranle: bool
    has_facade: bool
    slide_type: SlideType
    slide_count: int
    transport_zone: TransportZone
    discount_percent: float = 0.0

    def validate(self) -> list[ValidationError]:
        """Validate input and return the errors in reporting order."""
        errors: list[ValidationError] = []
        if not _is_finite(self.width):
            errors.append(ValidationError.invalid_number("width", self.width))
        elif self.width <= 0:
            errors.append(ValidationError.non_positive("width", self.width))
        if not _is_finite(self.height):
            errors.append(ValidationError.invalid_number("height", self.height))
        elif self.height <= 0:
            errors.append(ValidationError.non_positive("height", self.height))
        if self.slide_count < 0:
            errors.append(ValidationError.negative_count("slide_count", self.slide_count))
        if not _is_finite(self.discount_percent):
            errors.append(
                ValidationError.invalid_number("discount_percent", self.discount_percent)
            )
        elif not 0 <= self.discount_percent <= 100:
            errors.append(
                ValidationError.out_of_range("discount_percent", self.discount_percent)
            )
        return errors

    @property
    def transport_fee(self) -> float:
        return self.transport_zone.fee


@dataclass(frozen=True)
class PriceBreakdown:
    """Immutable result of one price computation.

    Attributes:
        area: Priced surface in m2 (chambranle allowance included).
        base_material_cost: area x T.
        slides_cost: slide_count x unit slide price.
        discount_amount: Discount taken off the base price.
        finishing_cost: area x finishing rate, never discounted.
        transport_fee: Flat fee of the selected zone.
        total_price: Final tax-inclusive price.
        tax_multiplier: VAT multiplier used for total_price.
    """

    area: float
    base_material_cost: float
    slides_cost: float
    discount_amount: float
    finishing_cost: float
    transport_fee: float
    total_price: float
    tax_multiplier: float = 1.19

    @property
    def pre_tax_total(self) -> float:
        return (
            self.base_material_cost
            + self.slides_cost
            - self.discount_amount
            + self.finishing_cost
            + self.transport_fee
        )

    @property
    def tax_amount(self) -> float:
        return self.total_price - self.pre_tax_total

    def to_dict(self) -> dict[str, float]:
        return {
            "area": self.area,
            "base_material_cost": self.base_material_cost,
            "slides_cost": self.slides_cost,
            "discount_amount": self.discount_amount,
            "finishing_cost": self.finishing_cost,
            "transport_fee": self.transport_fee,
            "pre_tax_total": self.pre_tax_total,
            "tax_amount": self.tax_amount,
            "total_price": self.total_price,
        }


def _is_finite(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)
