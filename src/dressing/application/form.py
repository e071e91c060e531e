"""Form controller for the dressing calculator.

The controller owns the raw text of every form field. Each setter
recomputes the whole price from scratch and publishes a new immutable
FormSnapshot to subscribers; a published snapshot is never mutated.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from dressing.domain import (
    CalculationInput,
    PriceCalculator,
    PricingTable,
    SlideType,
    TransportZone,
    ValidationError,
)

from .commands import CalculateQuoteCommand
from .dtos import FormSnapshot, FormStatus
from .messages import describe

logger = logging.getLogger(__name__)

Listener = Callable[[FormSnapshot], None]

REQUIRED_FIELDS: tuple[str, ...] = ("width", "height", "slide_count")
NUMERIC_FIELDS: tuple[str, ...] = ("width", "height", "slide_count", "discount_percent")


@dataclass(frozen=True)
class StepperRange:
    """Bounds and increment of a numeric stepper."""

    minimum: float
    maximum: float
    step: float
    integer: bool = False


STEPPERS: dict[str, StepperRange] = {
    "width": StepperRange(0.0, 1000.0, 0.1),
    "height": StepperRange(0.0, 1000.0, 0.1),
    "slide_count": StepperRange(0.0, 1000.0, 1.0, integer=True),
    "discount_percent": StepperRange(0.0, 100.0, 0.1),
}


def parse_real(text: str) -> float:
    """Parse a decimal number, accepting a comma as separator.

    Raises:
        ValueError: If the text is not a finite number.
    """
    value = float(text.strip().replace(",", "."))
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


def parse_count(text: str) -> int:
    """Parse an integer count; decimal input is truncated toward zero.

    Raises:
        ValueError: If the text is not a number.
    """
    cleaned = text.strip()
    try:
        return int(cleaned)
    except ValueError:
        return int(parse_real(cleaned))


def format_number(value: float, integer: bool = False) -> str:
    if integer:
        return str(int(value))
    return format(value, "g")


class FormController:
    """Mutable calculator form with reactive recomputation.

    Example:
        form = FormController()
        form.subscribe(lambda snapshot: print(snapshot.status))
        form.set_width("2")
        form.set_height("2")
        assert form.snapshot.is_calculated
    """

    def __init__(
        self,
        calculator: PriceCalculator | None = None,
        table: PricingTable | None = None,
    ) -> None:
        if calculator is None:
            calculator = PriceCalculator(table)
        self.calculator = calculator
        self.table = calculator.table
        self._command = CalculateQuoteCommand(calculator)
        self._listeners: list[Listener] = []

        # Defaults of the calculator screen
        self._values: dict[str, str] = {
            "width": "",
            "height": "",
            "slide_count": "0",
            "discount_percent": "0",
        }
        self._has_chambranle = True
        self._has_facade = True
        self._slide_type = SlideType.SCALA
        self._transport_zone = self.table.default_zone

        self._snapshot = self._compute()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> FormSnapshot:
        """The last published snapshot."""
        return self._snapshot

    @property
    def field_errors(self) -> dict[str, str]:
        """Display message per rejected field (at most one field)."""
        error = self._snapshot.error
        if error is None:
            return {}
        return {error.field: describe(error)}

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    @property
    def has_chambranle(self) -> bool:
        return self._has_chambranle

    @property
    def has_facade(self) -> bool:
        return self._has_facade

    @property
    def slide_type(self) -> SlideType:
        return self._slide_type

    @property
    def transport_zone(self) -> TransportZone:
        return self._transport_zone

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_width(self, text: str) -> FormSnapshot:
        return self._set_text("width", text)

    def set_height(self, text: str) -> FormSnapshot:
        return self._set_text("height", text)

    def set_slide_count(self, text: str) -> FormSnapshot:
        return self._set_text("slide_count", text)

    def set_discount(self, text: str) -> FormSnapshot:
        return self._set_text("discount_percent", text)

    def set_chambranle(self, enabled: bool) -> FormSnapshot:
        self._has_chambranle = bool(enabled)
        return self._publish()

    def toggle_chambranle(self) -> FormSnapshot:
        return self.set_chambranle(not self._has_chambranle)

    def set_facade(self, enabled: bool) -> FormSnapshot:
        self._has_facade = bool(enabled)
        return self._publish()

    def toggle_facade(self) -> FormSnapshot:
        return self.set_facade(not self._has_facade)

    def set_slide_type(self, slide_type: SlideType | str) -> FormSnapshot:
        self._slide_type = SlideType(slide_type)
        return self._publish()

    def set_transport_zone(self, code: str) -> FormSnapshot:
        """Select a transport zone by code.

        Raises:
            UnknownZoneError: If the code is not in the pricing table.
        """
        self._transport_zone = self.table.zone(code)
        return self._publish()

    def increment(self, field_name: str) -> FormSnapshot:
        """Step a numeric field up by its increment."""
        return self._step(field_name, 1)

    def decrement(self, field_name: str) -> FormSnapshot:
        """Step a numeric field down by its increment."""
        return self._step(field_name, -1)

    # ------------------------------------------------------------------
    # Recomputation
    # ------------------------------------------------------------------

    def _set_text(self, field_name: str, text: str | None) -> FormSnapshot:
        self._values[field_name] = (text or "").strip()
        return self._publish()

    def _step(self, field_name: str, direction: int) -> FormSnapshot:
        if field_name not in STEPPERS:
            raise ValueError(
                f"Field {field_name!r} has no stepper. "
                f"Expected one of: {', '.join(NUMERIC_FIELDS)}"
            )
        stepper = STEPPERS[field_name]
        text = self._values[field_name]
        try:
            current = parse_real(text) if text else 0.0
        except ValueError:
            current = 0.0

        moved = current + direction * stepper.step
        if stepper.integer:
            moved = float(math.floor(moved))
        else:
            moved = round(moved, 2)
        moved = min(max(moved, stepper.minimum), stepper.maximum)

        return self._set_text(field_name, format_number(moved, stepper.integer))

    def _publish(self) -> FormSnapshot:
        self._snapshot = self._compute()
        for listener in list(self._listeners):
            listener(self._snapshot)
        return self._snapshot

    def _compute(self) -> FormSnapshot:
        missing = tuple(
            ValidationError.empty_field(name)
            for name in REQUIRED_FIELDS
            if not self._values[name]
        )
        if missing:
            return FormSnapshot(status=FormStatus.INCOMPLETE, missing=missing)

        parsed = self._parse()
        if isinstance(parsed, ValidationError):
            return self._invalid(parsed)

        result = self._command.execute(parsed)
        if not result.is_valid:
            return self._invalid(result.errors[0])

        return FormSnapshot(status=FormStatus.CALCULATED, breakdown=result.breakdown)

    def _parse(self) -> CalculationInput | ValidationError:
        numbers: dict[str, float] = {}
        for name in NUMERIC_FIELDS:
            text = self._values[name]
            try:
                if name == "slide_count":
                    numbers[name] = parse_count(text)
                elif name == "discount_percent" and not text:
                    numbers[name] = 0.0
                else:
                    numbers[name] = parse_real(text)
            except ValueError:
                return ValidationError.invalid_number(name, text)

        return CalculationInput(
            width=numbers["width"],
            height=numbers["height"],
            has_chambranle=self._has_chambranle,
            has_facade=self._has_facade,
            slide_type=self._slide_type,
            slide_count=int(numbers["slide_count"]),
            transport_zone=self._transport_zone,
            discount_percent=numbers["discount_percent"],
        )

    def _invalid(self, error: ValidationError) -> FormSnapshot:
        logger.debug(f"Form invalid: {error.kind.value} on {error.field}")
        return FormSnapshot(status=FormStatus.INVALID, error=error)
