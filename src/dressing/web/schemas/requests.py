"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from dressing.domain import SlideType


class QuoteRequest(BaseModel):
    """Raw calculator form values.

    Numeric fields accept either numbers or the text typed in the form, so
    incomplete and unparseable input is reported the same way the form does.
    """

    width: str | float | None = Field(default=None, description="Width in meters")
    height: str | float | None = Field(default=None, description="Height in meters")
    has_chambranle: bool = Field(default=True, description="Include a chambranle")
    has_facade: bool = Field(default=True, description="Include a facade")
    slide_type: SlideType = Field(default=SlideType.SCALA, description="Slide hardware")
    slide_count: str | int | None = Field(default="0", description="Number of slides")
    transport_zone: str | None = Field(
        default=None, description="Transport zone code (default: first zone)"
    )
    discount_percent: str | float | None = Field(
        default="0", description="Discount in percent"
    )
