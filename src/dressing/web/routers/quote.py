"""Quote computation endpoint."""

from fastapi import APIRouter

from dressing.infrastructure import JsonExporter
from dressing.web.dependencies import FormControllerDep
from dressing.web.schemas.requests import QuoteRequest
from dressing.web.schemas.responses import QuoteResponse

router = APIRouter(prefix="/quote", tags=["quote"])


def _as_text(value: str | float | int | None) -> str:
    if value is None:
        return ""
    return str(value)


@router.post("", response_model=QuoteResponse)
async def compute_quote(request: QuoteRequest, form: FormControllerDep) -> QuoteResponse:
    """Price a dressing from raw form values.

    Incomplete and invalid forms are not HTTP errors: the response carries
    the form status and the rejected field instead of a breakdown.

    Raises:
        UnknownZoneError: If the transport zone code does not exist (404).
    """
    if request.transport_zone:
        form.set_transport_zone(request.transport_zone)
    form.set_chambranle(request.has_chambranle)
    form.set_facade(request.has_facade)
    form.set_slide_type(request.slide_type)
    form.set_slide_count(_as_text(request.slide_count))
    form.set_discount(_as_text(request.discount_percent))
    form.set_width(_as_text(request.width))
    snapshot = form.set_height(_as_text(request.height))

    return QuoteResponse.model_validate(JsonExporter().snapshot_dict(snapshot))
