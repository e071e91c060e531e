"""Display messages for validation errors."""

from dressing.domain import ValidationError, ValidationErrorKind

FIELD_LABELS: dict[str, str] = {
    "width": "width",
    "height": "height",
    "slide_count": "slide count",
    "discount_percent": "discount",
    "transport_zone": "transport zone",
}


def field_label(field_name: str) -> str:
    return FIELD_LABELS.get(field_name, field_name.replace("_", " "))


def describe(error: ValidationError) -> str:
    """Turn a validation error into a user-facing sentence."""
    label = field_label(error.field)
    if error.kind is ValidationErrorKind.EMPTY_FIELD:
        return f"{label} is required"
    if error.kind is ValidationErrorKind.NON_POSITIVE:
        return f"{label} must be greater than 0"
    if error.kind is ValidationErrorKind.NEGATIVE_COUNT:
        return f"{label} must be non-negative"
    if error.kind is ValidationErrorKind.OUT_OF_RANGE:
        return f"{label} must be between 0 and 100"
    return f"{label} must be a number"
